import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from binecdh.curve import BinaryCurve, Point, named_curve

CURVE_NAMES = ["K-233", "K-163", "B-163", "K-283"]

K233_GX_LSB = bytes.fromhex("2661adef6e9d4c0af56bc219a4639514f42ff229f11a737e3a85ba327201")
K233_GY_LSB = bytes.fromhex("a3e6fa5610c1e0569beb8af19bcda827c4675a550ff7b719e8ec7d53db01")


@pytest.mark.parametrize("name", CURVE_NAMES)
def test_order_times_generator_is_infinity(name):
    curve = named_curve(name)
    result = curve.multiply(curve.generator(), curve.order)
    assert result == Point(0, 0)
    assert result.is_infinity()


def test_order_as_lsb_bytes_gives_infinity_k163():
    curve = named_curve("K-163")
    order_bytes = bytes.fromhex("efa5f8990dcce0a2080102" + "00" * 9 + "04")
    assert curve.multiply(curve.generator(), order_bytes).is_infinity()


@pytest.mark.parametrize("name", CURVE_NAMES)
def test_generator_on_curve(name):
    curve = named_curve(name)
    assert curve.contains(curve.generator()) is True


def test_tampered_generator_not_on_curve():
    curve = named_curve("K-283")
    g = curve.generator()
    assert curve.contains(Point(g.x ^ 1, g.y)) is False


def test_infinity_is_on_curve():
    assert named_curve("K-233").contains(Point(0, 0)) is True


@pytest.mark.parametrize("name", CURVE_NAMES)
def test_double_stays_on_curve_and_matches_add(name):
    curve = named_curve(name)
    g = curve.generator()
    doubled = curve.double(g)
    assert curve.contains(doubled)
    assert curve.add(g, g) == doubled
    assert curve.multiply(g, 2) == doubled
    assert curve.multiply(g, b"\x02") == doubled


def test_add_commutative_and_on_curve():
    curve = named_curve("B-163")
    g = curve.generator()
    g2 = curve.double(g)
    s1 = curve.add(g, g2)
    s2 = curve.add(g2, g)
    assert s1 == s2
    assert curve.contains(s1)
    assert curve.multiply(g, 3) == s1


def test_infinity_is_identity():
    curve = named_curve("K-163")
    g = curve.generator()
    inf = Point(0, 0)
    assert curve.add(inf, g) == g
    assert curve.add(g, inf) == g
    assert curve.double(inf) == inf
    assert curve.add(inf, inf) == inf


def test_point_plus_negation_is_infinity():
    curve = named_curve("K-233")
    g = curve.generator()
    negated = Point(g.x, g.x ^ g.y)
    assert curve.contains(negated)
    assert curve.add(g, negated).is_infinity()


def test_order_minus_one_gives_negation():
    curve = named_curve("K-163")
    g = curve.generator()
    assert curve.multiply(g, curve.order - 1) == Point(g.x, g.x ^ g.y)


def test_zero_scalar_gives_infinity():
    curve = named_curve("K-163")
    assert curve.multiply(curve.generator(), 0).is_infinity()
    assert curve.multiply(curve.generator(), b"\x00\x00").is_infinity()


def test_one_scalar_gives_point():
    curve = named_curve("B-163")
    g = curve.generator()
    assert curve.multiply(g, 1) == g


def test_negative_scalar_rejected():
    curve = named_curve("K-163")
    with pytest.raises(ValueError):
        curve.multiply(curve.generator(), -1)


def test_bad_scalar_type_rejected():
    curve = named_curve("K-163")
    with pytest.raises(TypeError):
        curve.multiply(curve.generator(), 1.5)


@settings(max_examples=15, deadline=None)
@given(st.integers(min_value=0, max_value=2**16), st.integers(min_value=0, max_value=2**16))
def test_scalar_multiplication_distributes(m, n):
    curve = named_curve("K-163")
    g = curve.generator()
    assert curve.multiply(g, m + n) == curve.add(curve.multiply(g, m), curve.multiply(g, n))


@pytest.mark.parametrize(
    "name, coordinate, encoded",
    [("K-233", 30, 62), ("K-163", 21, 45), ("B-163", 21, 45), ("K-283", 36, 76)],
)
def test_sizes(name, coordinate, encoded):
    curve = named_curve(name)
    assert curve.coordinate_bytes() == coordinate
    assert curve.encoded_point_bytes() == encoded


def test_encode_generator_layout():
    curve = named_curve("K-233")
    data = curve.encode_point(curve.generator())
    assert data == K233_GX_LSB + b"\x00\x00" + K233_GY_LSB


@pytest.mark.parametrize("name", CURVE_NAMES)
def test_encode_decode_round_trip(name):
    curve = named_curve(name)
    p = curve.double(curve.generator())
    assert curve.decode_point(curve.encode_point(p)) == p


def test_decode_wrong_length():
    curve = named_curve("K-233")
    with pytest.raises(ValueError):
        curve.decode_point(bytes(64))


def test_encode_too_large_coordinate():
    curve = named_curve("K-163")
    with pytest.raises(ValueError):
        curve.encode_point(Point(1 << 200, 1))


def test_named_curve_lookup():
    curve = named_curve("k-163")
    assert curve.name == "K-163"
    assert curve.cofactor == 2
    assert curve.a == 1 and curve.b == 1


def test_named_curve_unknown():
    with pytest.raises(ValueError):
        named_curve("P-256")


def test_custom_curve_generator():
    curve = BinaryCurve(
        name="toy",
        modulus=0b10011,
        a=1,
        b=1,
        gx=0b0010,
        gy=0b1111,
        order=1,
        cofactor=1,
    )
    assert curve.generator() == Point(0b0010, 0b1111)
    assert curve.coordinate_bytes() == 1
    assert curve.encoded_point_bytes() == 9