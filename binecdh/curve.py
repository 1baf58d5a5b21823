"""Elliptic curves in short Weierstrass form over binary fields GF(2^m).

A curve is ``y^2 + xy = x^3 + a*x^2 + b``. The point at infinity is
represented by the coordinates ``(0, 0)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from binecdh.gf2 import from_bytes_lsb, inverse, mulmod, to_bytes_lsb

Scalar = Union[int, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Point:
    """An affine point; ``(0, 0)`` stands for the point at infinity."""

    x: int = 0
    y: int = 0

    def is_infinity(self) -> bool:
        """True when this is the point at infinity."""
        return self.x == 0 and self.y == 0


INFINITY = Point(0, 0)


@dataclass(frozen=True)
class BinaryCurve:
    """Curve parameters; every field element is a polynomial held in an int."""

    name: str
    modulus: int
    a: int
    b: int
    gx: int
    gy: int
    order: int
    cofactor: int

    def generator(self) -> Point:
        """The base point G."""
        return Point(self.gx, self.gy)

    def coordinate_bytes(self) -> int:
        """Number of bytes holding one coordinate."""
        return (self.modulus.bit_length() + 7) // 8

    def _y_offset(self) -> int:
        return (self.coordinate_bytes() + 7) & ~7

    def encoded_point_bytes(self) -> int:
        """Number of bytes of an encoded point: x, padding to 8 bytes, then y."""
        return self._y_offset() + self.coordinate_bytes()

    def double(self, point: Point) -> Point:
        """Return ``2 * point``."""
        if point.x == 0:
            return INFINITY
        m = self.modulus
        x1, y1 = point.x, point.y
        lam = mulmod(y1, inverse(x1, m), m) ^ x1
        x3 = mulmod(lam, lam, m) ^ lam ^ self.a
        y3 = mulmod(lam, x3 ^ x1, m) ^ x3 ^ y1
        return Point(x3, y3)

    def add(self, p: Point, q: Point) -> Point:
        """Return ``p + q``."""
        if p == q:
            return self.double(p)
        if p.is_infinity():
            return q
        if q.is_infinity():
            return p
        x1, y1 = p.x, p.y
        x2, y2 = q.x, q.y
        if x1 == x2 and y2 == x1 ^ y1:
            return INFINITY
        m = self.modulus
        lam = mulmod(y1 ^ y2, inverse(x1 ^ x2, m), m)
        x3 = mulmod(lam, lam, m) ^ lam ^ x1 ^ x2 ^ self.a
        y3 = mulmod(lam, x1 ^ x3, m) ^ x3 ^ y1
        return Point(x3, y3)

    def multiply(self, point: Point, scalar: Scalar) -> Point:
        """Return ``scalar * point``.

        The scalar is a non-negative int or a byte string stored least
        significant byte first.
        """
        if isinstance(scalar, (bytes, bytearray, memoryview)):
            k = from_bytes_lsb(scalar)
        elif isinstance(scalar, int) and not isinstance(scalar, bool):
            k = scalar
        else:
            raise TypeError(f"scalar must be an int or bytes, not {type(scalar).__name__}")
        if k < 0:
            raise ValueError("scalar must be non-negative")
        result = INFINITY
        for bit in bin(k)[2:] if k else "":
            result = self.double(result)
            if bit == "1":
                result = self.add(result, point)
        return result

    def contains(self, point: Point) -> bool:
        """True when the point satisfies the curve equation or is infinity."""
        if point.is_infinity():
            return True
        m = self.modulus
        x, y = point.x, point.y
        lhs = mulmod(y, y, m) ^ mulmod(x, y, m)
        x2 = mulmod(x, x, m)
        rhs = mulmod(x2, x, m) ^ mulmod(self.a, x2, m) ^ self.b
        return lhs == rhs

    def encode_point(self, point: Point) -> bytes:
        """Serialize a point: x, zero padding to a multiple of 8, then y."""
        size = self.coordinate_bytes()
        padding = bytes(self._y_offset() - size)
        return to_bytes_lsb(point.x, size) + padding + to_bytes_lsb(point.y, size)

    def decode_point(self, data: bytes) -> Point:
        """Read a point written by :meth:`encode_point`."""
        raw = bytes(data)
        if len(raw) != self.encoded_point_bytes():
            raise ValueError(
                f"encoded point must be {self.encoded_point_bytes()} bytes, got {len(raw)}"
            )
        size = self.coordinate_bytes()
        offset = self._y_offset()
        return Point(from_bytes_lsb(raw[:size]), from_bytes_lsb(raw[offset:offset + size]))


def _lsb(hex_digits: str) -> int:
    return from_bytes_lsb(bytes.fromhex(hex_digits))


_CURVES = {
    "K-233": BinaryCurve(
        name="K-233",
        modulus=(1 << 233) | (1 << 74) | 1,
        a=0,
        b=1,
        gx=_lsb("2661adef6e9d4c0af56bc219a4639514f42ff229f11a737e3a85ba327201"),
        gy=_lsb("a3e6fa5610c1e0569beb8af19bcda827c4675a550ff7b719e8ec7d53db01"),
        order=_lsb("dfab73f1d51afb6ed4bc15b95b9d06" + "00" * 13 + "8000"),
        cofactor=4,
    ),
    "K-163": BinaryCurve(
        name="K-163",
        modulus=(1 << 163) | (1 << 7) | (1 << 6) | (1 << 3) | 1,
        a=1,
        b=1,
        gx=_lsb("e8ee945c5e6d4ede93d707aaac11bc7b53c013fe02"),
        gy=_lsb("d9a3dacc38d53605802e1f3258ff385db00f078902"),
        order=_lsb("efa5f8990dcce0a2080102" + "00" * 9 + "04"),
        cofactor=2,
    ),
    "B-163": BinaryCurve(
        name="B-163",
        modulus=(1 << 163) | (1 << 7) | (1 << 6) | (1 << 3) | 1,
        a=1,
        b=_lsb("fd05324a74782f5110eb8114ca53c9b80719600a02"),
        gx=_lsb("363e34e8374699d4681199a07ed5a28662a1ebf003"),
        gy=_lsb("f12473790c5c1cb145d5cda24f09a0716cbc1fd500"),
        order=_lsb("334c23a4120ce777fe9202" + "00" * 9 + "04"),
        cofactor=2,
    ),
    "K-283": BinaryCurve(
        name="K-283",
        modulus=(1 << 283) | (1 << 12) | (1 << 7) | (1 << 5) | 1,
        a=0,
        b=1,
        gx=_lsb("3628495824acc2b0136987167a56c1235f26cd53e588f162813b1a3f8844ca783f210305"),
        gy=_lsb("5922dd776111344e366259e4984618e8c0457ee86f42e5075df9908d319e1c0f38dacc01"),
        order=_lsb("613c161e061e45947fff5d267775d02eaee9" + "ff" * 17 + "01"),
        cofactor=4,
    ),
}


def named_curve(name: str) -> BinaryCurve:
    """Return one of the built-in curves: K-163, B-163, K-233 or K-283."""
    try:
        return _CURVES[name.strip().upper()]
    except KeyError:
        known = ", ".join(sorted(_CURVES))
        raise ValueError(f"unknown curve {name!r}; known curves: {known}") from None