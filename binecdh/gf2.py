"""Arithmetic on polynomials over GF(2).

A polynomial is an ``int`` whose bit ``i`` is the coefficient of ``x**i``.
Byte strings hold polynomials least significant byte first.
"""

from __future__ import annotations


def _require_polynomial(value: int, name: str = "value") -> None:
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")


def degree(value: int) -> int:
    """Return the degree of a polynomial, or -1 for the zero polynomial."""
    _require_polynomial(value)
    return value.bit_length() - 1


def multiply(a: int, b: int) -> int:
    """Carry-less product of two polynomials, without reduction."""
    _require_polynomial(a, "a")
    _require_polynomial(b, "b")
    if a.bit_length() < b.bit_length():
        a, b = b, a
    result = 0
    shift = 0
    while b:
        if b & 1:
            result ^= a << shift
        b >>= 1
        shift += 1
    return result


def reduce(value: int, modulus: int) -> int:
    """Remainder of ``value`` divided by ``modulus``.

    A zero modulus leaves the value unchanged.
    """
    _require_polynomial(value)
    _require_polynomial(modulus, "modulus")
    mod_degree = modulus.bit_length() - 1
    if mod_degree < 0:
        return value
    value_degree = value.bit_length() - 1
    while value_degree >= mod_degree:
        value ^= modulus << (value_degree - mod_degree)
        value_degree = value.bit_length() - 1
    return value


def mulmod(a: int, b: int, modulus: int) -> int:
    """Product of two polynomials reduced by ``modulus``."""
    return reduce(multiply(a, b), modulus)


def inverse(value: int, modulus: int) -> int:
    """Multiplicative inverse of ``value`` modulo ``modulus``.

    Raises ZeroDivisionError for zero and ValueError when ``value`` shares
    a factor with ``modulus``.
    """
    _require_polynomial(value)
    _require_polynomial(modulus, "modulus")
    if modulus.bit_length() < 2:
        raise ValueError("modulus must have degree at least 1")
    if reduce(value, modulus) == 0:
        raise ZeroDivisionError("zero has no multiplicative inverse")

    u, v = value, modulus
    g1, g2 = 1, 0
    while u.bit_length() > 1:
        shift = u.bit_length() - v.bit_length()
        if shift < 0:
            u, v = v, u
            g1, g2 = g2, g1
            shift = -shift
        u ^= v << shift
        g1 ^= g2 << shift
    if u == 0:
        raise ValueError(f"{value:#x} is not invertible modulo {modulus:#x}")
    return reduce(g1, modulus)


def from_bytes_lsb(data: bytes) -> int:
    """Read a polynomial stored least significant byte first."""
    return int.from_bytes(bytes(data), "little")


def to_bytes_lsb(value: int, length: int) -> bytes:
    """Store a polynomial in ``length`` bytes, least significant byte first."""
    _require_polynomial(value)
    if length < 0:
        raise ValueError("length must be non-negative")
    try:
        return value.to_bytes(length, "little")
    except OverflowError as exc:
        raise ValueError(f"{value:#x} does not fit in {length} bytes") from exc