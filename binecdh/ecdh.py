"""Elliptic-curve Diffie-Hellman key agreement over binary curves."""

from __future__ import annotations

from typing import Union

from binecdh.curve import BinaryCurve, Point, Scalar
from binecdh.gf2 import to_bytes_lsb

PublicKey = Union[Point, bytes, bytearray, memoryview]


def _as_point(curve: BinaryCurve, public_key: PublicKey) -> Point:
    if isinstance(public_key, Point):
        return public_key
    if isinstance(public_key, (bytes, bytearray, memoryview)):
        return curve.decode_point(public_key)
    raise TypeError(
        f"public key must be a Point or encoded bytes, not {type(public_key).__name__}"
    )


def generate_public_key(curve: BinaryCurve, private_key: Scalar) -> Point:
    """Return ``private_key * G`` for the curve's base point G."""
    return curve.multiply(curve.generator(), private_key)


def verify_public_key(curve: BinaryCurve, public_key: PublicKey) -> bool:
    """Check that a public key is finite, on the curve and in G's subgroup."""
    point = _as_point(curve, public_key)
    if point.is_infinity():
        return False
    if not curve.contains(point):
        return False
    return curve.multiply(point, curve.order).is_infinity()


def generate_shared_secret(
    curve: BinaryCurve, private_key: Scalar, public_key: PublicKey
) -> bytes:
    """Return the x coordinate of ``private_key * public_key``, LSB first.

    The public key is not validated here; use :func:`verify_public_key`.
    """
    point = curve.multiply(_as_point(curve, public_key), private_key)
    return to_bytes_lsb(point.x, curve.coordinate_bytes())