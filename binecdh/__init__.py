"""Elliptic-curve Diffie-Hellman over binary fields GF(2^m): field arithmetic, curves, key agreement."""

__version__ = "0.1.0"
__all__ = ["gf2", "curve", "ecdh"]