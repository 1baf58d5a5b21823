# binecdh

Elliptic-curve Diffie-Hellman over binary fields GF(2^m). It is written in
pure Python and has no dependencies.

The package has three modules:

- `binecdh.gf2` does arithmetic on polynomials over GF(2). Each polynomial
  is a non-negative Python `int` whose bit *i* is the coefficient of x^i.
  The module provides `degree`, `multiply` (a carry-less product), `reduce`,
  `mulmod` and `inverse`. It also provides `from_bytes_lsb` and `to_bytes_lsb`
  for the least-significant-byte-first encoding.
- `binecdh.curve` provides `BinaryCurve` and `Point` for curves of the form
  y² + xy = x³ + ax² + b. A curve offers `generator`, `double`, `add`,
  `multiply`, `contains`, `encode_point`, `decode_point`, `coordinate_bytes`
  and `encoded_point_bytes`. `named_curve` returns one of the built-in NIST
  binary curves: `K-163`, `B-163`, `K-233` or `K-283`. The name is matched
  without regard to case or surrounding spaces, and any other name raises
  `ValueError`.
- `binecdh.ecdh` provides key agreement through `generate_public_key`,
  `verify_public_key` and `generate_shared_secret`.

## Installation

```
pip install .
```

To run the tests, install the test extra and start pytest:

```
pip install .[test]
pytest
```

## Usage

```python
from binecdh.curve import named_curve
from binecdh.ecdh import generate_public_key, verify_public_key, generate_shared_secret

curve = named_curve("K-233")

alex_private = 2
bethany_private = 3

alex_public = generate_public_key(curve, alex_private)
bethany_public = generate_public_key(curve, bethany_private)

assert verify_public_key(curve, alex_public)
assert verify_public_key(curve, bethany_public)

alex_shared = generate_shared_secret(curve, alex_private, bethany_public)
bethany_shared = generate_shared_secret(curve, bethany_private, alex_public)
assert alex_shared == bethany_shared
```

A private key, or any scalar given to `BinaryCurve.multiply`, can be a
non-negative `int` or a byte string stored least significant byte first.
`generate_public_key` returns a `Point`. The public key passed to
`verify_public_key` and `generate_shared_secret` can be a `Point` or the bytes
produced by `encode_point`.

`verify_public_key` returns `False` in three cases: the point is the point at
infinity, the point is not on the curve, or multiplying it by the curve's order
does not give infinity. `generate_shared_secret` does not validate the public
key. It returns the x-coordinate of the product point as
`curve.coordinate_bytes()` bytes, least significant byte first.

### Field arithmetic

```python
from binecdh import gf2

modulus = 0x13                      # x^4 + x + 1
inv = gf2.inverse(0x7, modulus)
assert gf2.mulmod(0x7, inv, modulus) == 1
```

`gf2.inverse` raises `ZeroDivisionError` for zero. It raises `ValueError`
when the value shares a factor with the modulus or when the modulus has
degree below 1. `gf2.reduce` with a zero modulus returns the value unchanged.

### Points

The point at infinity has both coordinates set to zero, so `Point()` is
infinity. `encode_point` writes x, then zero padding up to the next multiple
of eight bytes, then y. Both coordinates are stored least significant byte
first. `decode_point` reads that layout back and raises `ValueError` if the
length is not `encoded_point_bytes()`.

```python
g = curve.generator()
assert curve.contains(g)
assert curve.multiply(g, curve.order).is_infinity()
assert curve.decode_point(curve.encode_point(g)) == g
```

## What it does not do

This is a library only. It has no command-line tool. It does not generate
random private keys; the caller supplies them. It has no storage or file
format for keys. It supports only curves over binary fields. The arithmetic is
written for clarity, not speed, and does not run in constant time. Do not use
it to protect real secrets.