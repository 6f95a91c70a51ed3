"""
Copyright (c) 2026 The ecarith developers

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

This code is not constant time. Do not use it to handle secret keys.

This package provides modular and elliptic-curve arithmetic over short
Weierstrass curves y^2 = x^3 + a*x + b defined over prime fields.

Modules:
- field: Modular exponentiation, inversion and square roots modulo p.
- curve: The immutable Curve type and the secp256k1, secp224k1, secp192k1,
  P256, P224 and P192 presets built from the parameters in constants.
- jacobian: Inversion-free group law on Jacobian (x, y, z) triples and the
  conversion back to affine coordinates.
- point: The Point class for affine point arithmetic and SEC 1 encoding.
- operations: The same group law over raw integers, with the point at
  infinity written (0, 0).
- errors: NoInverseError, NoSquareRootError and InvalidParameterError.

Every operation is a pure function of its arguments. Curve parameters are
always passed in explicitly, so any number of curves can be used side by side.
"""

from .errors import (
    EllipticCurveError,
    InvalidParameterError,
    NoInverseError,
    NoSquareRootError,
)
from .field import exp_mod, inv_mod, sqrt_mod
from .curve import Curve, CURVES, get_curve, SECP256K1, SECP224K1, SECP192K1, P256, P224, P192
from .jacobian import to_affine, jac_add, jac_double, jac_mul
from .point import Point
from .operations import derive_y, ec_add, ec_inv, ec_mul, ec_sub, is_on_curve, to_hex
