"""
Flat elliptic-curve operations over raw integers.

Every function takes the curve parameters it needs (pp, and aa or bb where
the formula uses them) as explicit arguments and returns plain integers, so
callers that only hold numbers, such as RPC or contract bindings, can use the
library without building Curve or Point objects.

At this layer the point at infinity is written (0, 0). None of the supported
curves has b = 0, so (0, 0) is never a genuine point on them.
"""

from typing import Tuple

from .curve import Curve
from .errors import InvalidParameterError
from .field import exp_mod, inv_mod
from .jacobian import to_affine
from .point import Point, derive_y, is_on_curve

__all__ = [
    "derive_y",
    "ec_add",
    "ec_inv",
    "ec_mul",
    "ec_sub",
    "exp_mod",
    "inv_mod",
    "is_on_curve",
    "to_affine",
    "to_hex",
]

Affine = Tuple[int, int]


def _check_field(pp: int) -> None:
    if not isinstance(pp, int) or pp < 3 or pp % 2 == 0:
        raise InvalidParameterError(f"Curve modulus must be an odd prime, got {pp!r}.")


def _point(x: int, y: int, curve: Curve) -> Point:
    if not 0 <= x < curve.pp or not 0 <= y < curve.pp:
        raise InvalidParameterError("Point coordinates must lie in [0, p).")
    return Point.from_tuple((x, y), curve)


def ec_inv(x: int, y: int, pp: int) -> Affine:
    """Negate (x, y): returns (x, (pp - y) mod pp). (0, 0) maps to itself."""
    _check_field(pp)
    curve = Curve.from_params(pp, 0)
    return (-_point(x, y, curve)).to_tuple()


def ec_add(x1: int, y1: int, x2: int, y2: int, aa: int, pp: int) -> Affine:
    """
    Add two affine points.

    Parameters:
    x1, y1 (int): The first point, (0, 0) for infinity.
    x2, y2 (int): The second point, (0, 0) for infinity.
    aa (int): The curve's a coefficient, used when the points are equal.
    pp (int): The field prime.

    Returns:
    Tuple[int, int]: The sum, (0, 0) when the operands are mutual inverses.

    Raises:
    InvalidParameterError: If pp is not an odd modulus above 2 or a
        coordinate is outside [0, pp).
    NoInverseError: If a slope denominator has no inverse, which can only
        happen for a composite pp.
    """
    _check_field(pp)
    curve = Curve.from_params(pp, aa)
    return (_point(x1, y1, curve) + _point(x2, y2, curve)).to_tuple()


def ec_sub(x1: int, y1: int, x2: int, y2: int, aa: int, pp: int) -> Affine:
    """Subtract the second point from the first: ec_add(P1, ec_inv(P2))."""
    _check_field(pp)
    curve = Curve.from_params(pp, aa)
    return (_point(x1, y1, curve) - _point(x2, y2, curve)).to_tuple()


def ec_mul(k: int, x: int, y: int, aa: int, pp: int) -> Affine:
    """
    Multiply the point (x, y) by the scalar k.

    k = 0 gives (0, 0) and k = 1 gives the input point. k is not reduced by
    the curve order; callers pick the scalar size they need.

    Raises:
    InvalidParameterError: If k is negative, pp is malformed or a coordinate
        is outside [0, pp).
    """
    _check_field(pp)
    if not isinstance(k, int) or k < 0:
        raise InvalidParameterError("Scalar must be a non-negative integer.")
    curve = Curve.from_params(pp, aa)
    return (k * _point(x, y, curve)).to_tuple()


def to_hex(value: int) -> str:
    """
    Render a non-negative integer as minimal-width lowercase big-endian hex,
    with no sign and no 0x prefix. Zero renders as "0".
    """
    if value < 0:
        raise InvalidParameterError("Only non-negative integers have a canonical encoding.")
    return format(value, "x")
