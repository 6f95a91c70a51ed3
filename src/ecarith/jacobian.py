"""
Group law in Jacobian coordinates.

A Jacobian triple (x, y, z) with z != 0 stands for the affine point
(x/z^2, y/z^3); any triple with z = 0 is the point at infinity. Doubling and
addition here need no field inversion, so scalar multiplication runs entirely
in this representation and converts back to affine once, with to_affine.

Formulas are dbl-2007-bl and add-2007-bl from the Explicit-Formulas Database,
valid for any coefficient a.
"""

from typing import Tuple

from .errors import InvalidParameterError
from .field import check_modulus, inv_mod

Jacobian = Tuple[int, int, int]

INFINITY: Jacobian = (0, 1, 0)


def to_affine(x: int, y: int, z: int, pp: int) -> Tuple[int, int]:
    """
    Convert the Jacobian point (x, y, z) to affine coordinates.

    Parameters:
    x, y, z (int): Jacobian coordinates, non-negative.
    pp (int): The field modulus.

    Returns:
    Tuple[int, int]: (x / z^2, y / z^3) reduced mod pp, or (0, 0) when z = 0
    (mod pp), which is how the point at infinity is written in affine form.

    Raises:
    InvalidParameterError: If pp is not positive or a coordinate is negative.
    NoInverseError: If z is not invertible modulo a composite pp.
    """
    check_modulus(pp)
    if x < 0 or y < 0 or z < 0:
        raise InvalidParameterError("Jacobian coordinates must be non-negative.")

    z %= pp
    if z == 0:
        return 0, 0

    z_inv = inv_mod(z, pp)
    z_inv2 = (z_inv * z_inv) % pp
    return (x * z_inv2) % pp, (y * z_inv2 * z_inv) % pp


def jac_double(x: int, y: int, z: int, aa: int, pp: int) -> Jacobian:
    """Double a Jacobian point. Points with y = 0 double to infinity."""
    if z % pp == 0 or y % pp == 0:
        return INFINITY

    xx = (x * x) % pp
    yy = (y * y) % pp
    yyyy = (yy * yy) % pp
    zz = (z * z) % pp
    s = (2 * ((x + yy) * (x + yy) - xx - yyyy)) % pp
    m = (3 * xx + aa * zz * zz) % pp
    t = (m * m - 2 * s) % pp
    y3 = (m * (s - t) - 8 * yyyy) % pp
    z3 = ((y + z) * (y + z) - yy - zz) % pp

    return t, y3, z3


def jac_add(
    x1: int, y1: int, z1: int, x2: int, y2: int, z2: int, aa: int, pp: int
) -> Jacobian:
    """
    Add two Jacobian points.

    Handles every degenerate case of the group law: either operand at
    infinity, equal operands (delegated to jac_double) and mutually inverse
    operands (result at infinity).
    """
    if z1 % pp == 0:
        return x2 % pp, y2 % pp, z2 % pp
    if z2 % pp == 0:
        return x1 % pp, y1 % pp, z1 % pp

    z1z1 = (z1 * z1) % pp
    z2z2 = (z2 * z2) % pp
    u1 = (x1 * z2z2) % pp
    u2 = (x2 * z1z1) % pp
    s1 = (y1 * z2 * z2z2) % pp
    s2 = (y2 * z1 * z1z1) % pp

    if u1 == u2:
        if s1 == s2:
            return jac_double(x1, y1, z1, aa, pp)
        return INFINITY

    h = (u2 - u1) % pp
    i = (4 * h * h) % pp
    j = (h * i) % pp
    r = (2 * (s2 - s1)) % pp
    v = (u1 * i) % pp
    x3 = (r * r - j - 2 * v) % pp
    y3 = (r * (v - x3) - 2 * s1 * j) % pp
    z3 = (((z1 + z2) * (z1 + z2) - z1z1 - z2z2) * h) % pp

    return x3, y3, z3


def jac_mul(k: int, x: int, y: int, z: int, aa: int, pp: int) -> Jacobian:
    """
    Multiply a Jacobian point by the scalar k with most-significant-bit first
    double-and-add. k is used as given, not reduced by any group order.
    """
    check_modulus(pp)
    if k < 0:
        raise InvalidParameterError("Scalar must be non-negative.")

    acc = INFINITY
    for bit in bin(k)[2:]:
        acc = jac_double(*acc, aa, pp)
        if bit == "1":
            acc = jac_add(*acc, x, y, z, aa, pp)

    return acc
