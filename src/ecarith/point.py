"""
This module defines the Point class, which represents affine points on a short
Weierstrass curve. It includes methods for point arithmetic such as addition,
subtraction, scalar multiplication and negation, as well as SEC 1
serialization and deserialization of points, for any curve described by a
Curve value.

The point at infinity is a tagged value, a Point whose coordinates are None.
It never coincides with a finite coordinate pair, so a curve with b = 0 (where
(0, 0) is a genuine point) is handled correctly here. The flat integer API in
operations maps it to the (0, 0) convention only at its boundary.
"""

from __future__ import annotations
from typing import Optional, Tuple, Union
from .curve import Curve, SECP256K1
from .errors import InvalidParameterError
from .field import inv_mod, sqrt_mod
from .jacobian import jac_mul, to_affine


def is_on_curve(x: int, y: int, aa: int, bb: int, pp: int) -> bool:
    """
    Check whether (x, y) satisfies y^2 = x^3 + aa*x + bb (mod pp).

    Coordinates outside [0, pp) and a non-positive modulus are simply not on
    the curve; this predicate never raises.
    """
    if not isinstance(pp, int) or pp <= 0:
        return False
    if not 0 <= x < pp or not 0 <= y < pp:
        return False

    lhs = (y * y) % pp
    rhs = (x * x * x + aa * x + bb) % pp
    return lhs == rhs


def derive_y(prefix: int, x: int, aa: int, bb: int, pp: int) -> int:
    """
    Recover the y-coordinate of a compressed point.

    Parameters:
    prefix (int): Parity selector. Only the low bit is used, so both 0/1 and
        the SEC 1 prefixes 0x02/0x03 are accepted.
    x (int): The x-coordinate, in [0, pp).
    aa, bb (int): Curve coefficients.
    pp (int): The field prime.

    Returns:
    int: The y in [0, pp) with y % 2 == prefix % 2 and (x, y) on the curve.

    Raises:
    InvalidParameterError: If prefix is negative or x is outside [0, pp).
    NoSquareRootError: If x^3 + aa*x + bb is not a square, i.e. no point of
        the curve has this x-coordinate.
    """
    if prefix < 0:
        raise InvalidParameterError("Prefix must be non-negative.")
    if not 0 <= x < pp:
        raise InvalidParameterError("x-coordinate must lie in [0, p).")

    rhs = (x * x * x + aa * x + bb) % pp
    y = sqrt_mod(rhs, pp)

    if y % 2 != prefix % 2:
        y = (pp - y) % pp
    return y


class Point:
    """Class representing an elliptic curve point."""

    def __init__(
        self,
        x: Optional[int] = None,
        y: Optional[int] = None,
        curve: Curve = SECP256K1,
    ):
        """
        Initialize a point on an elliptic curve.

        Parameters:
        x (Optional[int], optional): The x-coordinate of the point.
            Defaults to None, representing the point at infinity.
        y (Optional[int], optional): The y-coordinate of the point.
            Defaults to None, also representing the point at infinity.
        curve (Curve, optional): The curve the point belongs to. Defaults to
            secp256k1.

        The point at infinity serves as the identity element in elliptic curve addition.
        """

        self.x = x
        self.y = y
        self.curve = curve

    @classmethod
    def from_tuple(cls, xy: Tuple[int, int], curve: Curve) -> Point:
        """Build a point from an affine pair, reading (0, 0) as infinity."""
        x, y = xy
        if x == 0 and y == 0:
            return cls(curve=curve)
        return cls(x, y, curve)

    def to_tuple(self) -> Tuple[int, int]:
        """Return the affine pair, writing the point at infinity as (0, 0)."""
        if self.is_zero():
            return 0, 0
        return self.x, self.y

    @classmethod
    def sec_deserialize(cls, public_key: Union[str, bytes], curve: Curve = SECP256K1) -> Point:
        """
        Deserialize a SEC 1 encoded point, compressed or uncompressed.

        Parameters:
        public_key (Union[str, bytes]): The encoding, as raw bytes or a hex
            string. Compressed encodings are a 0x02/0x03 prefix followed by x;
            uncompressed ones are 0x04 followed by x and y. Coordinates take
            curve.byte_length bytes each.
        curve (Curve, optional): The curve to decode on. Defaults to secp256k1.

        Returns:
        Point: An instance of Point corresponding to the encoding.

        Raises:
        InvalidParameterError: If the input is not valid hex, has the wrong
            length or prefix, or does not describe a point of the curve.
        NoSquareRootError: If a compressed x-coordinate has no point above it.
        """
        if curve.bb is None:
            raise InvalidParameterError("Decoding points requires the b coefficient.")

        if isinstance(public_key, str):
            try:
                data = bytes.fromhex(public_key)
            except ValueError as e:
                raise InvalidParameterError("Invalid hex input.") from e
        else:
            data = bytes(public_key)

        size = curve.byte_length
        if len(data) == 1 + size and data[0] in (2, 3):
            x = int.from_bytes(data[1:], "big")
            if x >= curve.pp:
                raise InvalidParameterError("x-coordinate is not a field element.")
            y = derive_y(data[0], x, curve.aa, curve.bb, curve.pp)
        elif len(data) == 1 + 2 * size and data[0] == 4:
            x = int.from_bytes(data[1 : 1 + size], "big")
            y = int.from_bytes(data[1 + size :], "big")
            if not is_on_curve(x, y, curve.aa, curve.bb, curve.pp):
                raise InvalidParameterError(f"Point is not on curve {curve.name}.")
        else:
            raise InvalidParameterError(
                f"Expected {1 + size} byte compressed or {1 + 2 * size} byte "
                f"uncompressed SEC 1 encoding, got {len(data)} bytes."
            )

        return cls(x, y, curve)

    def sec_serialize(self, compressed: bool = True) -> bytes:
        """
        Serialize the point to its SEC 1 format.

        Parameters:
        compressed (bool, optional): Emit the 0x02/0x03 prefixed x-coordinate
            when True, the 0x04 prefixed x and y otherwise. Defaults to True.

        Returns:
        bytes: The SEC 1 encoding of the point.

        Raises:
        InvalidParameterError: If the point is at infinity.
        """
        if self.x is None or self.y is None:
            raise InvalidParameterError("Cannot serialize the point at infinity.")

        size = self.curve.byte_length
        if compressed:
            prefix = b"\x02" if self.y % 2 == 0 else b"\x03"
            return prefix + self.x.to_bytes(size, "big")
        return b"\x04" + self.x.to_bytes(size, "big") + self.y.to_bytes(size, "big")

    def is_zero(self) -> bool:
        """
        Check if the point is the identity element (point at infinity) in elliptic curve arithmetic.

        Returns:
        bool: True if the point is at infinity, False otherwise.
        """
        return self.x is None or self.y is None

    def is_on_curve(self) -> bool:
        """
        Check whether the point lies on its curve. The point at infinity
        always does.

        Raises:
        InvalidParameterError: If the curve was built without a b coefficient.
        """
        if self.is_zero():
            return True
        if self.curve.bb is None:
            raise InvalidParameterError("On-curve check requires the b coefficient.")
        return is_on_curve(self.x, self.y, self.curve.aa, self.curve.bb, self.curve.pp)

    def __eq__(self, other: object) -> bool:
        """
        Determine if this point is equal to another point by comparing their
        coordinates and field.

        Python's default behavior will automatically use this method to
        determine the behavior of __ne__ (not equal) by inverting the result of
        __eq__. Thus, __ne__ does not need to be explicitly defined.
        """
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.curve.pp == other.curve.pp
        )

    def __neg__(self) -> Point:
        """
        Negate the point on the elliptic curve.

        Returns:
        Point: A new Point that is the negation of the current point. If the
        current point is at infinity, it returns the point at infinity.

        The negation of a point involves reflecting it over the x-axis, which means the x-coordinate
        remains the same and the y-coordinate is subtracted from the modulus.
        """
        if self.x is None or self.y is None:
            return self

        return self.__class__(self.x, (self.curve.pp - self.y) % self.curve.pp, self.curve)

    def _dbl(self) -> Point:
        """
        Double the point on the elliptic curve. If the point is at infinity or the y-coordinate
        is zero (implying the point is of order 2), the result is the point at infinity.

        Returns:
        Point: A new Point that is the result of doubling the current point.
        """
        if self.x is None or self.y is None or self.y == 0:
            # Return the point at infinity
            return self.__class__(curve=self.curve)

        pp = self.curve.pp
        x = self.x
        y = self.y
        s = ((3 * x * x + self.curve.aa) * inv_mod(2 * y, pp)) % pp
        sum_x = (s * s - 2 * x) % pp
        sum_y = (s * (x - sum_x) - y) % pp

        return self.__class__(sum_x, sum_y, self.curve)

    def _check_same_field(self, other: Point) -> None:
        if not isinstance(other, Point):
            raise InvalidParameterError("The other object must be an instance of Point")
        if self.curve.pp != other.curve.pp or self.curve.aa != other.curve.aa:
            raise InvalidParameterError("Points must lie on the same curve")

    def __add__(self, other: Point) -> Point:
        """
        Add two points on an elliptic curve.

        Parameters:
        other (Point): Another point to add to this point.

        Returns:
        Point: The sum of the two points as a new Point object.

        Raises:
        InvalidParameterError: If other is not a Point on the same curve.
        NoInverseError: If the modulus is not prime and a slope denominator
            has no inverse.
        """
        self._check_same_field(other)

        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self

        pp = self.curve.pp
        if self.x == other.x and (self.y + other.y) % pp == 0:
            return self.__class__(curve=self.curve)
        if self == other:
            return self._dbl()

        s = ((other.y - self.y) * inv_mod((other.x - self.x) % pp, pp)) % pp
        sum_x = (s * s - self.x - other.x) % pp
        sum_y = (s * (self.x - sum_x) - self.y) % pp

        return self.__class__(sum_x, sum_y, self.curve)

    def __sub__(self, other: Point) -> Point:
        """
        Subtract one point from another on an elliptic curve.

        Parameters:
        other (Point): The point to subtract from this point.

        Returns:
        Point: The result of the point subtraction as a new Point object.
        """
        self._check_same_field(other)

        return self + -other

    def __rmul__(self, scalar: int) -> Point:
        """
        Multiply this point by a non-negative integer scalar.

        The scalar is used as given and is not reduced modulo the curve order.
        The double-and-add loop runs in Jacobian coordinates and the result is
        converted back to affine once.

        Parameters:
        scalar (int): The scalar to multiply this point by.

        Returns:
        Point: The result of the scalar multiplication.

        Raises:
        InvalidParameterError: If the scalar is not a non-negative integer.
        """
        if not isinstance(scalar, int) or scalar < 0:
            raise InvalidParameterError("The scalar must be a non-negative integer")

        if self.is_zero():
            return self

        pp = self.curve.pp
        x, y, z = jac_mul(scalar, self.x, self.y, 1, self.curve.aa, pp)
        if z == 0:
            return self.__class__(curve=self.curve)

        return self.__class__(*to_affine(x, y, z, pp), self.curve)

    def __str__(self) -> str:
        """
        Return a human-readable string representation of the point.

        Returns:
        str: A string that represents the point. If the point is at
        infinity, returns '0'.
        Otherwise, returns the x and y coordinates in hexadecimal format.
        """
        if self.is_zero():
            return "0"
        return f"X: 0x{self.x:x}\nY: 0x{self.y:x}"

    def __repr__(self) -> str:
        """
        Return a machine-readable string representation of the point.
        """
        if self.is_zero():
            return f"{self.__class__.__name__}(x=None, y=None, curve={self.curve})"
        return f"{self.__class__.__name__}(x={self.x}, y={self.y}, curve={self.curve})"
