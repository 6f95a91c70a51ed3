"""
This module defines the Curve type, an immutable description of one short
Weierstrass curve, and the named presets built from the parameters in
constants.

Curves are plain data. Every operation in the package receives the curve (or
its raw pp, aa, bb integers) as an argument; nothing here selects a
"current" curve.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, TYPE_CHECKING
from . import constants as c
from .errors import InvalidParameterError

if TYPE_CHECKING:
    from .point import Point


class Curve(NamedTuple):
    """Domain parameters of y^2 = x^3 + aa*x + bb over GF(pp)."""

    name: str
    pp: int
    aa: int
    bb: Optional[int] = None
    gx: Optional[int] = None
    gy: Optional[int] = None
    nn: Optional[int] = None

    @classmethod
    def from_params(cls, pp: int, aa: int, bb: Optional[int] = None) -> Curve:
        """
        Build an anonymous curve from raw parameters.

        The group law only needs pp and aa; bb is required for on-curve checks
        and point decompression. Anonymous curves have no generator or order.
        """
        return cls("custom", pp, aa, bb)

    @property
    def bits(self) -> int:
        """Bit width of the field modulus."""
        return self.pp.bit_length()

    @property
    def byte_length(self) -> int:
        """Number of bytes needed to encode one field element."""
        return (self.bits + 7) // 8

    @property
    def generator(self) -> Point:
        """The base point G of this curve."""
        from .point import Point

        if self.gx is None or self.gy is None:
            raise InvalidParameterError(f"Curve {self.name} has no generator.")

        return Point(self.gx, self.gy, self)

    def __str__(self) -> str:
        return self.name


SECP256K1: Curve = Curve(
    "secp256k1",
    c.SECP256K1_P,
    c.SECP256K1_A,
    c.SECP256K1_B,
    c.SECP256K1_G_x,
    c.SECP256K1_G_y,
    c.SECP256K1_N,
)

SECP224K1: Curve = Curve(
    "secp224k1",
    c.SECP224K1_P,
    c.SECP224K1_A,
    c.SECP224K1_B,
    c.SECP224K1_G_x,
    c.SECP224K1_G_y,
    c.SECP224K1_N,
)

SECP192K1: Curve = Curve(
    "secp192k1",
    c.SECP192K1_P,
    c.SECP192K1_A,
    c.SECP192K1_B,
    c.SECP192K1_G_x,
    c.SECP192K1_G_y,
    c.SECP192K1_N,
)

P256: Curve = Curve(
    "P256", c.P256_P, c.P256_A, c.P256_B, c.P256_G_x, c.P256_G_y, c.P256_N
)

P224: Curve = Curve(
    "P224", c.P224_P, c.P224_A, c.P224_B, c.P224_G_x, c.P224_G_y, c.P224_N
)

P192: Curve = Curve(
    "P192", c.P192_P, c.P192_A, c.P192_B, c.P192_G_x, c.P192_G_y, c.P192_N
)

CURVES: Mapping[str, Curve] = MappingProxyType(
    {
        curve.name: curve
        for curve in (SECP256K1, SECP224K1, SECP192K1, P256, P224, P192)
    }
)

_ALIASES: Mapping[str, Curve] = MappingProxyType(
    {
        "secp256r1": P256,
        "prime256v1": P256,
        "secp224r1": P224,
        "secp192r1": P192,
        "prime192v1": P192,
    }
)


def get_curve(name: str) -> Curve:
    """
    Look up a preset curve by name, ignoring case.

    Parameters:
    name (str): A preset name such as "secp256k1" or "P256", or one of the
        SEC 2 aliases ("secp256r1", "secp224r1", "secp192r1", ...).

    Returns:
    Curve: The matching preset.

    Raises:
    InvalidParameterError: If no preset has that name.
    """
    wanted = name.lower()
    for key, curve in list(CURVES.items()) + list(_ALIASES.items()):
        if key.lower() == wanted:
            return curve
    raise InvalidParameterError(
        f"Unknown curve {name!r}; expected one of {', '.join(CURVES)}."
    )
