"""
Exceptions raised by the ecarith package.

All of them derive from ValueError: every failure in this library is caused by
the caller's input (a residue without an inverse, an x-coordinate with no
point above it, a malformed modulus) and retrying the same call always fails
the same way.
"""


class EllipticCurveError(ValueError):
    """Base class for all errors raised by ecarith."""


class NoInverseError(EllipticCurveError):
    """The value has no multiplicative inverse modulo the given modulus."""


class NoSquareRootError(EllipticCurveError):
    """The value is a quadratic non-residue modulo the given prime."""


class InvalidParameterError(EllipticCurveError):
    """A modulus, coordinate, scalar or encoding is structurally invalid."""
