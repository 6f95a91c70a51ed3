"""
Arithmetic in the prime field GF(p).

The functions in this module take the modulus explicitly on every call and
return values reduced into [0, p). They are the only place in the package
where inversion and square roots are computed; the curve layers above call
down into them.
"""

import logging

from .errors import InvalidParameterError, NoInverseError, NoSquareRootError

logger = logging.getLogger(__name__)


def check_modulus(pp: int) -> None:
    """Raise InvalidParameterError unless pp is a positive integer."""
    if not isinstance(pp, int) or pp <= 0:
        raise InvalidParameterError(f"Modulus must be a positive integer, got {pp!r}.")


def _check_unsigned(name: str, value: int) -> None:
    if not isinstance(value, int) or value < 0:
        raise InvalidParameterError(f"{name} must be a non-negative integer, got {value!r}.")


def exp_mod(base: int, exp: int, pp: int) -> int:
    """
    Compute base^exp mod pp by left-to-right square-and-multiply.

    Parameters:
    base (int): The base, a non-negative integer.
    exp (int): The exponent, a non-negative integer. Zero yields 1 mod pp.
    pp (int): The modulus, a positive integer.

    Returns:
    int: base^exp reduced into [0, pp).

    Raises:
    InvalidParameterError: If pp is not positive or base/exp are negative.
    """
    check_modulus(pp)
    _check_unsigned("Base", base)
    _check_unsigned("Exponent", exp)

    result = 1 % pp
    base %= pp
    for bit in bin(exp)[2:]:
        result = (result * result) % pp
        if bit == "1":
            result = (result * base) % pp

    return result


def inv_mod(x: int, pp: int) -> int:
    """
    Compute the multiplicative inverse of x modulo pp with the extended
    Euclidean algorithm.

    Parameters:
    x (int): The value to invert, a non-negative integer.
    pp (int): The modulus, a positive integer. It need not be prime.

    Returns:
    int: y in [0, pp) such that x * y = 1 (mod pp).

    Raises:
    InvalidParameterError: If pp is not positive or x is negative.
    NoInverseError: If gcd(x, pp) != 1, in particular when x = 0 (mod pp).
    """
    check_modulus(pp)
    _check_unsigned("Value", x)

    if pp == 1:
        raise NoInverseError("No inverse exists modulo 1.")

    old_r, r = x % pp, pp
    old_s, s = 1, 0
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s

    if old_r != 1:
        logger.debug("inv_mod: gcd(%d, %d) = %d", x, pp, old_r)
        raise NoInverseError(f"{x} has no inverse modulo {pp}.")

    return old_s % pp


def is_quadratic_residue(n: int, pp: int) -> bool:
    """Euler's criterion for an odd prime pp. Zero counts as a residue."""
    n %= pp
    if n == 0:
        return True
    return exp_mod(n, (pp - 1) // 2, pp) == 1


def sqrt_mod(n: int, pp: int) -> int:
    """
    Compute a square root of n modulo the odd prime pp.

    For pp = 3 (mod 4) the root is n^((pp+1)/4). Otherwise Tonelli-Shanks is
    used, which covers secp224k1 and P224 whose primes are 1 (mod 4).

    Parameters:
    n (int): The value whose root is wanted, a non-negative integer.
    pp (int): An odd prime modulus.

    Returns:
    int: r in [0, pp) with r^2 = n (mod pp). Which of the two roots is
    returned is unspecified; callers select by parity.

    Raises:
    InvalidParameterError: If pp is not an odd integer greater than 2, or is
        detected to be composite.
    NoSquareRootError: If n is a quadratic non-residue modulo pp.
    """
    check_modulus(pp)
    _check_unsigned("Value", n)
    if pp < 3 or pp % 2 == 0:
        raise InvalidParameterError(f"Modulus must be an odd prime, got {pp}.")

    n %= pp
    if n == 0:
        return 0
    if not is_quadratic_residue(n, pp):
        raise NoSquareRootError(f"{n} is not a quadratic residue modulo {pp}.")

    if pp % 4 == 3:
        return _checked_root(exp_mod(n, (pp + 1) // 4, pp), n, pp)

    # Tonelli-Shanks: pp - 1 = q * 2^s with q odd
    q, s = pp - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while is_quadratic_residue(z, pp):
        z += 1
        if z == pp:
            raise InvalidParameterError(f"Modulus {pp} is not prime.")

    m = s
    c = exp_mod(z, q, pp)
    t = exp_mod(n, q, pp)
    r = exp_mod(n, (q + 1) // 2, pp)
    while t != 1:
        i, t2i = 0, t
        while t2i != 1:
            t2i = (t2i * t2i) % pp
            i += 1
            if i == m:
                raise InvalidParameterError(f"Modulus {pp} is not prime.")
        b = exp_mod(c, 1 << (m - i - 1), pp)
        m = i
        c = (b * b) % pp
        t = (t * c) % pp
        r = (r * b) % pp

    return _checked_root(r, n, pp)


def _checked_root(r: int, n: int, pp: int) -> int:
    # Euler's criterion only proves residuosity for a prime modulus
    if (r * r) % pp != n:
        raise InvalidParameterError(f"Modulus {pp} is not prime.")
    return r
