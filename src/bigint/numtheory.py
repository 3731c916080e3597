# -----------------------------------------------------------------------------
#  numtheory.py
#  Derived operations built on the BigInteger arithmetic core
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
import random as _random
from typing import Union

from bigint import limbs as _limbs
from bigint.core import BigInteger, power
from bigint.utility import DomainError, InvalidFormat, NegativeInputError

Number = Union[BigInteger, int]

_ZERO = BigInteger(0)
_ONE = BigInteger(1)
_TWO = BigInteger(2)

"""
Every function accepts BigInteger or native int arguments and returns a fresh
BigInteger (or bool). Note that this module defines its own `abs`, `pow`,
`min` and `max`, which shadow the builtins inside it.
"""


def _big(n: Number) -> BigInteger:
    if isinstance(n, BigInteger):
        return n
    if isinstance(n, int):
        return BigInteger(n)
    raise TypeError(f"expected BigInteger or int, got {type(n).__name__}")


# --- simple queries ---------------------------------------------------------

def is_even(n: Number) -> bool:
    return not (_big(n).limbs[-1] & 1)


def is_negative(n: Number) -> bool:
    return _big(n).sign


def abs(n: Number) -> BigInteger:
    n = _big(n)
    return -n if n.sign else n


def maximum(a: Number, b: Number) -> BigInteger:
    a, b = _big(a), _big(b)
    return a if a > b else b


def minimum(a: Number, b: Number) -> BigInteger:
    a, b = _big(a), _big(b)
    return b if a > b else a


min = minimum
max = maximum


def count_digits(n: Number) -> int:
    """Decimal digits in |n|; zero has one digit."""
    return _limbs.count_digits(_big(n).limbs)


def sum_of_digits(n: Number) -> BigInteger:
    total = _ZERO
    for limb in _big(n).limbs:
        while limb > 0:
            limb, digit = divmod(limb, 10)
            total = total + digit
    return total


# --- powers, gcd, factorial -------------------------------------------------

def pow(base: Number, exponent: Number) -> BigInteger:
    return power(_big(base), _big(exponent))


def antilog2(n: Number) -> BigInteger:
    return pow(_TWO, n)


def antilog10(n: Number) -> BigInteger:
    return pow(10, n)


def gcd(a: Number, b: Number) -> BigInteger:
    """Euclid's algorithm on |a| and |b|; gcd(0, 0) is 0."""
    a, b = abs(a), abs(b)
    if b > a:
        a, b = b, a
    while b:
        a, b = b, a % b
    return a


def lcm(a: Number, b: Number) -> BigInteger:
    a, b = _big(a), _big(b)
    g = gcd(a, b)
    if not g:
        return _ZERO
    return (a * b) / g


def factorial(n: Number) -> BigInteger:
    n = _big(n)
    if n.sign:
        raise NegativeInputError("Factorial of a negative integer is not defined.")
    result = _ONE
    while n:
        result = result * n
        n = n.decrement()
    return result


# --- roots and logarithms ---------------------------------------------------

def sqrt(n: Number) -> BigInteger:
    """Floor of the square root, by bisection between powers of ten."""
    n = _big(n)
    if n.sign:
        raise NegativeInputError("Square root of a negative number is complex.")
    if n == 0 or n == 1:
        return n

    oom = log10(n / 2) / 2
    low = pow(10, oom)
    high = pow(10, oom + 2)
    answer = _ZERO
    while low <= high:
        mid = (low + high) / 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            low = mid + 1
            answer = mid
        else:
            high = mid - 1
    return answer


def _check_log_domain(n: BigInteger, what: str) -> None:
    if n.sign:
        raise NegativeInputError(f"{what} of a negative number is not defined.")
    if not n:
        raise DomainError(f"{what} of zero is not defined.")


def log2(n: Number) -> BigInteger:
    """floor(log2(n)) for n > 0."""
    n = _big(n)
    _check_log_domain(n, "log2")
    if n == 1:
        return _ZERO

    if len(n.limbs) == 1:
        v = n.limbs[0]
        e = int(math.log2(v))
        # float rounding can land one off near powers of two
        while (1 << e) > v:
            e -= 1
        while (1 << (e + 1)) <= v:
            e += 1
        return BigInteger(e)

    # doubling search for an exponent whose power exceeds n ...
    hi = 64
    while pow(_TWO, hi) <= n:
        hi *= 2
    lo = hi // 2
    # ... then bisect for the smallest e with 2**e > n
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if pow(_TWO, mid) > n:
            hi = mid
        else:
            lo = mid
    return BigInteger(hi - 1)


def log10(n: Number) -> BigInteger:
    """floor(log10(n)) for n > 0."""
    n = _big(n)
    _check_log_domain(n, "log10")
    if n == 1:
        return _ZERO

    if len(n.limbs) == 1:
        v = n.limbs[0]
        e = int(math.log10(v))
        while 10 ** e > v:
            e -= 1
        while 10 ** (e + 1) <= v:
            e += 1
        return BigInteger(e)

    return BigInteger(_limbs.count_digits(n.limbs) - 1)


def logwithbase(n: Number, base: Number) -> BigInteger:
    """Approximate integer logarithm: log2(n) / log2(base)."""
    return log2(n) / log2(base)


# --- primality, random ------------------------------------------------------

def is_prime(n: Number) -> bool:
    """Deterministic trial division by odd candidates up to sqrt(n)."""
    n = _big(n)
    if n.sign or n == 0 or n == 1:
        return False
    if n == 2 or n == 3 or n == 5:
        return True
    if is_even(n) or not (n % 5):
        return False

    i = BigInteger(3)
    while i * i <= n:
        if not (n % i):
            return False
        i = i + _TWO
    return True


def random(length: int) -> BigInteger:
    """
    A random positive integer with exactly `length` decimal digits.
    Each call draws from its own freshly seeded generator; results are not
    reproducible and not suitable for cryptographic use.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidFormat(f"random() needs a positive digit count, got {length!r}")
    rng = _random.Random()
    first = str(rng.randint(1, 9))
    rest = "".join(rng.choices("0123456789", k=length - 1))
    return BigInteger.parse(first + rest)
