# -----------------------------------------------------------------------------
#  core.py
#  BigInteger: immutable sign-magnitude integer over base-10**18 limbs
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from bigint import limbs as _limbs
from bigint.fmt import abbr_from_settings
from bigint.utility import (
    DivisionByZero,
    InvalidFormat,
    NegativeInputError,
    check_digit_limit,
    debug_enabled,
    is_decimal_literal,
)

_MASK64 = (1 << 64) - 1
_HASH_MIX = 0x45D9F3B
_HASH_GOLDEN = 0x9E3779B9


class BigInteger:
    """
    Arbitrary-precision signed integer.

    Values are immutable: every operator returns a new, normalized instance.
    Division (`/` and `//`) truncates toward zero and `%` takes the sign of the
    dividend, so that ``(a / b) * b + a % b == a`` always holds.
    """

    __slots__ = ("_sign", "_limbs")

    _sign: bool
    _limbs: tuple[int, ...]

    def __init__(self, value: BigInteger | int | float | str = 0):
        if isinstance(value, BigInteger):
            sign, mag = value._sign, value._limbs
        elif isinstance(value, int):
            sign, mag = value < 0, _limbs.from_native(-value if value < 0 else value)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidFormat(f"Cannot build a big integer from {value!r}.")
            n = int(value)  # truncates toward zero
            sign, mag = n < 0, _limbs.from_native(-n if n < 0 else n)
        elif isinstance(value, str):
            sign, mag = _parse_decimal(value)
        else:
            raise TypeError(f"Unsupported type for BigInteger: {type(value).__name__}")
        _init(self, sign, mag)

    # --- alternate constructors -------------------------------------------

    @classmethod
    def parse(cls, s: str) -> BigInteger:
        if not isinstance(s, str):
            raise TypeError(f"parse() expects str, got {type(s).__name__}")
        return _make(*_parse_decimal(s))

    @classmethod
    def from_char(cls, c: str) -> BigInteger:
        """A single decimal digit character, '0' through '9'."""
        if not isinstance(c, str) or len(c) != 1 or c not in "0123456789":
            raise InvalidFormat(f"Invalid big integer digit: {c!r}")
        return _make(False, [ord(c) - ord("0")])

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], negative: bool = False) -> BigInteger:
        """
        Build from a most-significant-first sequence of limbs in [0, LIMB_BASE).
        Leading zero limbs are trimmed; a zero result is never negative.
        """
        seq = list(limbs)
        if not seq:
            raise InvalidFormat("Limb sequence must not be empty.")
        for limb in seq:
            if isinstance(limb, bool) or not isinstance(limb, int):
                raise InvalidFormat(f"Limb {limb!r} is not an integer.")
            if not 0 <= limb < _limbs.LIMB_BASE:
                raise InvalidFormat(f"Limb {limb} is outside [0, {_limbs.LIMB_BASE}).")
        return _make(bool(negative), seq)

    # --- representation ---------------------------------------------------

    @property
    def sign(self) -> bool:
        """True iff the value is strictly negative."""
        return self._sign

    @property
    def limbs(self) -> tuple[int, ...]:
        return self._limbs

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (BigInteger, (self.to_string(),))

    def to_string(self) -> str:
        return ("-" if self._sign else "") + _limbs.to_decimal(self._limbs)

    __str__ = to_string

    def __repr__(self) -> str:
        return f"BigInteger('{abbr_from_settings(self)}')"

    def __hash__(self) -> int:
        """
        Structural bit-mixing hash over the limbs, with the sign folded in.

        Note: this is not hash(int(self)). BigInteger(5) == 5 holds, yet the
        two hash differently, so a native int and an equal BigInteger are
        distinct dict/set keys. Use BigInteger keys throughout a mapping.
        """
        seed = len(self._limbs)
        for x in self._limbs:
            x = (((x >> 16) ^ x) * _HASH_MIX) & _MASK64
            x = (((x >> 16) ^ x) * _HASH_MIX) & _MASK64
            x = (x >> 16) ^ x
            seed ^= (x + _HASH_GOLDEN + (seed << 6) + (seed >> 2)) & _MASK64
        if self._sign:
            seed ^= (_HASH_GOLDEN + (seed << 6) + (seed >> 2)) & _MASK64
        return seed

    def __int__(self) -> int:
        n = _limbs.to_native(self._limbs)
        return -n if self._sign else n

    __index__ = __int__

    def __float__(self) -> float:
        return float(int(self))

    def __bool__(self) -> bool:
        return not _limbs.is_zero(self._limbs)

    # --- comparison -------------------------------------------------------

    def _cmp(self, other: BigInteger) -> int:
        if self._sign != other._sign:
            return -1 if self._sign else 1
        c = _limbs.compare(self._limbs, other._limbs)
        # both negative: order of absolute values is reversed
        return -c if self._sign else c

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._sign == other._sign and self._limbs == other._limbs

    def __lt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._cmp(other) >= 0

    # --- unary ------------------------------------------------------------

    def __neg__(self) -> BigInteger:
        return _make(not self._sign, self._limbs)

    def __pos__(self) -> BigInteger:
        return self

    def __abs__(self) -> BigInteger:
        return _make(False, self._limbs) if self._sign else self

    def increment(self) -> BigInteger:
        return _add(self, _ONE)

    def decrement(self) -> BigInteger:
        return _subtract(self, _ONE)

    # --- binary -----------------------------------------------------------

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _add(self, other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _add(other, self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _subtract(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _subtract(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _multiply(self, other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _multiply(other, self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _divide(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _divide(other, self)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _modulo(self, other)

    def __rmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _modulo(other, self)

    def __divmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _divide(self, other), _modulo(self, other)

    def __rdivmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _divide(other, self), _modulo(other, self)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        exponent = _coerce(exponent)
        if exponent is NotImplemented:
            return NotImplemented
        return power(self, exponent)

    def __rpow__(self, base):
        base = _coerce(base)
        if base is NotImplemented:
            return NotImplemented
        return power(base, self)


# --- construction helpers ---------------------------------------------------

def _init(obj: BigInteger, sign: bool, mag: Iterable[int]) -> None:
    mag = tuple(_limbs.trim(list(mag)))
    object.__setattr__(obj, "_limbs", mag)
    object.__setattr__(obj, "_sign", bool(sign) and not _limbs.is_zero(mag))


def _make(sign: bool, mag: Iterable[int]) -> BigInteger:
    """Normalize (trim, canonical zero) and wrap a magnitude."""
    obj = BigInteger.__new__(BigInteger)
    _init(obj, sign, mag)
    return obj


def _parse_decimal(s: str) -> tuple[bool, list[int]]:
    if not is_decimal_literal(s):
        shown = s if len(s) <= 40 else s[:40] + "…"
        raise InvalidFormat(f"Invalid big integer literal: {shown!r}")
    neg = s.startswith("-")
    digits = s[1:] if neg else s
    check_digit_limit(len(digits), "literal")
    return neg, _limbs.from_decimal(digits)


def _coerce(value: object) -> BigInteger:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return NotImplemented


def _operand_hint(**named: BigInteger) -> str:
    """' (a=…, b=…)' in debug mode, empty otherwise."""
    if not debug_enabled():
        return ""
    parts = ", ".join(f"{k}={abbr_from_settings(v)}" for k, v in named.items())
    return f" ({parts})"


_ZERO = _make(False, [0])
_ONE = _make(False, [1])


# --- add / subtract ---------------------------------------------------------

def _add(a: BigInteger, b: BigInteger) -> BigInteger:
    if a._sign and b._sign:
        # (-A) + (-B) == -(A + B)
        return _make(True, _limbs.add(a._limbs, b._limbs))
    if a._sign:
        # (-A) + B == B - A
        return _subtract(b, -a)
    if b._sign:
        # A + (-B) == A - B
        return _subtract(a, -b)
    return _make(False, _limbs.add(a._limbs, b._limbs))


def _subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    if a._sign and b._sign:
        # (-A) - (-B) == B - A
        return _subtract(-b, -a)
    if b._sign:
        # A - (-B) == A + B
        return _add(a, -b)
    if a._sign:
        # (-A) - B == -(A + B)
        return _make(True, _limbs.add(a._limbs, b._limbs))
    if _limbs.compare(a._limbs, b._limbs) < 0:
        return _make(True, _limbs.subtract(b._limbs, a._limbs))
    return _make(False, _limbs.subtract(a._limbs, b._limbs))


# --- multiply ---------------------------------------------------------------

def _multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    if not a or not b:
        return _ZERO
    negative = a._sign != b._sign
    if a._limbs == (1,):
        return _make(negative, b._limbs)
    if b._limbs == (1,):
        return _make(negative, a._limbs)
    return _make(negative, _limbs.multiply(a._limbs, b._limbs))


# --- divide / modulo --------------------------------------------------------

def _divide_magnitude(num: tuple[int, ...], den: tuple[int, ...]) -> tuple[list[int], list[int]]:
    """
    Long division by estimation on magnitudes, returning (quotient, remainder).

    Each step subtracts den * 10**k, where k is the largest power for which
    that multiple still fits under the remainder, and counts one unit of
    10**k into the quotient. Once the remainder fits a single limb the rest is
    native division.
    """
    c = _limbs.compare(num, den)
    if c < 0:
        return [0], list(num)
    if c == 0:
        return [1], [0]
    if len(num) == 1:
        q, r = _limbs.divmod_small(num, den[0])
        return q, [r]

    rem = list(num)
    den_digits = _limbs.count_digits(den)
    counts: dict[int, int] = {}
    while len(rem) > 1 and _limbs.compare(rem, den) >= 0:
        k = _limbs.count_digits(rem) - den_digits
        step = _limbs.shift_decimal(den, k)
        if _limbs.compare(step, rem) > 0:
            k -= 1
            step = _limbs.shift_decimal(den, k)
        rem = _limbs.subtract(rem, step)
        counts[k] = counts.get(k, 0) + 1

    quotient = _digits_to_limbs(counts)
    if _limbs.compare(rem, den) >= 0:
        # both single-limb here
        q, r = _limbs.divmod_small(rem, den[0])
        quotient = _limbs.add(quotient, q)
        rem = [r]
    return quotient, rem


def _digits_to_limbs(counts: dict[int, int]) -> list[int]:
    """Assemble sum(count * 10**k) from per-power counts."""
    if not counts:
        return [0]
    top = max(counts)
    digits = [counts.get(k, 0) for k in range(top + 1)]  # least significant first
    carry = 0
    for k in range(len(digits)):
        carry, digits[k] = divmod(digits[k] + carry, 10)
    while carry:
        carry, d = divmod(carry, 10)
        digits.append(d)
    text = "".join(str(d) for d in reversed(digits)).lstrip("0") or "0"
    return _limbs.from_decimal(text)


def _divide(a: BigInteger, b: BigInteger) -> BigInteger:
    if not b:
        raise DivisionByZero("Attempted to divide by zero." + _operand_hint(numerator=a))
    if a == b:
        return _ONE
    if b._limbs == (1,):
        return a if not b._sign else -a
    if not a:
        return _ZERO
    quotient, _ = _divide_magnitude(a._limbs, b._limbs)
    return _make(a._sign != b._sign, quotient)


def _modulo(a: BigInteger, b: BigInteger) -> BigInteger:
    if not b:
        raise DivisionByZero("Attempted to modulo by zero." + _operand_hint(numerator=a))
    c = _limbs.compare(a._limbs, b._limbs)
    if c < 0:
        return a
    if c == 0:
        return _ZERO
    if b._limbs == (2,):
        return _make(a._sign, [a._limbs[-1] & 1])
    return a - (a / b) * b


# --- exponentiation ---------------------------------------------------------

def power(base: BigInteger, exponent: BigInteger) -> BigInteger:
    """Binary exponentiation; recursion depth grows with log2(exponent)."""
    if exponent._sign:
        raise NegativeInputError(
            "Negative exponents have no integer result." + _operand_hint(exponent=exponent)
        )
    if not exponent:
        return _ONE
    if exponent._limbs == (1,):
        return base

    half = power(base, exponent / 2)
    square = half * half
    if exponent._limbs[-1] & 1:
        return base * square
    return square
