# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

from bigint.runtime import CFG
from bigint.runtime import current as _rt_current

# Optional sign, then either a lone "0" or a digit string without leading zero.
_DECIMAL_RE = re.compile(r"-?(?:0|[1-9][0-9]*)")


class BigIntError(Exception):
    pass


class InvalidFormat(BigIntError, ValueError):
    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    pass


class DomainError(BigIntError, ValueError):
    pass


class NegativeInputError(DomainError):
    pass


class UserInputError(BigIntError):
    pass


def is_decimal_literal(s: str) -> bool:
    """
    True if s is a canonical decimal integer: optional '-', at least one
    ASCII digit, no leading zero unless the whole value is "0", and no "-0".
    """
    if not isinstance(s, str) or not _DECIMAL_RE.fullmatch(s):
        return False
    return s != "-0"


def _effective_digit_limit() -> int | None:
    """
    Decimal-digit limit for parsing, from BEHAVIOUR.MAX_DIGITS.
    Missing, non-integer or non-positive settings mean no limit.
    """
    raw = CFG("BEHAVIOUR.MAX_DIGITS", None)
    if raw is None or isinstance(raw, bool):
        return None
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return None
    return limit if limit > 0 else None


def check_digit_limit(digits: int, label: str = "number") -> None:
    """Raise a friendly UserInputError if `digits` exceeds the configured guard."""
    limit = _effective_digit_limit()
    if limit is not None and digits > limit:
        raise UserInputError(
            f"{label} has more than {limit} decimal digits. "
            "Increase BEHAVIOUR.MAX_DIGITS in the profile or pass a smaller value."
        )


def debug_enabled() -> bool:
    return _rt_current().debug
