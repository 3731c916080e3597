# src/bigint/fmt.py
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Union

from colorama import Fore, Style

from bigint import limbs as _limbs
from bigint.runtime import CFG

if TYPE_CHECKING:
    from bigint.core import BigInteger

    Number = Union[BigInteger, int]

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _split(n: Number) -> tuple[bool, Sequence[int]]:
    """(negative, magnitude limbs) for a BigInteger or a native int."""
    if isinstance(n, int):
        return n < 0, _limbs.from_native(-n if n < 0 else n)
    return n.sign, n.limbs


def abbr_bigint(n: Number, head: int = 10, tail: int = 10, threshold: int = 35, ellipsis: str = "…") -> str:
    """Abbreviate long values as first<head>…last<tail> without building the full string."""
    neg, mag = _split(n)
    sign = "-" if neg else ""

    d = _limbs.count_digits(mag)
    if d <= threshold or head + tail >= d:
        return sign + _limbs.to_decimal(mag)

    # leading digits: enough limbs to cover `head` characters
    lead = _limbs.to_decimal(mag[: 1 + -(-head // _limbs.LIMB_WIDTH)])[:head]

    # trailing digits: zero-padded low limbs, then keep the last `tail` chars
    k = -(-tail // _limbs.LIMB_WIDTH)
    low = "".join(f"{limb:0{_limbs.LIMB_WIDTH}d}" for limb in mag[-k:])
    return f"{sign}{lead}{ellipsis}{low[-tail:]}"


def abbr_from_settings(n: Number) -> str:
    """abbr_bigint with FORMATTING.NUM_ABBR_* / FORMATTING.ELLIPSIS from the active profile."""
    ell = CFG("FORMATTING.ELLIPSIS", "…")
    head = int(CFG("FORMATTING.NUM_ABBR_HEAD", 10))
    tail = int(CFG("FORMATTING.NUM_ABBR_TAIL", 10))
    thr = int(CFG("FORMATTING.NUM_ABBR_THRESHOLD", 35))
    return abbr_bigint(n, head, tail, thr, ell)


def format_bigint(n: Number, *, mode: str | None = None, color: bool = False) -> str:
    """
    Render a value as text.
    mode: "full" | "shortened" (case-insensitive); defaults to FORMATTING.NUM_MODE.
    color=True wraps the digits in a bright yellow ANSI style.
    """
    if mode is None:
        mode = str(CFG("FORMATTING.NUM_MODE", "full"))
    m = str(mode).strip().lower()

    if m in ("short", "shortened", "abbr", "abbreviated"):
        tok = abbr_from_settings(n)
    else:
        neg, mag = _split(n)
        tok = ("-" if neg else "") + _limbs.to_decimal(mag)

    if not color:
        return tok
    return f"{Fore.YELLOW}{Style.BRIGHT}{tok}{Style.RESET_ALL}"


def describe(n: Number, *, color: bool = True) -> str:
    """One-line summary: abbreviated value, digit count, parity and sign."""
    neg, mag = _split(n)
    digits = _limbs.count_digits(mag)
    parity = "even" if mag[-1] % 2 == 0 else "odd"
    if _limbs.is_zero(mag):
        sign = "zero"
    else:
        sign = "negative" if neg else "positive"

    value = format_bigint(n, mode="shortened", color=color)
    unit = "digit" if digits == 1 else "digits"
    if not color:
        return f"{value}  ({digits} {unit}, {parity}, {sign})"
    tone = Fore.RED if neg else Fore.GREEN
    return f"{value}  ({Fore.CYAN}{digits} {unit}{Style.RESET_ALL}, {parity}, {tone}{sign}{Style.RESET_ALL})"


def strip_ansi(s: str | None) -> str:
    return ANSI_RE.sub("", s or "")
