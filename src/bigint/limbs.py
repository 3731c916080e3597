# -----------------------------------------------------------------------------
#  limbs.py
#  Magnitude kernels over most-significant-first limb lists
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Sequence

LIMB_WIDTH = 18
LIMB_BASE = 10 ** LIMB_WIDTH

# Powers of ten that fit in a single limb, indexed by exponent.
_POW10 = tuple(10 ** i for i in range(LIMB_WIDTH + 1))


"""
A magnitude is a list of ints in [0, LIMB_BASE), most significant limb first.
Every function here takes trimmed magnitudes and returns a trimmed one; signs
live one level up in core.BigInteger.
"""


def trim(limbs: Sequence[int]) -> list[int]:
    """Strip leading zero limbs; an empty or all-zero input becomes [0]."""
    i = 0
    last = len(limbs) - 1
    while i < last and limbs[i] == 0:
        i += 1
    out = list(limbs[i:])
    return out or [0]


def is_zero(a: Sequence[int]) -> bool:
    return len(a) == 1 and a[0] == 0


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Three-way comparison of two magnitudes: -1, 0 or 1."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return 0


def add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    if len(a) < len(b):
        a, b = b, a
    out: list[int] = []
    carry = 0
    offset = len(a) - len(b)
    for i in range(len(a) - 1, -1, -1):
        j = i - offset
        total = a[i] + carry + (b[j] if j >= 0 else 0)
        if total >= LIMB_BASE:
            total -= LIMB_BASE
            carry = 1
        else:
            carry = 0
        out.append(total)
    if carry:
        out.append(carry)
    out.reverse()
    return out


def subtract(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """a - b for magnitudes with a >= b."""
    out: list[int] = []
    borrow = 0
    offset = len(a) - len(b)
    for i in range(len(a) - 1, -1, -1):
        j = i - offset
        diff = a[i] - (b[j] if j >= 0 else 0) - borrow
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    if borrow:
        raise ArithmeticError("magnitude subtraction underflow")
    out.reverse()
    return trim(out)


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Schoolbook product. Each limb pair is multiplied at full width (Python
    ints never overflow), its low part lands at the pair's position and its
    high part one position more significant. A final pass settles carries.
    """
    if is_zero(a) or is_zero(b):
        return [0]
    n, m = len(a), len(b)
    # acc is least-significant-first while accumulating
    acc = [0] * (n + m)
    for i in range(n):
        x = a[n - 1 - i]
        if x == 0:
            continue
        for j in range(m):
            hi, lo = divmod(x * b[m - 1 - j], LIMB_BASE)
            acc[i + j] += lo
            acc[i + j + 1] += hi
    carry = 0
    for k in range(n + m):
        carry, acc[k] = divmod(acc[k] + carry, LIMB_BASE)
    if carry:
        acc.append(carry)
    acc.reverse()
    return trim(acc)


def multiply_small(a: Sequence[int], k: int) -> list[int]:
    """a * k for 0 <= k < LIMB_BASE."""
    if k == 0 or is_zero(a):
        return [0]
    out: list[int] = []
    carry = 0
    for limb in reversed(a):
        carry, lo = divmod(limb * k + carry, LIMB_BASE)
        out.append(lo)
    while carry:
        carry, lo = divmod(carry, LIMB_BASE)
        out.append(lo)
    out.reverse()
    return trim(out)


def divmod_small(a: Sequence[int], d: int) -> tuple[list[int], int]:
    """Native single-limb division: (a // d, a % d) for 0 < d < LIMB_BASE."""
    if d == 0:
        raise ZeroDivisionError("limb division by zero")
    out: list[int] = []
    rem = 0
    for limb in a:
        q, rem = divmod(rem * LIMB_BASE + limb, d)
        out.append(q)
    return trim(out), rem


def shift_decimal(a: Sequence[int], k: int) -> list[int]:
    """a * 10**k for k >= 0."""
    if is_zero(a):
        return [0]
    whole, part = divmod(k, LIMB_WIDTH)
    out = multiply_small(a, _POW10[part]) if part else list(a)
    return out + [0] * whole


def count_digits(a: Sequence[int]) -> int:
    """Decimal digit count of a magnitude; zero has one digit."""
    head = a[0]
    width = 1
    while width < LIMB_WIDTH and head >= _POW10[width]:
        width += 1
    return width + (len(a) - 1) * LIMB_WIDTH


def from_native(n: int) -> list[int]:
    """Split a non-negative Python int into limbs."""
    if n == 0:
        return [0]
    out: list[int] = []
    while n:
        n, lo = divmod(n, LIMB_BASE)
        out.append(lo)
    out.reverse()
    return out


def to_native(a: Sequence[int]) -> int:
    n = 0
    for limb in a:
        n = n * LIMB_BASE + limb
    return n


def from_decimal(digits: str) -> list[int]:
    """
    Chunk an unsigned, already validated digit string into limbs: left-pad
    with zeros to a multiple of LIMB_WIDTH, then parse each group.
    """
    pad = -len(digits) % LIMB_WIDTH
    s = "0" * pad + digits
    return trim([int(s[i:i + LIMB_WIDTH]) for i in range(0, len(s), LIMB_WIDTH)])


def to_decimal(a: Sequence[int]) -> str:
    """Most significant limb unpadded, the rest zero-padded to LIMB_WIDTH."""
    head = str(a[0])
    return head + "".join(f"{limb:0{LIMB_WIDTH}d}" for limb in a[1:])
