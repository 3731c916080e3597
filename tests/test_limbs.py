# tests/test_limbs.py
"""
Magnitude kernels, checked against Python's own int.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from bigint import limbs
from bigint.limbs import LIMB_BASE


def _mag(n: int) -> list[int]:
    return limbs.from_native(n)


MAGNITUDES = [
    0,
    1,
    LIMB_BASE - 1,
    LIMB_BASE,
    LIMB_BASE + 1,
    2**64,
    10**40 + 12345,
    3**150,
]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ([0, 0, 7], [7]),
        ([0, 0, 0], [0]),
        ([], [0]),
        ([5, 0], [5, 0]),
        ([0], [0]),
    ],
    ids=["leading-zeros", "all-zero", "empty", "keeps-inner-zero", "zero"],
)
def test_trim(raw, expected):
    assert limbs.trim(raw) == expected


def test_from_native_splits_most_significant_first():
    assert limbs.from_native(2**64) == [18, 446744073709551616]
    assert limbs.from_native(0) == [0]
    assert limbs.to_native([18, 446744073709551616]) == 2**64


@pytest.mark.parametrize("a", MAGNITUDES)
@pytest.mark.parametrize("b", MAGNITUDES)
def test_kernels_match_native(a, b):
    ma, mb = _mag(a), _mag(b)
    assert limbs.to_native(limbs.add(ma, mb)) == a + b
    assert limbs.to_native(limbs.multiply(ma, mb)) == a * b
    assert limbs.compare(ma, mb) == (a > b) - (a < b)
    if a >= b:
        assert limbs.to_native(limbs.subtract(ma, mb)) == a - b


def test_add_carries_into_new_limb():
    assert limbs.add([LIMB_BASE - 1, LIMB_BASE - 1], [1]) == [1, 0, 0]


def test_subtract_borrows_and_trims():
    assert limbs.subtract([1, 0, 0], [1]) == [LIMB_BASE - 1, LIMB_BASE - 1]
    assert limbs.subtract([4, 5], [4, 5]) == [0]


def test_subtract_underflow_is_an_error():
    with pytest.raises(ArithmeticError):
        limbs.subtract([1], [2])


def test_multiply_largest_limbs():
    top = LIMB_BASE - 1
    got = limbs.multiply([top, top], [top, top])
    assert limbs.to_native(got) == (LIMB_BASE**2 - 1) ** 2


def test_divmod_small():
    q, r = limbs.divmod_small(_mag(10**40 + 7), 3)
    assert (limbs.to_native(q), r) == divmod(10**40 + 7, 3)
    with pytest.raises(ZeroDivisionError):
        limbs.divmod_small([5], 0)


@pytest.mark.parametrize("k", [0, 1, 17, 18, 19, 36, 40])
def test_shift_decimal(k):
    assert limbs.to_native(limbs.shift_decimal(_mag(123456789), k)) == 123456789 * 10**k


@pytest.mark.parametrize("n", [0, 9, 10, 10**17, 10**18 - 1, 10**18, 10**36, 7**90])
def test_count_digits(n):
    assert limbs.count_digits(_mag(n)) == len(str(n))


def test_decimal_chunking_pads_and_unpads():
    digits = "1" + "0" * 18 + "42"
    mag = limbs.from_decimal(digits)
    assert mag == [100, 42]
    assert limbs.to_decimal(mag) == digits
    assert limbs.to_decimal([7, 5]) == "7" + "0" * 17 + "5"
    assert limbs.from_decimal("0") == [0]
