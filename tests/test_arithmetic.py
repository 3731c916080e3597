# tests/test_arithmetic.py
"""
Addition, subtraction, multiplication and ordering, checked against Python int.

Run: pytest -v
"""

from __future__ import annotations

import itertools

import pytest

from bigint import LIMB_BASE, BigInteger

# ---------- helpers -----------------------------------------------------------

SAMPLES = [
    0,
    1,
    -1,
    2,
    -7,
    LIMB_BASE - 1,
    -(LIMB_BASE - 1),
    LIMB_BASE,
    -LIMB_BASE,
    2**64 + 3,
    -(2**64),
    10**40 + 12345,
    -(10**40 - 1),
    3**150,
    -(7**77),
]

PAIRS = list(itertools.product(SAMPLES, repeat=2))
PAIR_IDS = [f"{a}|{b}" if len(str(a)) + len(str(b)) < 40 else f"pair{i}" for i, (a, b) in enumerate(PAIRS)]

TRIPLES = [
    (3**150, -(7**77), 10**40 + 12345),
    (-(LIMB_BASE - 1), LIMB_BASE, -1),
    (2**64 + 3, 0, -(2**64)),
    (-7, -(10**40 - 1), 3**150),
]


def B(n: int) -> BigInteger:
    return BigInteger(n)


# ---------- sign dispatch against native --------------------------------------

@pytest.mark.parametrize("a,b", PAIRS, ids=PAIR_IDS)
def test_add_sub_mul_match_native(a, b):
    x, y = B(a), B(b)
    assert int(x + y) == a + b
    assert int(x - y) == a - b
    assert int(x * y) == a * b


@pytest.mark.parametrize("a,b", PAIRS, ids=PAIR_IDS)
def test_ordering_matches_native(a, b):
    x, y = B(a), B(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x > y) == (a > b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)
    assert (x != y) == (a != b)


def test_sorting():
    assert [int(v) for v in sorted(B(n) for n in SAMPLES)] == sorted(SAMPLES)


def test_mixed_int_operands():
    x = B(10)
    assert 5 + x == 15
    assert 5 - x == -5
    assert 3 * x == 30
    assert x - 15 == -5
    assert x > 9 and 11 > x
    assert x == 10 and 10 == x


def test_unsupported_operand_types():
    with pytest.raises(TypeError):
        B(1) + "1"
    with pytest.raises(TypeError):
        B(1) < "2"
    assert (B(1) == "1") is False


# ---------- literal scenarios -------------------------------------------------

def test_int64_max_plus_one():
    assert str(B(9223372036854775807) + 1) == "9223372036854775808"


def test_int64_min_minus_one():
    assert str(B(-9223372036854775808) - 1) == "-9223372036854775809"


def test_carry_across_limb_boundary():
    assert str(BigInteger("9999999999999999999") + 1) == "10000000000000000000"


def test_borrow_across_limbs():
    x = BigInteger("1" + "0" * 54)
    assert str(x - 1) == "9" * 54
    assert str(1 - x) == "-" + "9" * 54


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("-5", "-3", "-8"),
        ("-5", "3", "-2"),
        ("5", "-3", "2"),
        ("3", "-5", "-2"),
        ("-3", "5", "2"),
    ],
)
def test_add_sign_cases(a, b, expected):
    assert str(BigInteger(a) + BigInteger(b)) == expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("-5", "-3", "-2"),
        ("-3", "-5", "2"),
        ("5", "-3", "8"),
        ("-5", "3", "-8"),
        ("3", "5", "-2"),
    ],
)
def test_subtract_sign_cases(a, b, expected):
    assert str(BigInteger(a) - BigInteger(b)) == expected


def test_both_negative_multiply_uses_both_operands():
    assert str(BigInteger("-3") * BigInteger("-5")) == "15"
    assert str(BigInteger("-3") + BigInteger("-5")) == "-8"


def test_multiply_fast_paths():
    big = B(10**40 + 1)
    assert (big * 0) == 0 and (big * 0).sign is False
    assert (B(-(10**40)) * 0).sign is False
    assert big * 1 == big
    assert 1 * big == big
    assert big * -1 == -big
    assert B(-1) * -big == big


def test_multiply_limb_overflow():
    top = B(LIMB_BASE - 1)
    assert int(top * top) == (LIMB_BASE - 1) ** 2
    wide = BigInteger.from_limbs([LIMB_BASE - 1] * 5)
    assert int(wide * wide) == (LIMB_BASE**5 - 1) ** 2


# ---------- algebraic properties ----------------------------------------------

@pytest.mark.parametrize("a,b", PAIRS[::7])
def test_commutativity(a, b):
    x, y = B(a), B(b)
    assert x + y == y + x
    assert x * y == y * x


@pytest.mark.parametrize("a,b,c", TRIPLES)
def test_associativity_and_distributivity(a, b, c):
    x, y, z = B(a), B(b), B(c)
    assert (x + y) + z == x + (y + z)
    assert (x * y) * z == x * (y * z)
    assert x * (y + z) == x * y + x * z


@pytest.mark.parametrize("a", SAMPLES)
def test_additive_inverse(a):
    x = B(a)
    assert x + (-x) == 0
    assert x - x == 0
    assert (x - x).sign is False


def test_unary_operators():
    x = B(-42)
    assert -x == 42
    assert +x is x
    assert abs(x) == 42
    assert abs(B(42)) == 42
