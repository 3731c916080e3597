from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("bigint")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
# numtheory.abs/pow/min/max/random stay namespaced so builtins are not shadowed
from . import numtheory
from .config import load_settings, load_settings_file, use_profile
from .core import BigInteger
from .limbs import LIMB_BASE, LIMB_WIDTH
from .numtheory import (
    antilog2,
    antilog10,
    count_digits,
    factorial,
    gcd,
    is_even,
    is_negative,
    is_prime,
    lcm,
    log2,
    log10,
    logwithbase,
    maximum,
    minimum,
    sqrt,
    sum_of_digits,
)
from .runtime import APPLY, CFG
from .utility import (
    BigIntError,
    DivisionByZero,
    DomainError,
    InvalidFormat,
    NegativeInputError,
    UserInputError,
)

__all__ = [
    "APPLY",
    "CFG",
    "LIMB_BASE",
    "LIMB_WIDTH",
    "BigIntError",
    "BigInteger",
    "DivisionByZero",
    "DomainError",
    "InvalidFormat",
    "NegativeInputError",
    "UserInputError",
    "__version__",
    "antilog10",
    "antilog2",
    "count_digits",
    "factorial",
    "gcd",
    "is_even",
    "is_negative",
    "is_prime",
    "lcm",
    "load_settings",
    "load_settings_file",
    "log10",
    "log2",
    "logwithbase",
    "maximum",
    "minimum",
    "numtheory",
    "sqrt",
    "sum_of_digits",
    "use_profile",
]
