"""
Number helpers shared by the geometry modules.

Python integers never overflow, so the fixed-width integer types that grid
code usually works with are modelled by IntRange values. Checked arithmetic
elsewhere asks the range whether a result is representable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
from typing import Iterable, Union

__all__ = [
    "Number",
    "IntRange",
    "UNBOUNDED",
    "I32",
    "I64",
    "USIZE",
    "trunc_div",
    "trunc_rem",
    "modulo",
    "gcd_iter",
    "lcm_iter",
    "digits",
]

Number = Union[int, float, Fraction]


@dataclass(frozen=True)
class IntRange:
    """Inclusive value range of a modelled integer type (None = unbounded side)."""

    name: str
    min: int | None = None
    max: int | None = None

    @property
    def signed(self) -> bool:
        return self.min is None or self.min < 0

    def contains(self, value: Number) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def check(self, value: Number) -> Number:
        """Return value unchanged, or raise OverflowError if it is out of range."""
        if not self.contains(value):
            raise OverflowError(
                f"Value {value} out of range for {self.name}\n"
                f"  Valid range: [{self.min}, {self.max}]"
            )
        return value


UNBOUNDED = IntRange("number")
I32 = IntRange("i32", -(2**31), 2**31 - 1)
I64 = IntRange("i64", -(2**63), 2**63 - 1)
USIZE = IntRange("usize", 0, 2**64 - 1)


def trunc_div(a: Number, b: Number) -> Number:
    """
    Divide, truncating toward zero when both operands are integers.

    Non-integer operands use true division. Raises ZeroDivisionError for b == 0.
    """
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def trunc_rem(a: Number, b: Number) -> Number:
    """Remainder whose sign follows the dividend (pairs with trunc_div)."""
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return a - b * math.trunc(a / b)


def gcd_iter(nums: Iterable[int]) -> int:
    """Greatest common divisor of all numbers (0 for an empty iterable)."""
    return reduce(math.gcd, nums, 0)


def lcm_iter(nums: Iterable[int]) -> int:
    """Least common multiple of all numbers (1 for an empty iterable)."""
    return reduce(math.lcm, nums, 1)


def digits(num: int) -> int:
    """Number of decimal digits in num, ignoring sign. digits(0) == 1."""
    return len(str(abs(num)))


def modulo(a: Number, m: Number) -> Number:
    """Mathematical modulo ((a % m) + m) % m; in [0, m) for positive m."""
    return trunc_rem(trunc_rem(a, m) + m, m)
