"""Unsigned and signed EXIF rationals."""

import math
from dataclasses import dataclass


def _divide(numerator: int, denominator: int) -> float:
    """IEEE-754 division: a zero denominator gives inf, -inf or nan."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass(frozen=True)
class URational:
    """Unsigned rational (two u32)."""
    numerator: int
    denominator: int

    def value(self) -> float:
        return _divide(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f'{self.numerator}/{self.denominator}'


@dataclass(frozen=True)
class IRational:
    """Signed rational (two i32)."""
    numerator: int
    denominator: int

    def value(self) -> float:
        return _divide(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f'{self.numerator}/{self.denominator}'
