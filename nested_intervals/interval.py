"""
Half-open rational intervals.

Containment is decided on exact Fractions: intervals deep in the tree
differ by amounts far below float resolution.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple, Union


@dataclass(frozen=True)
class Interval:
    """
    The half-open range [low, high).
    
    Attributes:
        low: Inclusive lower bound
        high: Exclusive upper bound
    """
    low: Fraction
    high: Fraction

    def __post_init__(self):
        if not self.low < self.high:
            raise ValueError(f"Empty interval [{self.low}, {self.high})")

    @property
    def width(self) -> Fraction:
        return self.high - self.low

    def contains(self, other: 'Interval') -> bool:
        """True if other lies entirely within this interval."""
        return self.low <= other.low and other.high <= self.high

    def overlaps(self, other: 'Interval') -> bool:
        return self.low < other.high and other.low < self.high

    def __contains__(self, point: Union[int, Fraction]) -> bool:
        return self.low <= point < self.high

    def as_tuple(self) -> Tuple[Fraction, Fraction]:
        return (self.low, self.high)

    def __str__(self) -> str:
        return f"[{self.low}, {self.high})"
