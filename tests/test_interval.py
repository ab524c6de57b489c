"""
Tests for half-open rational intervals
"""

from fractions import Fraction

import pytest

from nested_intervals.interval import Interval


class TestInterval:
    def test_half_open_membership(self):
        interval = Interval(Fraction(1), Fraction(3, 2))
        assert Fraction(1) in interval
        assert Fraction(5, 4) in interval
        assert Fraction(3, 2) not in interval
    
    def test_contains(self):
        outer = Interval(Fraction(1), Fraction(2))
        inner = Interval(Fraction(4, 3), Fraction(7, 5))
        assert outer.contains(inner)
        assert not inner.contains(outer)
        assert outer.contains(outer)
    
    def test_adjacent_intervals_do_not_overlap(self):
        left = Interval(Fraction(1), Fraction(4, 3))
        right = Interval(Fraction(4, 3), Fraction(7, 5))
        assert not left.overlaps(right)
        assert not right.overlaps(left)
        assert left.overlaps(Interval(Fraction(5, 4), Fraction(2)))
    
    def test_width(self):
        assert Interval(Fraction(1), Fraction(3, 2)).width == Fraction(1, 2)
    
    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            Interval(Fraction(2), Fraction(2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
