"""
Tests for the extended Euclidean solver
"""

import math

import pytest

from nested_intervals.euclidean import extended_euclidean, modular_inverse


class TestExtendedEuclidean:
    def test_known_coefficients(self):
        result = extended_euclidean(11, 8)
        assert (result.s, result.t, result.gcd) == (3, -4, 1)
        assert result.inverse == 3
        assert (11 * result.inverse) % 8 == 1
    
    def test_inverse_normalized(self):
        result = extended_euclidean(3, 7)
        assert result.s == -2
        assert result.t == 1
        assert result.inverse == 5
    
    def test_not_coprime_is_not_an_error(self):
        result = extended_euclidean(240, 46)
        assert result.gcd == 2
        assert result.inverse is None
        assert not result.coprime
        assert result.s * 240 + result.t * 46 == 2
    
    def test_bezout_identity(self):
        for a in range(1, 40):
            for m in range(1, 40):
                result = extended_euclidean(a, m)
                assert result.gcd == math.gcd(a, m)
                assert result.s * a + result.t * m == result.gcd
                if result.coprime:
                    assert (a * result.inverse) % m == 1 % m
                    assert 0 <= result.inverse < m
    
    def test_zero_modulus(self):
        result = extended_euclidean(5, 0)
        assert result.gcd == 5
        assert (result.s, result.t) == (1, 0)
        assert result.inverse is None


class TestModularInverse:
    def test_exists(self):
        assert modular_inverse(3, 7) == 5
    
    def test_missing(self):
        assert modular_inverse(4, 6) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
