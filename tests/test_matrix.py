"""
Tests for the 2x2 integer matrix algebra
"""

import pytest
import numpy as np

from nested_intervals.matrix import IntMatrix2, product
from nested_intervals.exceptions import SingularMatrixError


class TestIntMatrix2:
    def test_identity(self):
        m = IntMatrix2(11, -7, 8, -5)
        assert IntMatrix2.identity() @ m == m
        assert m @ IntMatrix2.identity() == m
    
    def test_atomic_step(self):
        step = IntMatrix2.atomic(1)
        assert step == IntMatrix2(2, -1, 1, 0)
        assert step.determinant == 1
        assert IntMatrix2.atomic(5).determinant == 1
    
    def test_multiply(self):
        m = IntMatrix2.atomic(1) @ IntMatrix2.atomic(1)
        assert m == IntMatrix2(3, -2, 2, -1)
    
    def test_multiply_rejects_other_types(self):
        with pytest.raises(TypeError):
            IntMatrix2.identity() @ 3
    
    def test_product_of_steps(self):
        steps = [IntMatrix2.atomic(n) for n in (1, 1, 2, 1)]
        assert product(steps) == IntMatrix2(11, -7, 8, -5)
        assert product([]) == IntMatrix2.identity()
    
    def test_inverse_unimodular(self):
        m = IntMatrix2(11, -7, 8, -5)
        assert m @ m.inverse() == IntMatrix2.identity()
        assert m.inverse() @ m == IntMatrix2.identity()
    
    def test_inverse_negative_determinant(self):
        swap = IntMatrix2(0, 1, 1, 0)
        assert swap.determinant == -1
        assert swap @ swap.inverse() == IntMatrix2.identity()
    
    def test_inverse_singular(self):
        with pytest.raises(SingularMatrixError) as excinfo:
            IntMatrix2(2, 0, 0, 2).inverse()
        assert excinfo.value.determinant == 4
    
    def test_numpy_conversion_is_exact(self):
        big = 2 ** 70
        m = IntMatrix2(big + 1, -big, 1, 0)
        array = m.to_numpy()
        assert array.shape == (2, 2)
        assert array.dtype == object
        assert array[0, 0] == big + 1
        assert IntMatrix2.from_numpy(array) == m
    
    def test_from_numpy_wrong_shape(self):
        with pytest.raises(ValueError):
            IntMatrix2.from_numpy(np.zeros((3, 3), dtype=int))
    
    def test_iter_and_str(self):
        m = IntMatrix2(3, -2, 2, -1)
        assert tuple(m) == (3, -2, 2, -1)
        assert str(m) == "[[3, -2], [2, -1]]"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
