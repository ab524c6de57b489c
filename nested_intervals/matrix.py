"""
Integer 2x2 Matrix Algebra

Exact arithmetic on 2x2 integer matrices:

    [[a, b],
     [c, d]]

Entries are plain Python ints, so products never wrap. A tree path is the
product of atomic step matrices, and unimodular (determinant 1) matrices
have integer inverses, which is all the encoding needs.
"""

from __future__ import annotations
from typing import Iterator, Tuple
from dataclasses import dataclass

import numpy as np

from .exceptions import SingularMatrixError


@dataclass(frozen=True)
class IntMatrix2:
    """Immutable 2x2 integer matrix."""
    a: int
    b: int
    c: int
    d: int

    @classmethod
    def identity(cls) -> 'IntMatrix2':
        return cls(1, 0, 0, 1)

    @classmethod
    def atomic(cls, n: int) -> 'IntMatrix2':
        """Step matrix for descending to the n-th child (1-based)."""
        return cls(n + 1, -1, 1, 0)

    @classmethod
    def from_rows(cls, rows) -> 'IntMatrix2':
        (a, b), (c, d) = rows
        return cls(int(a), int(b), int(c), int(d))

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'IntMatrix2':
        """Build from a 2x2 array. Integer entries only."""
        if array.shape != (2, 2):
            raise ValueError(f"Expected a 2x2 array, got shape {array.shape}")
        return cls.from_rows(array.tolist())

    def to_numpy(self) -> np.ndarray:
        """Return the entries as a 2x2 object array (exact Python ints)."""
        return np.array(self.rows(), dtype=object)

    def rows(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return ((self.a, self.b), (self.c, self.d))

    @property
    def determinant(self) -> int:
        return self.a * self.d - self.b * self.c

    def adjugate(self) -> 'IntMatrix2':
        return IntMatrix2(self.d, -self.b, -self.c, self.a)

    def inverse(self) -> 'IntMatrix2':
        """
        Exact inverse of a unimodular matrix.
        
        Returns:
            The adjugate divided by the determinant
            
        Raises:
            SingularMatrixError: If the determinant is not +1 or -1
        """
        det = self.determinant
        if det == 1:
            return self.adjugate()
        if det == -1:
            return -self.adjugate()
        raise SingularMatrixError(self, det)

    def __matmul__(self, other: 'IntMatrix2') -> 'IntMatrix2':
        if not isinstance(other, IntMatrix2):
            return NotImplemented
        return IntMatrix2(
            self.a * other.a + self.b * other.c,
            self.a * other.b + self.b * other.d,
            self.c * other.a + self.d * other.c,
            self.c * other.b + self.d * other.d,
        )

    def __neg__(self) -> 'IntMatrix2':
        return IntMatrix2(-self.a, -self.b, -self.c, -self.d)

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b, self.c, self.d))

    def __str__(self) -> str:
        return f"[[{self.a}, {self.b}], [{self.c}, {self.d}]]"


def product(matrices) -> IntMatrix2:
    """Left-to-right product of matrices, starting from the identity."""
    result = IntMatrix2.identity()
    for m in matrices:
        result = result @ m
    return result


__all__ = [
    'IntMatrix2',
    'product',
]
