"""
Errors raised while building or decoding tree nodes.

All construction errors derive from ValueError so callers validating user
input can catch them the usual way.
"""


class NestedIntervalError(ValueError):
    """Base class for nested interval encoding errors."""


class InvalidPathError(NestedIntervalError):
    """A path is empty or holds something other than positive integers."""

    def __init__(self, path, reason: str = "path must consist only of positive integers"):
        self.path = path
        super().__init__(f"{reason}: {path!r}")


class NotCoprimeError(NestedIntervalError):
    """An id pair shares a common factor and cannot be decoded."""

    def __init__(self, x: int, y: int, gcd: int):
        self.x = x
        self.y = y
        self.gcd = gcd
        super().__init__(f"id ({x}, {y}) is not coprime (gcd={gcd})")


class InvalidBoundsError(NestedIntervalError):
    """
    A matrix violates the node invariants.

    Raised for out-of-range ids on decode. Raised anywhere else it means a
    defect: valid nodes only ever derive valid matrices.
    """

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid tree node {value}: {reason}")


class IdOverflowError(NestedIntervalError, OverflowError):
    """A matrix entry exceeds the configured storage width."""

    def __init__(self, value: int, max_entry: int):
        self.value = value
        self.max_entry = max_entry
        super().__init__(f"matrix entry {value} exceeds max_entry {max_entry}")


class SingularMatrixError(ArithmeticError):
    """A matrix has no integer inverse (determinant is not +1 or -1)."""

    def __init__(self, matrix, determinant: int):
        self.matrix = matrix
        self.determinant = determinant
        super().__init__(f"matrix {matrix} has determinant {determinant}, no integer inverse")


__all__ = [
    'NestedIntervalError',
    'InvalidPathError',
    'NotCoprimeError',
    'InvalidBoundsError',
    'IdOverflowError',
    'SingularMatrixError',
]
