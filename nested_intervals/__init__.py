"""
Nested Intervals - Matrix Encoding of Tree Positions

Encodes a position in an arbitrarily deep and wide tree as a pair of
coprime integers. Ancestry, parent/child navigation and the full path
are all computed from that pair alone, with no parent pointers stored.
"""

__version__ = "0.1.0"

from .constants import EncodingConfig, DEFAULT_ENCODING_CONFIG, UNBOUNDED_ENCODING_CONFIG
from .exceptions import (
    NestedIntervalError,
    InvalidPathError,
    NotCoprimeError,
    InvalidBoundsError,
    IdOverflowError,
    SingularMatrixError,
)
from .matrix import IntMatrix2
from .euclidean import EuclideanResult, extended_euclidean, modular_inverse
from .interval import Interval
from .tree_node import TreeNode

__all__ = [
    "EncodingConfig",
    "DEFAULT_ENCODING_CONFIG",
    "UNBOUNDED_ENCODING_CONFIG",
    "NestedIntervalError",
    "InvalidPathError",
    "NotCoprimeError",
    "InvalidBoundsError",
    "IdOverflowError",
    "SingularMatrixError",
    "IntMatrix2",
    "EuclideanResult",
    "extended_euclidean",
    "modular_inverse",
    "Interval",
    "TreeNode",
]
