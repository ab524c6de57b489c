"""
Tree Node - Nested Interval Encoding with Matrices

Encodes a tree the way a materialized path would:

    food       = TreeNode.of(1)           1
    meat       = TreeNode.of(1, 1)        ├ 1.1
    chicken    = TreeNode.of(1, 1, 1)     │  ├ 1.1.1
    beef       = TreeNode.of(1, 1, 2)     │  ├ 1.1.2
    steak      = TreeNode.of(1, 1, 2, 1)  │  │  └ 1.1.2.1
    pork       = TreeNode.of(1, 1, 3)     │  └ 1.1.3
    dairy      = TreeNode.of(1, 2)        ├ 1.2
    milk       = TreeNode.of(1, 2, 1)     │  └ 1.2.1
    vehicle    = TreeNode.of(2)           2

Each node is a 2x2 unimodular matrix, the product of one atomic step
matrix per path element:

    step(n) = [[n + 1, -1],
               [1,      0]]

The node's id is the first column (a, c). The id alone determines the
whole matrix, so parents, ancestors and the full path are all recovered
from two integers.

A node's interval [(a+b)/(c+d), a/c) contains the intervals of all its
descendants, as in nested set / nested interval encodings:

    food.is_ancestor_of(milk)    # True
    milk.is_descendant_of(food)  # True

Acknowledgements: Vadim Tropashko, "Nested Intervals Tree Encoding"
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from fractions import Fraction
from math import gcd
from numbers import Integral
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .constants import DEFAULT_ENCODING_CONFIG, MIN_SIBLING_INDEX, PATH_SEPARATOR, EncodingConfig
from .euclidean import extended_euclidean
from .exceptions import IdOverflowError, InvalidBoundsError, InvalidPathError, NotCoprimeError
from .interval import Interval
from .matrix import IntMatrix2, product

logger = logging.getLogger(__name__)


def _check_index(n: Any, path: Any) -> int:
    # bool is an Integral but never a sibling index
    if isinstance(n, bool) or not isinstance(n, Integral) or n < MIN_SIBLING_INDEX:
        raise InvalidPathError(path)
    return int(n)


@dataclass(frozen=True, eq=False)
class TreeNode:
    """
    Immutable position in an arbitrarily deep and wide tree.

    Invariants (checked on construction):
        determinant(matrix) == 1
        1 <= c < a and 1 <= -b < a
        gcd(a, c) == 1 and gcd(b, d) == 1

    Equality and hashing use the id only. The config travels with every
    node derived from this one but does not take part in equality.

    Attributes:
        matrix: The node's unimodular matrix
        config: Storage width settings
    """
    matrix: IntMatrix2
    config: EncodingConfig = field(default=DEFAULT_ENCODING_CONFIG, repr=False)

    def __post_init__(self):
        self._validate()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_path(cls, indices: Iterable[int],
                  config: Optional[EncodingConfig] = None) -> 'TreeNode':
        """
        Build a node from its sibling indices, root first.

        Args:
            indices: Positive 1-based sibling indices
            config: Storage width settings (default: DEFAULT_ENCODING_CONFIG)

        Raises:
            InvalidPathError: If the path is empty or has a non-positive
                or non-integer element
        """
        if isinstance(indices, (str, bytes)):
            raise InvalidPathError(indices)
        try:
            path = tuple(indices)
        except TypeError:
            raise InvalidPathError(indices, "path must be a sequence") from None
        if not path:
            raise InvalidPathError(path, "path must not be empty")
        steps = [IntMatrix2.atomic(_check_index(n, path)) for n in path]
        return cls(product(steps), config or DEFAULT_ENCODING_CONFIG)

    @classmethod
    def of(cls, *indices: int) -> 'TreeNode':
        """Shorthand: TreeNode.of(1, 1, 2) == TreeNode.from_path([1, 1, 2])."""
        return cls.from_path(indices)

    @classmethod
    def from_id(cls, x: int, y: int,
                config: Optional[EncodingConfig] = None) -> 'TreeNode':
        """
        Decode a node from its id (x, y).

        Bezout coefficients s*x + t*y == 1 give a determinant-1 candidate
        [[x, -t], [y, s]]. Adding multiples of the first column to the
        second keeps the determinant, and exactly one such shift puts -b
        in [1, x); that matrix is the node.

        Raises:
            InvalidBoundsError: Unless 1 <= y < x
            NotCoprimeError: If gcd(x, y) != 1
        """
        if (isinstance(x, bool) or isinstance(y, bool)
                or not isinstance(x, Integral) or not isinstance(y, Integral)):
            raise InvalidBoundsError((x, y), "id must be a pair of integers")
        x, y = int(x), int(y)
        if not 1 <= y < x:
            raise InvalidBoundsError((x, y), "id must satisfy 1 <= y < x")

        result = extended_euclidean(x, y)
        if not result.coprime:
            raise NotCoprimeError(x, y, result.gcd)

        candidate = IntMatrix2(x, -result.t, y, result.s)
        shift = (candidate.b % x - x - candidate.b) // x
        matrix = IntMatrix2(x, candidate.b + shift * x, y, candidate.d + shift * y)
        logger.debug(f"Decoded id ({x}, {y}) to {matrix}")
        return cls(matrix, config or DEFAULT_ENCODING_CONFIG)

    @classmethod
    def from_string(cls, text: str,
                    config: Optional[EncodingConfig] = None) -> 'TreeNode':
        """Parse a dotted materialized path such as "1.1.2"."""
        parts = text.strip().split(PATH_SEPARATOR)
        if not all(part.isdigit() for part in parts):
            raise InvalidPathError(text, "malformed dotted path")
        return cls.from_path([int(part) for part in parts], config)

    @classmethod
    def from_record(cls, record: Dict[str, int],
                    config: Optional[EncodingConfig] = None) -> 'TreeNode':
        """
        Rebuild a node from a storage row produced by to_record().

        Only 'a' and 'c' are needed. Interval columns, when present, must
        agree with the decoded node.
        """
        node = cls.from_id(record['a'], record['c'], config)
        stored = {k: v for k, v in record.items() if k not in ('a', 'c')}
        expected = node.to_record()
        for key, value in stored.items():
            if key in expected and expected[key] != value:
                raise InvalidBoundsError(
                    node.id, f"stored {key}={value} does not match decoded {expected[key]}"
                )
        return node

    def _derive(self, matrix: IntMatrix2) -> 'TreeNode':
        return TreeNode(matrix, self.config)

    def _validate(self) -> None:
        a, b, c, d = self.matrix
        if not 1 <= c < a:
            raise InvalidBoundsError(self.matrix, "requires 1 <= c < a")
        if not 1 <= -b < a:
            raise InvalidBoundsError(self.matrix, "requires 1 <= -b < a")
        if gcd(a, c) != 1 or gcd(b, d) != 1:
            raise InvalidBoundsError(self.matrix, "columns must be coprime pairs")
        if self.matrix.determinant != 1:
            raise InvalidBoundsError(self.matrix, "determinant must be 1")
        # a dominates every other entry once the bounds hold
        if not self.config.fits(a):
            raise IdOverflowError(a, self.config.max_entry)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def id(self) -> Tuple[int, int]:
        return (self.matrix.a, self.matrix.c)

    def __eq__(self, other):
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self) -> str:
        return f"TreeNode{list(self.path)}"

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(str(n) for n in self.path)

    def to_record(self) -> Dict[str, int]:
        """Columns to persist: the id plus both interval bounds as integer pairs."""
        interval = self.interval
        return {
            'a': self.matrix.a,
            'c': self.matrix.c,
            'left_num': interval.low.numerator,
            'left_den': interval.low.denominator,
            'right_num': interval.high.numerator,
            'right_den': interval.high.denominator,
        }

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @property
    def n(self) -> int:
        """This node's sibling index (the last path element)."""
        # floor division by a negative divisor is what recovers the index
        return -1 - self.matrix.a // self.matrix.b

    @property
    def is_root(self) -> bool:
        return self.matrix.d == 0

    @property
    def root(self) -> 'TreeNode':
        """The top-level ancestor (or self for a top-level node)."""
        if self.is_root:
            return self
        root_n = -1 - self.matrix.a // -self.matrix.c
        return TreeNode.from_path([root_n], self.config)

    @property
    def parent(self) -> Optional['TreeNode']:
        """One Euclidean reduction step; None for a top-level node."""
        if self.is_root:
            return None
        a, b, c, d = self.matrix
        return self._derive(IntMatrix2(-b, a % b, -d, c % d))

    def child(self, n: int) -> 'TreeNode':
        """The n-th child (1-based) of this node."""
        n = _check_index(n, (n,))
        return self._derive(self.matrix @ IntMatrix2.atomic(n))

    def has_child(self, other: 'TreeNode') -> bool:
        """True if other is an immediate child of this node."""
        return self.matrix.a == -other.matrix.b and self.matrix.c == -other.matrix.d

    def is_child_of(self, parent: 'TreeNode') -> bool:
        return parent.has_child(self)

    @property
    def depth(self) -> int:
        return 1 + sum(1 for _ in self.ancestors())

    # -------------------------------------------------------------------------
    # Intervals
    # -------------------------------------------------------------------------

    @property
    def interval(self) -> Interval:
        a, b, c, d = self.matrix
        return Interval(Fraction(a + b, c + d), Fraction(a, c))

    def is_ancestor_of(self, other: 'TreeNode') -> bool:
        """True if other lies strictly below this node."""
        return self != other and self.interval.contains(other.interval)

    def is_descendant_of(self, other: 'TreeNode') -> bool:
        """True if this node lies strictly below other."""
        return other.is_ancestor_of(self)

    # -------------------------------------------------------------------------
    # Lineage
    # -------------------------------------------------------------------------

    def grafted_onto(self, other: 'TreeNode') -> 'TreeNode':
        """Re-root this node's path under other: other.path + self.path."""
        return self._derive(other.matrix @ self.matrix)

    def cutting_from(self, ancestor: 'TreeNode') -> Optional['TreeNode']:
        """
        This node's path relative to ancestor, as a node of its own.

        Returns:
            The node whose path is self.path with ancestor.path removed
            from the front, or None if ancestor is not a proper ancestor
        """
        if not self.is_descendant_of(ancestor):
            return None
        return self._derive(ancestor.matrix.inverse() @ self.matrix)

    def lineage(self) -> Iterator['TreeNode']:
        """
        Yield every node from the top-level ancestor down to self.

        Works from the matrix alone, so a node decoded with from_id gets
        its full path back.
        """
        ancestor = self.root
        while ancestor is not None:
            yield ancestor
            cutting = self.cutting_from(ancestor)
            ancestor = None if cutting is None else cutting.root.grafted_onto(ancestor)

    def ancestors(self) -> Iterator['TreeNode']:
        """Yield parent, grandparent, ... up to the top-level ancestor."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def path(self) -> Tuple[int, ...]:
        return tuple(node.n for node in self.lineage())


__all__ = [
    'TreeNode',
]
