# nested_intervals/constants.py
"""
Nested Interval Encoding Constants

Matrix entries grow with both depth and sibling index, so a node id only
fits a storage column up to some tree size. The encoding is checked
against a configurable ceiling instead of being allowed to grow without
bound:

- STORAGE_INT_MAX: largest value of a signed 64-bit (BIGINT) column
- EncodingConfig: immutable per-node settings
- DEFAULT_ENCODING_CONFIG: the settings used when none are given
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np


# =============================================================================
# Storage width
# =============================================================================

STORAGE_INT_MAX = int(np.iinfo(np.int64).max)

# Smallest sibling index; 1 is the first child
MIN_SIBLING_INDEX = 1

# Separator for dotted materialized paths ("1.1.2")
PATH_SEPARATOR = "."


@dataclass(frozen=True)
class EncodingConfig:
    """
    Settings shared by every node derived from the same construction.

    Attributes:
        max_entry: Largest matrix entry a node may hold. The top-left entry
            dominates all others, so this bounds the whole id and both
            interval endpoints. None disables the check (Python ints are
            unbounded).

    Example:
        >>> config = EncodingConfig(max_entry=2**31 - 1)
        >>> config.fits(12345)
        True
    """
    max_entry: Optional[int] = STORAGE_INT_MAX

    def __post_init__(self):
        if self.max_entry is not None and self.max_entry < 2:
            raise ValueError(f"max_entry must be at least 2, got {self.max_entry}")

    def fits(self, value: int) -> bool:
        """Check whether a matrix entry fits the configured width."""
        return self.max_entry is None or abs(value) <= self.max_entry


DEFAULT_ENCODING_CONFIG = EncodingConfig()

# Unbounded: for callers that never persist ids to fixed-width columns
UNBOUNDED_ENCODING_CONFIG = EncodingConfig(max_entry=None)
