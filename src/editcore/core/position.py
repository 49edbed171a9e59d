"""
Coordinate and direction types shared by rows, documents and search.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A cursor-valid location: grapheme column ``x`` in row ``y``."""
    x: int = 0
    y: int = 0


class SearchDirection(Enum):
    """Direction of a substring search."""
    FORWARD = 'forward'
    BACKWARD = 'backward'
