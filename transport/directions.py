"""
Conduit — transport/directions.py
Direction Set: the six axis-aligned neighbor directions.
=======================================================
Version:     0.1
Stack:       Python 3.11+ | stdlib enum
Status:      Stable.

Ordinals follow the block-face convention used across the transport layer:
DOWN, UP, NORTH, SOUTH, WEST, EAST (0..5). Connectivity masks and neighbor
slot lists are indexed by these ordinals.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Tuple


class Direction(Enum):
    DOWN  = (0, (0, -1, 0))
    UP    = (1, (0, 1, 0))
    NORTH = (2, (0, 0, -1))
    SOUTH = (3, (0, 0, 1))
    WEST  = (4, (-1, 0, 0))
    EAST  = (5, (1, 0, 0))

    @property
    def ordinal(self) -> int:
        return self.value[0]

    @property
    def offset(self) -> Tuple[int, int, int]:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Direction":
        return VALID_DIRECTIONS[ordinal]


_OPPOSITES = {
    Direction.DOWN:  Direction.UP,
    Direction.UP:    Direction.DOWN,
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST:  Direction.EAST,
    Direction.EAST:  Direction.WEST,
}

VALID_DIRECTIONS: List[Direction] = list(Direction)
