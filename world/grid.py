"""
Conduit — world/grid.py
WorldGrid: position resolver over a tcod-ecs registry.
======================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.

One block entity per position. The registry owns every entity; the
transport layer only ever holds handles returned from here.
"""

from __future__ import annotations
from typing import Iterator, Optional

import tcod.ecs

from transport.directions import Direction
from transport.ecs.components import Position


class WorldGrid:
    def __init__(self, registry: Optional[tcod.ecs.Registry] = None):
        self.registry = registry if registry is not None else tcod.ecs.Registry()

    def blocks(self) -> Iterator[tcod.ecs.Entity]:
        return iter(self.registry.Q.all_of(components=[Position]))

    def entity_at(self, position: Position) -> Optional[tcod.ecs.Entity]:
        for ent in self.registry.Q.all_of(components=[Position]):
            if ent.components[Position] == position:
                return ent
        return None

    def neighbor_entity(self, position: Position, direction: Direction) -> Optional[tcod.ecs.Entity]:
        return self.entity_at(position.offset(direction))

    def place(self, entity: tcod.ecs.Entity, position: Position) -> tcod.ecs.Entity:
        """Puts `entity` at `position`. Raises ValueError if another block is there."""
        occupant = self.entity_at(position)
        if occupant is not None and occupant != entity:
            raise ValueError(f"Position occupied: {position}")
        entity.components[Position] = position
        return entity

    def remove(self, position: Position) -> bool:
        """Clears the block at `position`. Returns True if one was removed."""
        occupant = self.entity_at(position)
        if occupant is None:
            return False
        del occupant.components[Position]
        return True
