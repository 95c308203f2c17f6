"""
Conduit — transport/classifier.py
Neighbor Classifier: resolve and classify the six neighbors of a node.
======================================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.

Architecture notes
------------------
- Pure read. Nothing is cached; every call re-resolves the world.
- Each slot carries its Direction. Slots are never matched back to a
  direction by searching for the entity.
- PEER wins over ACCEPTOR. A block that is a transmitter of any network
  is never a terminal sink, even when it also stores fluid.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import tcod.ecs

from transport.acceptors import FluidAcceptor
from transport.directions import Direction, VALID_DIRECTIONS
from transport.ecs.components import Position, TransmissionType, Transmitter
from world.grid import WorldGrid


class NeighborKind(Enum):
    EMPTY = "empty"
    PEER = "peer"
    ACCEPTOR = "acceptor"


@dataclass(frozen=True)
class NeighborSlot:
    direction: Direction
    kind: NeighborKind
    entity: Optional[tcod.ecs.Entity] = None

    @property
    def acceptor(self) -> Optional[FluidAcceptor]:
        if self.kind is not NeighborKind.ACCEPTOR:
            return None
        return self.entity.components[FluidAcceptor]


def classify_entity(entity: Optional[tcod.ecs.Entity], transmission: TransmissionType) -> NeighborKind:
    if entity is None:
        return NeighborKind.EMPTY

    transmitter = entity.components[Transmitter] if Transmitter in entity.components else None
    if transmitter is not None and transmitter.is_peer_for(transmission):
        return NeighborKind.PEER
    if FluidAcceptor in entity.components and transmitter is None:
        return NeighborKind.ACCEPTOR
    return NeighborKind.EMPTY


def classify(
    grid: WorldGrid,
    node: tcod.ecs.Entity,
    transmission: TransmissionType = TransmissionType.FLUID,
) -> List[NeighborSlot]:
    """Returns one NeighborSlot per Direction, in ordinal order."""
    position = node.components[Position]
    slots = []
    for direction in VALID_DIRECTIONS:
        neighbor = grid.neighbor_entity(position, direction)
        kind = classify_entity(neighbor, transmission)
        slots.append(NeighborSlot(
            direction=direction,
            kind=kind,
            entity=neighbor if kind is not NeighborKind.EMPTY else None,
        ))
    return slots


def connected_peers(
    grid: WorldGrid,
    node: tcod.ecs.Entity,
    transmission: TransmissionType = TransmissionType.FLUID,
) -> List[Optional[tcod.ecs.Entity]]:
    """Peer handles indexed by Direction ordinal; None where there is no peer."""
    return [slot.entity if slot.kind is NeighborKind.PEER else None
            for slot in classify(grid, node, transmission)]


def connected_acceptors(
    grid: WorldGrid,
    node: tcod.ecs.Entity,
    transmission: TransmissionType = TransmissionType.FLUID,
) -> List[Optional[FluidAcceptor]]:
    """Acceptor capabilities indexed by Direction ordinal; None where there is none."""
    return [slot.acceptor for slot in classify(grid, node, transmission)]
