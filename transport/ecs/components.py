"""
Conduit — transport/ecs/components.py
ECS Component Definitions for python-tcod-ecs.
==============================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.

Capabilities are expressed by component presence:
- Transmitter  — the block is part of a transport network (peer).
- FluidAcceptor (transport/acceptors.py) — the block can store fluid.
A block carrying both is a network element that merely buffers fluid.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

from transport.directions import Direction, VALID_DIRECTIONS

@dataclass(frozen=True)
class Position:
    x: int
    y: int
    z: int
    dimension: int = 0

    def offset(self, direction: Direction) -> "Position":
        dx, dy, dz = direction.offset
        return Position(self.x + dx, self.y + dy, self.z + dz, self.dimension)

@dataclass
class BlockIdentity:
    block_id: str
    name: str
    template_origin: Optional[str] = None

class TransmissionType(Enum):
    ITEM = "item"
    FLUID = "fluid"
    GAS = "gas"
    ENERGY = "energy"
    HEAT = "heat"

@dataclass
class Transmitter:
    transmission: TransmissionType

    def is_peer_for(self, transmission: TransmissionType) -> bool:
        return self.transmission is transmission

@dataclass
class PipeOutputs:
    tier: str = "basic"
    sides: FrozenSet[Direction] = field(default_factory=lambda: frozenset(VALID_DIRECTIONS))
