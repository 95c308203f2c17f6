"""
Conduit — transport/connectivity.py
Connectivity Evaluator: per-direction connection mask for a pipe.
================================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.

Acceptor rule
-------------
An ACCEPTOR neighbor is connected if, seen through the face turned toward
the node, it reports any non-None tank descriptor OR answers True to
can_drain / can_fill for the probe fluid. Both checks are needed: some
acceptors implement only the probes, others only tank_info().

The probe fluid stands in for "any fluid". An acceptor that rejects the
probe and exposes no descriptors is reported disconnected even if it
would take some other fluid.
"""

from __future__ import annotations
from typing import List, Optional

import tcod.ecs

from transport.acceptors import FluidAcceptor
from transport.classifier import NeighborKind, classify, classify_entity
from transport.config import load_config
from transport.directions import Direction
from transport.ecs.components import TransmissionType
from world.grid import WorldGrid


def acceptor_connects(acceptor: FluidAcceptor, side: Direction, probe_fluid: str) -> bool:
    """`side` is the acceptor's own face, i.e. opposite of the node's direction."""
    if any(info is not None for info in acceptor.tank_info(side) or []):
        return True
    return acceptor.can_drain(side, probe_fluid) or acceptor.can_fill(side, probe_fluid)


def is_valid_acceptor_on_side(
    entity: Optional[tcod.ecs.Entity],
    direction: Direction,
    probe_fluid: Optional[str] = None,
) -> bool:
    """
    True if `entity`, sitting in `direction` from a pipe, is a connectable
    fluid acceptor. Transmitters are never valid acceptors.
    """
    if classify_entity(entity, TransmissionType.FLUID) is not NeighborKind.ACCEPTOR:
        return False
    if probe_fluid is None:
        probe_fluid = load_config().probe_fluid
    return acceptor_connects(entity.components[FluidAcceptor], direction.opposite, probe_fluid)


def connections(
    grid: WorldGrid,
    node: tcod.ecs.Entity,
    probe_fluid: Optional[str] = None,
) -> List[bool]:
    """Connection mask indexed by Direction ordinal. Recomputed every call."""
    if probe_fluid is None:
        probe_fluid = load_config().probe_fluid

    mask = [False] * 6
    for slot in classify(grid, node, TransmissionType.FLUID):
        if slot.kind is NeighborKind.PEER:
            mask[slot.direction.ordinal] = True
        elif slot.kind is NeighborKind.ACCEPTOR:
            mask[slot.direction.ordinal] = acceptor_connects(
                slot.acceptor, slot.direction.opposite, probe_fluid
            )
    return mask
