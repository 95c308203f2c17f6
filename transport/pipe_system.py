"""
Conduit — transport/pipe_system.py
Pipe systems: push buffered fluid out of every mechanical pipe.
===============================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.

A fluid pipe is any block with Position + Transmitter(FLUID) + a FluidTank
buffer under FluidAcceptor + PipeOutputs. Each tick it offers at most its
tier's pull_amount to the acceptors on its output sides and drains exactly
what they took. Peers (other pipes) never receive fluid here.
"""

from __future__ import annotations
import random
from typing import Dict, List, Optional

import tcod.ecs

from transport.acceptors import FluidAcceptor, FluidTank
from transport.connectivity import connections
from transport.data_loader import get_pipe_tier
from transport.distributor import describe, emit
from transport.ecs.components import PipeOutputs, Position, TransmissionType, Transmitter
from transport.events import EventBus, TransportEvent, EVT_FLUID_EMITTED
from world.grid import WorldGrid


def fluid_pipes(grid: WorldGrid) -> List[tcod.ecs.Entity]:
    pipes = []
    for ent in grid.registry.Q.all_of(components=[Position, Transmitter, FluidAcceptor, PipeOutputs]):
        if not ent.components[Transmitter].is_peer_for(TransmissionType.FLUID):
            continue
        if not isinstance(ent.components[FluidAcceptor], FluidTank):
            continue
        pipes.append(ent)
    return pipes


def pipe_output_system(
    grid: WorldGrid,
    bus: Optional[EventBus] = None,
    rng: Optional[random.Random] = None,
) -> Dict[tcod.ecs.Entity, int]:
    """Runs one output pass. Returns {pipe: amount sent} for pipes that moved fluid."""
    if rng is None:
        rng = random.Random()

    results: Dict[tcod.ecs.Entity, int] = {}
    for pipe in fluid_pipes(grid):
        buffer = pipe.components[FluidAcceptor]
        if buffer.stored is None:
            continue

        outputs = pipe.components[PipeOutputs]
        tier = get_pipe_tier(outputs.tier)
        offer = buffer.drain(None, tier.pull_amount, False)

        sent = emit(grid, pipe, outputs.sides, offer, rng=rng, bus=bus)
        if sent <= 0:
            continue

        # A misbehaving acceptor may report more than was offered.
        buffer.drain(None, min(sent, offer.amount), True)
        results[pipe] = sent

        if bus is not None:
            bus.emit(TransportEvent(
                event_key=EVT_FLUID_EMITTED,
                source=describe(pipe),
                data={"fluid": offer.fluid, "offered": offer.amount, "sent": sent},
            ))

    return results


def pipe_connections(grid: WorldGrid, probe_fluid: Optional[str] = None) -> Dict[tcod.ecs.Entity, List[bool]]:
    """Connection mask of every fluid pipe, for topology reporting."""
    return {pipe: connections(grid, pipe, probe_fluid) for pipe in fluid_pipes(grid)}
