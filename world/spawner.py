"""
Conduit — world/spawner.py
Data-Driven Spawner: Instantiates pipes, tanks, and foreign tubes.
==================================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.
"""

from __future__ import annotations
from typing import Iterable, Optional

import tcod.ecs

from transport.acceptors import FluidAcceptor, FluidTank
from transport.config import load_config
from transport.data_loader import get_fluid_def, get_pipe_tier
from transport.directions import Direction
from transport.ecs.components import (
    BlockIdentity, PipeOutputs, Position, TransmissionType, Transmitter
)
from transport.fluids import FluidStack
from world.grid import WorldGrid

def _validate_fluid(fluid_id: str) -> None:
    try:
        get_fluid_def(fluid_id)
    except KeyError:
        raise ValueError(f"Unknown fluid: {fluid_id}") from None

def spawn_pipe(grid: WorldGrid, x: int, y: int, z: int, tier: Optional[str] = None,
               fluid: Optional[str] = None, amount: int = 0,
               sides: Optional[Iterable[Direction]] = None, dimension: int = 0) -> tcod.ecs.Entity:
    """Instantiates a mechanical pipe from its tier blueprint, optionally pre-filled."""
    tier_def = get_pipe_tier(tier if tier else load_config().default_pipe_tier)

    stored = None
    if fluid is not None and amount > 0:
        _validate_fluid(fluid)
        stored = FluidStack(fluid, amount)

    pipe = grid.registry.new_entity()

    # 1. Identity
    pipe.components[BlockIdentity] = BlockIdentity(
        block_id="mechanical_pipe",
        name=tier_def.name,
        template_origin=f"pipe_tiers/{tier_def.id}",
    )

    # 2. Network membership + buffer
    pipe.components[Transmitter] = Transmitter(TransmissionType.FLUID)
    pipe.components[FluidAcceptor] = FluidTank(capacity=tier_def.capacity, stored=stored)

    # 3. Outputs
    if sides is None:
        pipe.components[PipeOutputs] = PipeOutputs(tier=tier_def.id)
    else:
        pipe.components[PipeOutputs] = PipeOutputs(tier=tier_def.id, sides=frozenset(sides))

    return grid.place(pipe, Position(x, y, z, dimension))

def spawn_tank(grid: WorldGrid, x: int, y: int, z: int, capacity: int,
               accepts: Optional[Iterable[str]] = None,
               input_sides: Optional[Iterable[Direction]] = None,
               output_sides: Optional[Iterable[Direction]] = None,
               name: str = "Fluid Tank", dimension: int = 0) -> tcod.ecs.Entity:
    """Instantiates a terminal fluid store."""
    if accepts is not None:
        accepts = list(accepts)
        for fluid_id in accepts:
            _validate_fluid(fluid_id)

    tank = grid.registry.new_entity()
    tank.components[BlockIdentity] = BlockIdentity(block_id="fluid_tank", name=name)
    tank.components[FluidAcceptor] = FluidTank(
        capacity=capacity,
        accepts=accepts,
        input_sides=input_sides,
        output_sides=output_sides,
    )
    return grid.place(tank, Position(x, y, z, dimension))

def spawn_tube(grid: WorldGrid, x: int, y: int, z: int,
               transmission: TransmissionType = TransmissionType.GAS,
               buffer_capacity: int = 0, dimension: int = 0) -> tcod.ecs.Entity:
    """
    Instantiates a transmitter of another network. With buffer_capacity > 0
    it also stores fluid, but it is never a fluid sink for pipes.
    """
    tube = grid.registry.new_entity()
    tube.components[BlockIdentity] = BlockIdentity(
        block_id=f"{transmission.value}_tube",
        name=f"{transmission.value.title()} Tube",
    )
    tube.components[Transmitter] = Transmitter(transmission)
    if buffer_capacity > 0:
        tube.components[FluidAcceptor] = FluidTank(capacity=buffer_capacity)
    return grid.place(tube, Position(x, y, z, dimension))
