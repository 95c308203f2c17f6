import random
from typing import List, Optional

import pytest
import tcod.ecs

from transport.acceptors import FluidAcceptor
from transport.directions import Direction
from transport.ecs.components import BlockIdentity, Position, TransmissionType, Transmitter
from transport.fluids import FluidStack, TankInfo
from world.grid import WorldGrid

ORIGIN = Position(0, 0, 0)


class RecordingAcceptor(FluidAcceptor):
    """
    Scripted acceptor. capacity=None takes everything offered.
    `reported` forces the value fill() returns (for contract violations).
    """

    def __init__(self, capacity: Optional[int] = None, fills: bool = True, drains: bool = False,
                 infos: Optional[List[Optional[TankInfo]]] = None, reported: Optional[int] = None):
        self.capacity = capacity
        self.fills = fills
        self.drains = drains
        self.infos = infos if infos is not None else []
        self.reported = reported
        self.received = 0
        self.commits: List[tuple] = []
        self.probes: List[tuple] = []

    def tank_info(self, side):
        return list(self.infos)

    def can_fill(self, side, fluid):
        self.probes.append((side, fluid))
        return self.fills

    def can_drain(self, side, fluid):
        return self.drains

    def fill(self, side, stack, do_fill):
        accepted = stack.amount
        if self.capacity is not None:
            accepted = min(accepted, self.capacity - self.received)
        if self.reported is not None:
            accepted = self.reported
        if do_fill:
            self.commits.append((side, stack))
            self.received += accepted
        return accepted


@pytest.fixture
def grid():
    return WorldGrid(tcod.ecs.Registry())


@pytest.fixture
def node(grid):
    """A bare fluid transmitter at the origin."""
    ent = grid.registry.new_entity()
    ent.components[BlockIdentity] = BlockIdentity(block_id="test_pipe", name="Test Pipe")
    ent.components[Transmitter] = Transmitter(TransmissionType.FLUID)
    return grid.place(ent, ORIGIN)


@pytest.fixture
def place_acceptor(grid):
    def _place(direction: Direction, acceptor: Optional[FluidAcceptor] = None,
               transmission: Optional[TransmissionType] = None):
        acceptor = acceptor if acceptor is not None else RecordingAcceptor()
        ent = grid.registry.new_entity()
        ent.components[FluidAcceptor] = acceptor
        if transmission is not None:
            ent.components[Transmitter] = Transmitter(transmission)
        grid.place(ent, ORIGIN.offset(direction))
        return acceptor
    return _place


@pytest.fixture
def place_peer(grid):
    def _place(direction: Direction, transmission: TransmissionType = TransmissionType.FLUID):
        ent = grid.registry.new_entity()
        ent.components[Transmitter] = Transmitter(transmission)
        return grid.place(ent, ORIGIN.offset(direction))
    return _place


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def water():
    return lambda amount: FluidStack("water", amount)
