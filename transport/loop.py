"""
Conduit — transport/loop.py
Transport Loop: wires the grid, EventBus, RNG, and FlowJournal.
===============================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Integration entry point.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional

from transport.events import EventBus, TransportEvent, EVT_TICK_COMPLETED
from transport.journal import FlowJournal
from transport.pipe_system import pipe_output_system
from world.grid import WorldGrid


class TransportLoop:
    """
    Steps every fluid pipe once per tick. The RNG is seeded here and shared
    by all emissions, so a seeded loop replays identically.
    """
    def __init__(self, seed: Optional[int] = None, journal_path: Optional[Path] = None):
        self.grid = WorldGrid()
        self.bus = EventBus()
        self.seed = seed if seed is not None else random.randint(1, 100000)
        self.rng = random.Random(self.seed)
        self.tick = 0

        self.journal: Optional[FlowJournal] = None
        if journal_path is not None:
            self.journal = FlowJournal(self.bus, journal_path, tick=self.tick)

    @property
    def registry(self):
        return self.grid.registry

    def open_session(self) -> None:
        if self.journal:
            self.journal.open_session()

    def close_session(self) -> None:
        if self.journal:
            self.journal.close_session()

    def step(self) -> int:
        """Runs one tick. Returns the total amount moved."""
        self.tick += 1
        if self.journal:
            self.journal.tick = self.tick

        sent = pipe_output_system(self.grid, bus=self.bus, rng=self.rng)
        total = sum(sent.values())

        self.bus.emit(TransportEvent(
            event_key=EVT_TICK_COMPLETED,
            source="loop",
            data={"tick": self.tick, "pipes_active": len(sent), "total_sent": total},
        ))
        return total

    def run(self, ticks: int) -> List[int]:
        return [self.step() for _ in range(ticks)]
