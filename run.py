"""
Conduit — run.py
Console demo: one pre-filled pipe feeding a ring of tanks.
"""

import sys
from pathlib import Path

from transport.acceptors import FluidAcceptor
from transport.connectivity import connections
from transport.directions import VALID_DIRECTIONS
from transport.ecs.components import BlockIdentity
from transport.loop import TransportLoop
from world.spawner import spawn_pipe, spawn_tank, spawn_tube


def main(ticks: int = 5) -> None:
    loop = TransportLoop(seed=42, journal_path=Path("sessions/flow.jsonl"))
    grid = loop.grid

    pipe = spawn_pipe(grid, 0, 64, 0, tier="advanced", fluid="water", amount=4000)
    spawn_tank(grid, 1, 64, 0, capacity=500, name="East Tank")
    spawn_tank(grid, -1, 64, 0, capacity=8000, name="West Tank")
    spawn_tank(grid, 0, 63, 0, capacity=8000, accepts=["lava"], name="Lava Tank")
    spawn_pipe(grid, 0, 65, 0)
    spawn_tube(grid, 0, 64, 1, buffer_capacity=1000)

    mask = connections(grid, pipe)
    print("Connections:", ", ".join(d.name for d in VALID_DIRECTIONS if mask[d.ordinal]))

    loop.open_session()
    for _ in range(ticks):
        total = loop.step()
        print(f"tick {loop.tick}: sent {total} mB")
    loop.close_session()

    for ent in grid.blocks():
        if BlockIdentity in ent.components and FluidAcceptor in ent.components:
            tank = ent.components[FluidAcceptor]
            print(f"  {ent.components[BlockIdentity].name:32s} {tank.amount:6d} / {tank.capacity}")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 5)
