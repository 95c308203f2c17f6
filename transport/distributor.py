"""
Conduit — transport/distributor.py
Fair Distributor: split a fluid stack across neighboring acceptors.
===================================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs | bespoke EventBus
Status:      Production-ready.

Emission sequence per call
--------------------------
  1. classify neighbors; keep ACCEPTOR slots on the requested sides
  2. keep acceptors whose can_fill() takes this fluid from that face
  3. shuffle (injected RNG) so no side is favored by the remainder
  4. base = amount // n; the first amount % n acceptors get one extra
  5. fill(..., do_fill=True) each share; sum what was accepted

Single best-effort pass. Whatever acceptors refuse stays with the caller;
there is no second round within one call.

Acceptor contract
-----------------
  0 <= accepted <= offered. Violations are NOT clamped: the raw value is
  counted, reported to stderr and on the bus, and raised as
  AcceptorContractError in strict mode.
"""

from __future__ import annotations

import random
import sys
from typing import Iterable, List, Optional

import tcod.ecs

from transport.classifier import NeighborKind, NeighborSlot, classify
from transport.config import load_config
from transport.directions import Direction
from transport.ecs.components import BlockIdentity, Position, TransmissionType
from transport.events import EventBus, TransportEvent, EVT_ACCEPTOR_CONTRACT_VIOLATION
from transport.fluids import FluidStack
from world.grid import WorldGrid


class AcceptorContractError(ValueError):
    """An acceptor reported accepting a negative amount or more than offered."""


def describe(entity: Optional[tcod.ecs.Entity]) -> str:
    """Short handle for diagnostics and event payloads."""
    if entity is None:
        return "none"
    if BlockIdentity in entity.components:
        label = entity.components[BlockIdentity].block_id
    else:
        label = "block"
    if Position in entity.components:
        pos = entity.components[Position]
        return f"{label}@{pos.x},{pos.y},{pos.z}"
    return label


def compute_shares(amount: int, divisor: int) -> List[int]:
    """
    Splits `amount` into `divisor` shares: base = amount // divisor, and the
    first amount % divisor shares carry one extra unit. Sums to `amount`.
    """
    if divisor <= 0:
        return []
    base, remainder = divmod(amount, divisor)
    return [base + 1 if i < remainder else base for i in range(divisor)]


def eligible_acceptors(
    grid: WorldGrid,
    node: tcod.ecs.Entity,
    directions: Iterable[Direction],
    fluid: str,
) -> List[NeighborSlot]:
    """ACCEPTOR slots on `directions` whose probe takes `fluid`, in Direction order."""
    wanted = set(directions)
    return [
        slot for slot in classify(grid, node, TransmissionType.FLUID)
        if slot.kind is NeighborKind.ACCEPTOR
        and slot.direction in wanted
        and slot.acceptor.can_fill(slot.direction.opposite, fluid)
    ]


def _report_violation(
    node: tcod.ecs.Entity,
    slot: NeighborSlot,
    offered: int,
    accepted: int,
    bus: Optional[EventBus],
    strict: bool,
) -> None:
    message = (
        f"{describe(slot.entity)} accepted {accepted} of {offered} "
        f"offered from {slot.direction.name}"
    )
    print(f"[Distributor] Acceptor contract violation: {message}", file=sys.stderr)
    if bus is not None:
        bus.emit(TransportEvent(
            event_key=EVT_ACCEPTOR_CONTRACT_VIOLATION,
            source=describe(node),
            target=describe(slot.entity),
            data={"direction": slot.direction.name, "offered": offered, "accepted": accepted},
        ))
    if strict:
        raise AcceptorContractError(message)


def emit(
    grid: WorldGrid,
    node: tcod.ecs.Entity,
    directions: Iterable[Direction],
    stack: Optional[FluidStack],
    rng: Optional[random.Random] = None,
    bus: Optional[EventBus] = None,
    strict: Optional[bool] = None,
) -> int:
    """
    Offers `stack` to the acceptors around `node` on `directions`.
    Returns the total amount the acceptors actually took.
    """
    if stack is None or stack.amount == 0:
        return 0

    available = eligible_acceptors(grid, node, directions, stack.fluid)
    if not available:
        return 0

    if rng is None:
        rng = random.Random()
    rng.shuffle(available)

    if strict is None:
        strict = load_config().strict_acceptor_contract

    sent = 0
    for slot, share in zip(available, compute_shares(stack.amount, len(available))):
        accepted = slot.acceptor.fill(slot.direction.opposite, stack.with_amount(share), True)
        if accepted < 0 or accepted > share:
            _report_violation(node, slot, share, accepted, bus, strict)
        sent += accepted

    return sent
