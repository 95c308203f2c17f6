"""
Conduit — transport/acceptors.py
Fluid acceptor capability and the stock single-compartment tank.
================================================================
Version:     0.1
Stack:       Python 3.11+ | python-tcod-ecs
Status:      Production-ready.

Architecture notes
------------------
- FluidAcceptor is the capability interface. Instances are stored on
  entities under the FluidAcceptor component key:
      entity.components[FluidAcceptor] = FluidTank(...)
- `side` is always the face of the ACCEPTOR that is being touched, i.e.
  the opposite of the direction from the caller to the acceptor.
- fill() is the two-phase commit operation: do_fill=False is a capacity
  query, do_fill=True moves fluid. Both return the amount accepted and
  must satisfy 0 <= accepted <= stack.amount.
- Implementations are inconsistent in practice: some expose only
  tank_info(), others only the can_fill()/can_drain() probes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, List, Optional

from transport.directions import Direction, VALID_DIRECTIONS
from transport.fluids import FluidStack, TankInfo


class FluidAcceptor(ABC):

    @abstractmethod
    def tank_info(self, side: Direction) -> List[Optional[TankInfo]]:
        """Descriptors visible through `side`. May be empty or hold None entries."""

    @abstractmethod
    def can_fill(self, side: Direction, fluid: str) -> bool:
        ...

    @abstractmethod
    def can_drain(self, side: Direction, fluid: str) -> bool:
        ...

    @abstractmethod
    def fill(self, side: Direction, stack: FluidStack, do_fill: bool) -> int:
        """Accept up to stack.amount units. Returns the amount (to be) accepted."""


class FluidTank(FluidAcceptor):
    """
    Single-compartment fluid store.

    accepts       — fluid ids this tank takes. None = any fluid.
    input_sides   — faces that accept fluid. Default: all six.
    output_sides  — faces that release fluid. Default: all six.
    A side of None on fill()/drain() is internal access and skips the
    side check (used by the owning block itself).
    """

    def __init__(
        self,
        capacity: int,
        accepts: Optional[Iterable[str]] = None,
        input_sides: Optional[Iterable[Direction]] = None,
        output_sides: Optional[Iterable[Direction]] = None,
        stored: Optional[FluidStack] = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"Tank capacity must be non-negative, got {capacity}")
        if stored is not None and stored.amount > capacity:
            raise ValueError(f"Stored amount {stored.amount} exceeds capacity {capacity}")

        self.capacity = capacity
        self.accepts: Optional[FrozenSet[str]] = frozenset(accepts) if accepts is not None else None
        self.input_sides: FrozenSet[Direction] = frozenset(
            input_sides if input_sides is not None else VALID_DIRECTIONS
        )
        self.output_sides: FrozenSet[Direction] = frozenset(
            output_sides if output_sides is not None else VALID_DIRECTIONS
        )
        self.stored: Optional[FluidStack] = stored if stored and not stored.is_empty else None

    @property
    def amount(self) -> int:
        return self.stored.amount if self.stored else 0

    @property
    def fluid(self) -> Optional[str]:
        return self.stored.fluid if self.stored else None

    @property
    def space(self) -> int:
        return self.capacity - self.amount

    # ============================================================
    # CAPABILITY
    # ============================================================

    def tank_info(self, side: Direction) -> List[Optional[TankInfo]]:
        if side not in self.input_sides and side not in self.output_sides:
            return []
        return [TankInfo(fluid=self.stored, capacity=self.capacity)]

    def can_fill(self, side: Optional[Direction], fluid: str) -> bool:
        if side is not None and side not in self.input_sides:
            return False
        if self.accepts is not None and fluid not in self.accepts:
            return False
        return self.stored is None or self.stored.fluid == fluid

    def can_drain(self, side: Optional[Direction], fluid: Optional[str]) -> bool:
        if side is not None and side not in self.output_sides:
            return False
        if self.stored is None:
            return False
        return fluid is None or self.stored.fluid == fluid

    def fill(self, side: Optional[Direction], stack: Optional[FluidStack], do_fill: bool) -> int:
        if stack is None or stack.is_empty:
            return 0
        if not self.can_fill(side, stack.fluid):
            return 0

        filled = min(self.space, stack.amount)
        if do_fill and filled > 0:
            self.stored = FluidStack(stack.fluid, self.amount + filled)
        return filled

    def drain(self, side: Optional[Direction], max_amount: int, do_drain: bool) -> Optional[FluidStack]:
        """Removes up to max_amount. Returns what was (or would be) drained, or None."""
        if self.stored is None or max_amount <= 0:
            return None
        if not self.can_drain(side, None):
            return None

        drained = self.stored.with_amount(min(max_amount, self.stored.amount))
        if do_drain:
            remaining = self.stored.amount - drained.amount
            self.stored = self.stored.with_amount(remaining) if remaining > 0 else None
        return drained
