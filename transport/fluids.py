"""
Conduit — transport/fluids.py
Fluid value types: stacks and tank descriptors.
===============================================
Version:     0.1
Stack:       Python 3.11+
Status:      Stable.

FluidStack is immutable. Distribution never edits a stack in place; it
builds a new one per acceptor via with_amount().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FluidStack:
    fluid: str
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"FluidStack amount must be non-negative, got {self.amount}")

    def with_amount(self, amount: int) -> "FluidStack":
        return FluidStack(self.fluid, amount)

    @property
    def is_empty(self) -> bool:
        return self.amount == 0


@dataclass(frozen=True)
class TankInfo:
    """Capacity descriptor for one storage compartment."""
    fluid: Optional[FluidStack]
    capacity: int
