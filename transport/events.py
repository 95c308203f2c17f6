"""
Conduit — transport/events.py
Transport events and the bespoke pub-sub bus.
=============================================
Version:     0.1
Stack:       Python 3.11+ | Pydantic v2 | bespoke pub-sub
Status:      Production-ready.

Architecture notes
------------------
- EventBus is Pydantic v2–typed. All events are TransportEvent instances.
- The bus is injected wherever it is needed — no global singleton.
- The journal receives every event via wildcard subscription ("*").
- Per-handler errors are printed to stderr and emission continues.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

# ============================================================
# CANONICAL EVENT KEYS
# Never use raw strings. Add new keys here only.
# ============================================================

EVT_FLUID_EMITTED                 = "transport.fluid_emitted"
EVT_ACCEPTOR_CONTRACT_VIOLATION   = "transport.acceptor_contract_violation"
EVT_TICK_COMPLETED                = "transport.tick_completed"


# ============================================================
# EVENT MODEL  (Pydantic v2)
# data dict must remain flat + JSON-serializable.
# ============================================================

class TransportEvent(BaseModel):
    event_key: str
    source: str
    target: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)


HandlerFn = Callable[[TransportEvent], None]

WILDCARD = "*"


class EventBus:
    """
    Routes TransportEvents to handlers keyed by event_key.

    Handlers for the exact key run first, then WILDCARD handlers, each in
    subscription order. A handler that raises is reported on stderr and
    skipped; the remaining handlers still run and emit() never raises.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[HandlerFn]] = {}

    def subscribe(self, event_key: str, handler: HandlerFn) -> None:
        self._handlers.setdefault(event_key, []).append(handler)

    def unsubscribe(self, event_key: str, handler: HandlerFn) -> None:
        remaining = [h for h in self._handlers.get(event_key, []) if h is not handler]
        if remaining:
            self._handlers[event_key] = remaining
        else:
            self._handlers.pop(event_key, None)

    def handlers_for(self, event_key: str) -> List[HandlerFn]:
        """Snapshot of the handlers an emit of `event_key` would call, in call order."""
        return [*self._handlers.get(event_key, ()), *self._handlers.get(WILDCARD, ())]

    def emit(self, event: TransportEvent) -> None:
        for handler in self.handlers_for(event.event_key):
            try:
                handler(event)
            except Exception as exc:  # noqa: BLE001
                print(f"[EventBus] Handler error on '{event.event_key}': {exc}", file=sys.stderr)
