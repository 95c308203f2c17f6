"""
Conduit — transport/journal.py
Flow Journal: append-only JSONL record of transport events.
===========================================================
Version:     0.1
Stack:       Python 3.11+ | stdlib json | bespoke EventBus
Status:      Production-ready.

Architecture notes
------------------
- FlowJournal is a PASSIVE wildcard subscriber. It never emits events.
- Append-only JSONL. Written entries are never modified.
- Significance gate (int 1–5): events below the configured minimum are
  discarded silently.
- Simulation time (tick) is injected and advanced by the owning loop.
  The journal never reads the system clock.

Significance Scoring Reference (JOURNAL_SIGNIFICANCE_MIN = 2)
--------------------------------------------------------------
  1 — routine (EVT_TICK_COMPLETED)
  2 — fluid moved (EVT_FLUID_EMITTED)
  4 — acceptor misbehaved (EVT_ACCEPTOR_CONTRACT_VIOLATION)
  5 — session markers (ungated)
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from transport.config import load_config
from transport.events import (
    EventBus,
    TransportEvent,
    WILDCARD,
    EVT_ACCEPTOR_CONTRACT_VIOLATION,
    EVT_FLUID_EMITTED,
    EVT_TICK_COMPLETED,
)

EVT_SESSION_OPENED = "journal.session_opened"
EVT_SESSION_CLOSED = "journal.session_closed"

_SIGNIFICANCE_TABLE: Dict[str, int] = {
    EVT_TICK_COMPLETED:               1,
    EVT_FLUID_EMITTED:                2,
    EVT_ACCEPTOR_CONTRACT_VIOLATION:  4,
}


def score_significance(event: TransportEvent) -> int:
    return _SIGNIFICANCE_TABLE.get(event.event_key, 1)


@dataclass(frozen=True)
class JournalEntry:
    entry_id: str
    tick: int
    event_key: str
    source: str
    target: Optional[str]
    data: Dict[str, Any]
    significance: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entry_id":     self.entry_id,
            "tick":         self.tick,
            "event_key":    self.event_key,
            "source":       self.source,
            "target":       self.target,
            "data":         self.data,
            "significance": self.significance,
        }


class FlowJournal:
    """
    Usage:
        bus = EventBus()
        journal = FlowJournal(bus, Path("sessions/flow.jsonl"))
        journal.open_session()
        # ... ticks; owner sets journal.tick ...
        journal.close_session()
    """

    def __init__(
        self,
        bus: EventBus,
        journal_path: Path,
        tick: int = 0,
        significance_min: Optional[int] = None,
    ) -> None:
        self.bus = bus
        self.journal_path = journal_path
        self.tick = tick
        self.significance_min = (
            significance_min if significance_min is not None
            else load_config().journal_significance_min
        )

        self.journal_path.parent.mkdir(parents=True, exist_ok=True)
        bus.subscribe(WILDCARD, self._on_event)

    def open_session(self) -> None:
        self._write(TransportEvent(event_key=EVT_SESSION_OPENED, source="system"), significance=5)

    def close_session(self) -> None:
        self._write(TransportEvent(event_key=EVT_SESSION_CLOSED, source="system"), significance=5)

    def _on_event(self, event: TransportEvent) -> None:
        significance = score_significance(event)
        if significance < self.significance_min:
            return
        self._write(event, significance)

    def _write(self, event: TransportEvent, significance: int) -> JournalEntry:
        entry = JournalEntry(
            entry_id=str(uuid.uuid4()),
            tick=self.tick,
            event_key=event.event_key,
            source=event.source,
            target=event.target,
            data=dict(event.data),
            significance=significance,
        )
        with open(self.journal_path, "a", encoding="utf-8") as fh:
            fh.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")
        return entry


class JournalReader:
    """Read-only query interface for a flow journal file."""

    def __init__(self, journal_path: Path) -> None:
        self.journal_path = journal_path

    def all_entries(self) -> List[Dict[str, Any]]:
        if not self.journal_path.exists():
            return []
        entries = []
        with open(self.journal_path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if line:
                    entries.append(json.loads(line))
        return entries

    def by_event_key(self, event_key: str) -> List[Dict[str, Any]]:
        return [e for e in self.all_entries() if e.get("event_key") == event_key]

    def emissions(self) -> List[Dict[str, Any]]:
        return self.by_event_key(EVT_FLUID_EMITTED)

    def violations(self) -> List[Dict[str, Any]]:
        return self.by_event_key(EVT_ACCEPTOR_CONTRACT_VIOLATION)

    def session_markers(self) -> List[Dict[str, Any]]:
        return [e for e in self.all_entries() if e.get("event_key", "").startswith("journal.session")]
