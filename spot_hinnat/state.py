"""
Dashboard session state and its transitions.

The state is one immutable value.  Every change goes through a transition
function that returns a new value; the filtered day and its stats are never
stored, only derived with :func:`view`.  The state round-trips through a
plain dict so it can be kept in a ``dcc.Store``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .aggregate import aggregate
from .logger import log
from .models import DailyStats, PriceRecord

# ── Load status ──────────────────────────────────────────────────────────────
IDLE = "idle"
LOADING = "loading"
READY = "ready"
FAILED = "failed"


@dataclass(frozen=True)
class DashboardState:
    records: tuple[PriceRecord, ...] = ()
    day_key: str = ""
    load_status: str = IDLE
    error: str | None = None
    # id of the most recent load; results carrying an older id are dropped
    request_id: int = 0

    def to_store(self) -> dict:
        return {
            "records": [r.to_dict() for r in self.records],
            "day_key": self.day_key,
            "load_status": self.load_status,
            "error": self.error,
            "request_id": self.request_id,
        }

    @classmethod
    def from_store(cls, data: dict | None) -> "DashboardState":
        if not data:
            return cls()
        return cls(
            records=tuple(PriceRecord.from_dict(r) for r in data.get("records", [])),
            day_key=data.get("day_key") or "",
            load_status=data.get("load_status", IDLE),
            error=data.get("error"),
            request_id=int(data.get("request_id", 0)),
        )


# ── Transitions ──────────────────────────────────────────────────────────────

def load_started(state: DashboardState) -> tuple[DashboardState, int]:
    """Begin a new load; returns the new state and the id of this load."""
    rid = state.request_id + 1
    return replace(state, load_status=LOADING, error=None, request_id=rid), rid


def load_succeeded(
    state: DashboardState,
    records: Iterable[PriceRecord],
    request_id: int,
) -> DashboardState:
    if request_id != state.request_id:
        log.info("Dropping superseded load #%d (current #%d)", request_id, state.request_id)
        return state
    return replace(state, records=tuple(records), load_status=READY, error=None)


def load_failed(state: DashboardState, message: str, request_id: int) -> DashboardState:
    """Record a failed load.  Records are cleared so no stale data is shown."""
    if request_id != state.request_id:
        log.info("Dropping superseded failure #%d (current #%d)", request_id, state.request_id)
        return state
    return replace(state, records=(), load_status=FAILED, error=message)


def day_selected(state: DashboardState, day_key: str | None) -> DashboardState:
    return replace(state, day_key=day_key or "")


# ── Derived view ─────────────────────────────────────────────────────────────

def view(state: DashboardState) -> tuple[tuple[PriceRecord, ...], DailyStats]:
    """Filtered day and its stats; empty unless the last load succeeded."""
    if state.load_status != READY:
        return (), DailyStats.empty()
    return aggregate(state.records, state.day_key)
