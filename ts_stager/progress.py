"""Phase bookkeeping for one staging run."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

PHASES = ("load", "discover", "stage")


@dataclass
class PhaseRecord:
    name: str
    status: str = "pending"  # "pending" | "running" | "completed" | "failed"
    started: float | None = None
    finished: float | None = None
    detail: str = ""
    error: str | None = None

    @property
    def elapsed(self) -> float | None:
        if self.started is None or self.finished is None:
            return None
        return round(self.finished - self.started, 3)


PhaseListener = Callable[[PhaseRecord], None]


class RunProgress:
    """Status of the load, discover and stage phases of a run.

    Every phase exists from the start as "pending", so a failed run still
    shows which phases never began. ``listener`` is called on each
    transition.
    """

    def __init__(self, listener: PhaseListener | None = None) -> None:
        self._records = {name: PhaseRecord(name) for name in PHASES}
        self.listener = listener

    def __iter__(self) -> Iterator[PhaseRecord]:
        return iter(self._records.values())

    def __getitem__(self, name: str) -> PhaseRecord:
        return self._records[name]

    @property
    def current(self) -> PhaseRecord | None:
        return next((r for r in self if r.status == "running"), None)

    @property
    def total_elapsed(self) -> float:
        return round(sum(r.elapsed or 0 for r in self), 3)

    def begin(self, name: str) -> None:
        record = self._records[name]
        record.status = "running"
        record.started = time.monotonic()
        self._emit(record)

    def finish(self, name: str, detail: str = "") -> None:
        record = self._records[name]
        record.status = "completed"
        record.finished = time.monotonic()
        record.detail = detail
        self._emit(record)

    def fail(self, error: str) -> None:
        """Mark the running phase failed; a no-op if none is running."""
        record = self.current
        if record is None:
            return
        record.status = "failed"
        record.finished = time.monotonic()
        record.error = error
        self._emit(record)

    def _emit(self, record: PhaseRecord) -> None:
        if self.listener is not None:
            self.listener(record)
