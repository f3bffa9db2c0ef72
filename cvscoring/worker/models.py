from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

JobStatus = Literal["pending", "running", "done", "failed"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class QueuedJob:
    """A unit of work on the analysis queue and its observable state."""

    id: int
    name: str
    func: Callable[[], object] = field(repr=False)
    status: JobStatus = "pending"
    attempts: int = 0
    error_message: str | None = None
    enqueued_at: datetime = field(default_factory=_now)
    started_at: datetime | None = None
    finished_at: datetime | None = None
