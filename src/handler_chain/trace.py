"""ChainTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class TraceEntry:
    """Single handler execution record.

    ``duration_ms`` includes the time spent in downstream handlers.
    """

    handler_name: str
    index: int
    duration_ms: float
    outcome: Literal["OK", "FAILED"]
    called_next: bool
    reason: str | None = None


@dataclass
class ChainTrace:
    """Structured record of a single chain execution."""

    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["COMPLETED", "SHORT_CIRCUITED", "ERROR"] = "COMPLETED"
    error: BaseException | None = None
