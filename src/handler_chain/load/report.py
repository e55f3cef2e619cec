"""TaskOutcome and LoadReport: results of a load run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TaskOutcome:
    """Result of one request in a batch."""

    index: int
    duration_ms: float
    status_code: int | None = None
    body: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoadReport:
    """Aggregate result of a load run."""

    label: str
    count: int
    elapsed_ms: float = 0.0
    outcomes: list[TaskOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> list[TaskOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    def timing_line(self) -> str:
        return f"{self.label}: {self.elapsed_ms:.3f}ms"
