"""RequestContext: per-invocation state passed through a chain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request


@dataclass
class RequestContext:
    """Mutable per-invocation record shared by every handler of one run."""

    count: int = 0
    request: Request | None = None
    state: dict[str, Any] = field(default_factory=dict)
