"""LoadConfig: parameters of a single load run."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_URL = "http://localhost:4221"
ECHO_URL = "http://localhost:4221/echo"
ECHO_BODY = "Young john"
DEFAULT_COUNT = 100


class JoinPolicy(Enum):
    """How a load run reacts when one of its requests fails."""

    FAIL_FAST = "fail-fast"
    COLLECT = "collect"


@dataclass(frozen=True)
class LoadConfig:
    """Immutable description of one load run.

    ``timeout`` and ``concurrency`` default to None, meaning no timeout and
    every request in flight at once.
    """

    count: int = DEFAULT_COUNT
    url: str = DEFAULT_URL
    method: str = "GET"
    body: str | None = None
    content_type: str | None = None
    timeout: float | None = None
    concurrency: int | None = None
    check_status: bool = False
    join: JoinPolicy = JoinPolicy.FAIL_FAST

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.concurrency is not None and self.concurrency <= 0:
            raise ValueError(f"concurrency must be > 0, got {self.concurrency}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")
        object.__setattr__(self, "method", self.method.upper())

    @property
    def label(self) -> str:
        return f"{self.count} requests"

    @property
    def headers(self) -> dict[str, str]:
        if self.content_type is None:
            return {}
        return {"Content-Type": self.content_type}

    @classmethod
    def echo(cls, count: int = DEFAULT_COUNT, **overrides: Any) -> LoadConfig:
        """POST variant: plain-text body sent to the echo endpoint."""
        params: dict[str, Any] = {
            "url": ECHO_URL,
            "method": "POST",
            "body": ECHO_BODY,
            "content_type": "text/plain",
        }
        params.update(overrides)
        return cls(count=count, **params)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoadConfig:
        """Build a config from ``LOAD_*`` environment variables."""
        env = os.environ if environ is None else environ
        params: dict[str, Any] = {}
        if "LOAD_URL" in env:
            params["url"] = env["LOAD_URL"]
        if "LOAD_COUNT" in env:
            params["count"] = int(env["LOAD_COUNT"])
        if "LOAD_METHOD" in env:
            params["method"] = env["LOAD_METHOD"]
        if "LOAD_BODY" in env:
            params["body"] = env["LOAD_BODY"]
        if "LOAD_CONTENT_TYPE" in env:
            params["content_type"] = env["LOAD_CONTENT_TYPE"]
        if "LOAD_TIMEOUT" in env:
            params["timeout"] = float(env["LOAD_TIMEOUT"])
        if "LOAD_CONCURRENCY" in env:
            params["concurrency"] = int(env["LOAD_CONCURRENCY"])
        return cls(**params)
