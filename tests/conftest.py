"""Shared pytest fixtures for handler-chain tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from handler_chain._types import Next
from handler_chain.context import RequestContext


@pytest.fixture
def make_request() -> Any:
    """Factory for creating mock Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def increment() -> Any:
    """Plain-function handler from the original sample: count, then continue."""

    def handler(ctx: RequestContext, call_next: Next) -> None:
        ctx.count += 1
        call_next()

    return handler


@pytest.fixture
def recorder() -> Any:
    """Factory for handlers that append their name to ``ctx.state['order']``."""

    def _make(name: str, *, call_next: bool = True) -> Any:
        def handler(ctx: RequestContext, next_: Next) -> None:
            ctx.state.setdefault("order", []).append(name)
            if call_next:
                next_()

        handler.__name__ = name
        return handler

    return _make


@pytest.fixture
def clean_load_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LOAD_* variables so config defaults are predictable."""
    for name in (
        "LOAD_URL",
        "LOAD_COUNT",
        "LOAD_METHOD",
        "LOAD_BODY",
        "LOAD_CONTENT_TYPE",
        "LOAD_TIMEOUT",
        "LOAD_CONCURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)
