"""ChainHandler abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from handler_chain._types import Next
from handler_chain.context import RequestContext


class ChainHandler(ABC):
    """Base abstraction for a named unit of request processing.

    Plain functions taking ``(ctx, call_next)`` are accepted anywhere a
    ChainHandler is; subclassing only adds a stable name and a place for
    configuration.
    """

    @abstractmethod
    def handle(self, ctx: RequestContext, call_next: Next) -> None: ...

    def __call__(self, ctx: RequestContext, call_next: Next) -> None:
        self.handle(ctx, call_next)

    @property
    def name(self) -> str:
        return type(self).__name__


def handler_name(handler: Any) -> str:
    """Best-effort display name for a handler used in traces and logs."""
    if isinstance(handler, ChainHandler):
        return handler.name
    return getattr(handler, "__name__", type(handler).__name__)
