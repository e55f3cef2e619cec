"""Built-in chain handlers."""

from __future__ import annotations

from handler_chain._types import Handler, Next
from handler_chain.context import RequestContext
from handler_chain.exceptions import ChainAbort
from handler_chain.handler import ChainHandler


class Increment(ChainHandler):
    """Adds ``by`` to the context counter, then continues."""

    def __init__(self, by: int = 1) -> None:
        self._by = by

    def handle(self, ctx: RequestContext, call_next: Next) -> None:
        ctx.count += self._by
        call_next()


class Halt(ChainHandler):
    """Stops the chain without calling next."""

    def __init__(self, reason: str | None = None) -> None:
        self._reason = reason

    def handle(self, ctx: RequestContext, call_next: Next) -> None:
        ctx.state["halted_by"] = self._reason or self.name


class Abort(ChainHandler):
    """Stops the chain by raising ChainAbort."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        self._detail = detail
        self._status_code = status_code

    def handle(self, ctx: RequestContext, call_next: Next) -> None:
        raise ChainAbort(self._detail, status_code=self._status_code)


class FunctionHandler(ChainHandler):
    """Adapts a plain ``(ctx, call_next)`` callable and gives it a name."""

    def __init__(self, func: Handler, *, name: str | None = None) -> None:
        self._func = func
        self._name = name or getattr(func, "__name__", type(func).__name__)

    @property
    def name(self) -> str:
        return self._name

    def handle(self, ctx: RequestContext, call_next: Next) -> None:
        self._func(ctx, call_next)
