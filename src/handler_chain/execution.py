"""Cursor-based execution engine for resolved chains."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Literal

from handler_chain.context import RequestContext
from handler_chain.exceptions import ContinuationReused
from handler_chain.handler import handler_name
from handler_chain.trace import ChainTrace, TraceEntry

if TYPE_CHECKING:
    from handler_chain._types import Handler
    from handler_chain.chain import ResolvedChain

logger = logging.getLogger(__name__)


class Continuation:
    """Single-use callback that moves the cursor to ``index`` and runs it."""

    __slots__ = ("_run", "index", "used")

    def __init__(self, run: ChainRun, index: int) -> None:
        self._run = run
        self.index = index
        self.used = False

    def __call__(self) -> None:
        if self.used:
            raise ContinuationReused(self.index)
        self.used = True
        self._run.invoke(self.index)


class ChainRun:
    """One execution of a resolved chain over a single context."""

    def __init__(self, resolved: ResolvedChain, ctx: RequestContext) -> None:
        self.resolved = resolved
        self.ctx = ctx
        self.completed = False
        self.trace: ChainTrace | None = ChainTrace() if resolved.debug else None

    def execute(self) -> RequestContext:
        ctx = self.ctx
        hooks = self.resolved.hooks

        start = time.perf_counter()
        try:
            for hook in hooks:
                hook.on_chain_start(ctx)
            Continuation(self, 0)()
        except Exception as exc:
            self._finish_trace(start, "ERROR", exc)
            raise
        else:
            self._finish_trace(
                start, "COMPLETED" if self.completed else "SHORT_CIRCUITED", None
            )
        finally:
            for hook in hooks:
                hook.on_chain_end(ctx)

        return ctx

    def invoke(self, index: int) -> None:
        handlers = self.resolved.handlers
        if index >= len(handlers):
            # Terminal continuation
            self.completed = True
            return

        handler = handlers[index]
        call_next = Continuation(self, index + 1)
        logger.debug("Running handler #%d %s", index, handler_name(handler))

        start = time.perf_counter()
        try:
            handler(self.ctx, call_next)
        except Exception as exc:
            self._record(index, handler, start, call_next.used, exc)
            for hook in self.resolved.hooks:
                hook.on_handler(self.ctx, handler, exc)
            raise

        self._record(index, handler, start, call_next.used, None)
        if not call_next.used:
            logger.debug(
                "Handler #%d %s did not call next, chain short-circuited",
                index,
                handler_name(handler),
            )
        for hook in self.resolved.hooks:
            hook.on_handler(self.ctx, handler, None)

    def _record(
        self,
        index: int,
        handler: Handler,
        start: float,
        called_next: bool,
        error: Exception | None,
    ) -> None:
        if self.trace is None:
            return
        self.trace.entries.append(
            TraceEntry(
                handler_name=handler_name(handler),
                index=index,
                duration_ms=(time.perf_counter() - start) * 1000,
                outcome="OK" if error is None else "FAILED",
                called_next=called_next,
                reason=None if error is None else str(error),
            )
        )

    def _finish_trace(
        self,
        start: float,
        outcome: Literal["COMPLETED", "SHORT_CIRCUITED", "ERROR"],
        error: Exception | None,
    ) -> None:
        if self.trace is None:
            return
        # Handlers nest, so entries were recorded innermost first
        self.trace.entries.sort(key=lambda entry: entry.index)
        self.trace.total_duration_ms = (time.perf_counter() - start) * 1000
        self.trace.outcome = outcome
        self.trace.error = error
        self.ctx.state["trace"] = self.trace
