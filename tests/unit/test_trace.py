"""Tests for ChainTrace, TraceEntry, and debug integration."""

from __future__ import annotations

from typing import Any

import pytest

from handler_chain._types import Next
from handler_chain.chain import Chain
from handler_chain.context import RequestContext
from handler_chain.exceptions import ChainAbort
from handler_chain.handlers import Abort, Halt, Increment
from handler_chain.trace import ChainTrace, TraceEntry


class TestTraceEntry:
    def test_construction(self) -> None:
        entry = TraceEntry(
            handler_name="Increment",
            index=0,
            duration_ms=1.5,
            outcome="OK",
            called_next=True,
        )
        assert entry.handler_name == "Increment"
        assert entry.index == 0
        assert entry.duration_ms == 1.5
        assert entry.outcome == "OK"
        assert entry.called_next is True
        assert entry.reason is None

    def test_frozen(self) -> None:
        entry = TraceEntry(
            handler_name="Increment",
            index=0,
            duration_ms=1.5,
            outcome="OK",
            called_next=True,
        )
        with pytest.raises(AttributeError):
            entry.handler_name = "other"  # type: ignore[misc]


class TestChainTrace:
    def test_defaults(self) -> None:
        trace = ChainTrace()
        assert trace.entries == []
        assert trace.total_duration_ms == 0.0
        assert trace.outcome == "COMPLETED"
        assert trace.error is None


class TestDebugRun:
    def test_completed_run(self) -> None:
        ctx = Chain(Increment(), Increment(), debug=True).run()
        trace = ctx.state["trace"]
        assert isinstance(trace, ChainTrace)
        assert trace.outcome == "COMPLETED"
        assert [e.index for e in trace.entries] == [0, 1]
        assert all(e.outcome == "OK" and e.called_next for e in trace.entries)
        assert trace.total_duration_ms >= 0

    def test_entries_ordered_by_index(self, recorder: Any) -> None:
        ctx = Chain(recorder("a"), recorder("b"), recorder("c"), debug=True).run()
        names = [e.handler_name for e in ctx.state["trace"].entries]
        assert names == ["a", "b", "c"]

    def test_outer_duration_includes_inner(self) -> None:
        ctx = Chain(Increment(), Increment(), debug=True).run()
        outer, inner = ctx.state["trace"].entries
        assert outer.duration_ms >= inner.duration_ms

    def test_short_circuited_run(self) -> None:
        ctx = Chain(Increment(), Halt(), Increment(), debug=True).run()
        trace = ctx.state["trace"]
        assert trace.outcome == "SHORT_CIRCUITED"
        assert len(trace.entries) == 2
        assert trace.entries[1].handler_name == "Halt"
        assert trace.entries[1].called_next is False

    def test_error_run(self) -> None:
        ctx = RequestContext()
        with pytest.raises(ChainAbort):
            Chain(Increment(), Abort("denied", status_code=403), debug=True).run(ctx)
        trace = ctx.state["trace"]
        assert trace.outcome == "ERROR"
        assert isinstance(trace.error, ChainAbort)
        assert trace.entries[1].outcome == "FAILED"
        assert trace.entries[1].reason == "denied"
        # The enclosing handler saw the exception pass through it
        assert trace.entries[0].outcome == "FAILED"
        assert trace.entries[0].called_next is True

    def test_unexpected_exception_recorded(self) -> None:
        def broken(ctx: RequestContext, call_next: Next) -> None:
            raise RuntimeError("boom")

        ctx = RequestContext()
        with pytest.raises(RuntimeError):
            Chain(broken, debug=True).run(ctx)
        trace = ctx.state["trace"]
        assert trace.outcome == "ERROR"
        assert trace.entries[0].reason == "boom"

    def test_trace_per_run(self) -> None:
        chain = Chain(Increment(), debug=True)
        first = chain.run().state["trace"]
        second = chain.run().state["trace"]
        assert first is not second
