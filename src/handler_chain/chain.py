"""Chain class: ordered container of handlers and the compose() entry point."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from handler_chain._types import ComposedChain, Handler
from handler_chain.context import RequestContext
from handler_chain.exceptions import EmptyChainError
from handler_chain.execution import ChainRun

if TYPE_CHECKING:
    from handler_chain.hooks import ChainHook


@dataclass(frozen=True)
class ResolvedChain:
    """Immutable, pre-computed execution plan."""

    handlers: tuple[Handler, ...]
    hooks: tuple[ChainHook, ...] = ()
    debug: bool = False


class Chain:
    """Ordered container of handlers."""

    def __init__(self, *handlers: Handler | Chain, debug: bool = False) -> None:
        self._items: list[Handler | Chain] = list(handlers)
        self._hooks: list[ChainHook] = []
        self._debug = debug
        self._resolved: ResolvedChain | None = None

    def __len__(self) -> int:
        return len(self.resolve().handlers)

    def add(self, *handlers: Handler | Chain) -> Chain:
        self._items.extend(handlers)
        self._resolved = None
        return self

    def add_hook(self, hook: ChainHook) -> Chain:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedChain:
        if self._resolved is not None:
            return self._resolved

        flat: list[Handler] = []
        self._flatten(self._items, flat)

        self._resolved = ResolvedChain(
            handlers=tuple(flat),
            hooks=tuple(self._hooks),
            debug=self._debug,
        )
        return self._resolved

    def compose(self) -> ComposedChain:
        resolved = self.resolve()
        return compose(resolved.handlers, hooks=resolved.hooks, debug=resolved.debug)

    def run(self, ctx: RequestContext | None = None) -> RequestContext:
        return self.compose()(ctx if ctx is not None else RequestContext())

    @staticmethod
    def _flatten(items: list[Handler | Chain], out: list[Handler]) -> None:
        for item in items:
            if isinstance(item, Chain):
                Chain._flatten(item._items, out)
            else:
                out.append(item)


def compose(
    handlers: Iterable[Handler],
    *,
    hooks: Iterable[ChainHook] = (),
    debug: bool = False,
) -> ComposedChain:
    """Compose handlers into a single callable.

    Calling the result with a context runs the first handler with a
    continuation for the second one, and so on; the continuation past the
    last handler does nothing. The context is returned once the first
    handler returns.

    Raises EmptyChainError when ``handlers`` is empty.
    """
    resolved = ResolvedChain(handlers=tuple(handlers), hooks=tuple(hooks), debug=debug)
    if not resolved.handlers:
        raise EmptyChainError()

    def composed(ctx: RequestContext) -> RequestContext:
        return ChainRun(resolved, ctx).execute()

    composed.resolved = resolved  # type: ignore[attr-defined]
    return composed
