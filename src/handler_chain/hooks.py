"""ChainHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Callable

from handler_chain._types import Handler
from handler_chain.context import RequestContext


class ChainHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default."""

    def on_chain_start(self, ctx: RequestContext) -> None:
        pass

    def on_chain_end(self, ctx: RequestContext) -> None:
        pass

    def on_handler(
        self,
        ctx: RequestContext,
        handler: Handler,
        error: BaseException | None,
    ) -> None:
        pass


class BeforeChain(ChainHook):
    """Convenience hook that only fires on chain start."""

    def __init__(self, callback: Callable[[RequestContext], None]) -> None:
        self._callback = callback

    def on_chain_start(self, ctx: RequestContext) -> None:
        self._callback(ctx)


class AfterChain(ChainHook):
    """Convenience hook that only fires on chain end."""

    def __init__(self, callback: Callable[[RequestContext], None]) -> None:
        self._callback = callback

    def on_chain_end(self, ctx: RequestContext) -> None:
        self._callback(ctx)


class AfterHandler(ChainHook):
    """Convenience hook that fires when each handler returns."""

    def __init__(
        self,
        callback: Callable[[RequestContext, Handler, BaseException | None], None],
    ) -> None:
        self._callback = callback

    def on_handler(
        self,
        ctx: RequestContext,
        handler: Handler,
        error: BaseException | None,
    ) -> None:
        self._callback(ctx, handler, error)
