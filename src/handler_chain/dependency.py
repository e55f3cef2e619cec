"""chain_dependency(): factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import Request

from handler_chain.chain import Chain
from handler_chain.context import RequestContext
from handler_chain.exceptions import ChainAbort, ChainInternalError

logger = logging.getLogger(__name__)


def chain_dependency(chain: Chain) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that runs the chain per request.

    Raises EmptyChainError immediately when the chain has no handlers.
    """
    composed = chain.compose()

    async def dependency(request: Request) -> RequestContext:
        ctx = RequestContext(request=request)
        try:
            return composed(ctx)
        except ChainAbort as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
        except Exception as exc:
            logger.exception(
                "Handler chain failed for %s %s", request.method, request.url.path
            )
            wrapped = ChainInternalError("Internal chain error", cause=exc)
            raise HTTPException(status_code=500, detail=wrapped.detail) from wrapped

    dependency._chain_resolved = chain.resolve()  # type: ignore[attr-defined]

    return dependency
