"""Echo target server for load runs.

Answers ``GET /`` with a fixed greeting and ``POST /echo`` with the request
body. Every request passes through a handler chain that counts it.
"""

from __future__ import annotations

import argparse
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from handler_chain._types import Next
from handler_chain.chain import Chain
from handler_chain.context import RequestContext
from handler_chain.dependency import chain_dependency
from handler_chain.handlers import Increment

logger = logging.getLogger(__name__)

GREETING = "Jung jung"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 4221


def count_served(ctx: RequestContext, call_next: Next) -> None:
    """Bump the app-wide request counter."""
    if ctx.request is not None:
        state = ctx.request.app.state
        state.requests_served = getattr(state, "requests_served", 0) + 1
    call_next()


def create_app(chain: Chain | None = None) -> FastAPI:
    """Build the echo target app; ``chain`` replaces the default counting chain."""
    app = FastAPI(title="handler-chain echo target")
    app.state.requests_served = 0
    request_chain = chain if chain is not None else Chain(Increment(), count_served)
    served = Depends(chain_dependency(request_chain))

    @app.get("/", response_class=PlainTextResponse)
    async def greet(ctx: RequestContext = served) -> str:
        return GREETING

    @app.post("/echo", response_class=PlainTextResponse)
    async def echo(request: Request, ctx: RequestContext = served) -> str:
        body = await request.body()
        return body.decode()

    return app


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    import uvicorn

    logger.info("Listening on %s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="handler-chain-target", description="Run the echo target server."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    serve(args.host, args.port)


if __name__ == "__main__":
    main()
