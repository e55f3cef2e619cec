"""Command line entry point for the load generator."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from collections.abc import Sequence

from handler_chain.exceptions import LoadTaskFailed
from handler_chain.load.config import ECHO_BODY, ECHO_URL, JoinPolicy, LoadConfig
from handler_chain.load.runner import run_load

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handler-chain-load",
        description="Fire concurrent HTTP requests at a server and time the batch.",
    )
    parser.add_argument("-n", "--count", type=int, help="number of requests")
    parser.add_argument("--url", help="target URL")
    parser.add_argument("-X", "--method", help="HTTP method")
    parser.add_argument("-d", "--data", dest="body", help="request body")
    parser.add_argument("--content-type", help="Content-Type header value")
    parser.add_argument(
        "--echo",
        action="store_true",
        help=f"POST {ECHO_BODY!r} as text/plain to {ECHO_URL}",
    )
    parser.add_argument("--timeout", type=float, help="per-request timeout (s)")
    parser.add_argument(
        "-c", "--concurrency", type=int, help="maximum requests in flight"
    )
    parser.add_argument(
        "--check-status",
        action="store_true",
        help="treat non-2xx responses as failures",
    )
    parser.add_argument(
        "--collect",
        action="store_true",
        help="wait for every request instead of stopping at the first failure",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> LoadConfig:
    """Merge CLI flags over ``LOAD_*`` environment defaults."""
    base = LoadConfig.from_env()
    if args.echo:
        base = dataclasses.replace(
            base,
            url=ECHO_URL,
            method="POST",
            body=ECHO_BODY,
            content_type="text/plain",
        )

    overrides = {
        name: getattr(args, name)
        for name in ("count", "url", "method", "body", "content_type", "timeout")
        if getattr(args, name) is not None
    }
    if args.concurrency is not None:
        overrides["concurrency"] = args.concurrency
    if args.check_status:
        overrides["check_status"] = True
    if args.collect:
        overrides["join"] = JoinPolicy.COLLECT
    return dataclasses.replace(base, **overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("Load config: %s", config)

    try:
        report = asyncio.run(run_load(config))
    except LoadTaskFailed as exc:
        print(f"{config.label} failed: {exc}", file=sys.stderr)
        return 1

    if report.failed:
        for outcome in report.failed:
            print(
                f"Request #{outcome.index} failed: {outcome.error!r}", file=sys.stderr
            )
        return 1
    return 0
