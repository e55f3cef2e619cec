"""run_load(): fire a batch of concurrent requests and time the batch."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from contextlib import nullcontext

import httpx

from handler_chain.exceptions import LoadTaskFailed
from handler_chain.load.config import JoinPolicy, LoadConfig
from handler_chain.load.report import LoadReport, TaskOutcome

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]


async def run_load(
    config: LoadConfig,
    *,
    client: httpx.AsyncClient | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    on_body: LineSink = print,
    on_timing: LineSink = print,
) -> LoadReport:
    """Issue ``config.count`` concurrent requests and wait for all of them.

    Each response body is passed to ``on_body`` as soon as it arrives. After
    the batch joins, ``on_timing`` receives one ``"<N> requests: <ms>ms"``
    line. With ``JoinPolicy.FAIL_FAST`` the first failed request cancels the
    requests still in flight and raises LoadTaskFailed; with
    ``JoinPolicy.COLLECT`` failures are recorded in the report instead.
    """
    report = LoadReport(label=config.label, count=config.count)
    logger.info("Starting %s: %s %s", config.label, config.method, config.url)

    if client is None:
        async with _make_client(config, transport) as owned:
            await _run_batch(config, owned, report, on_body)
    else:
        await _run_batch(config, client, report, on_body)

    logger.info(
        "Finished %s: %d ok, %d failed",
        config.label,
        report.succeeded,
        len(report.failed),
    )
    on_timing(report.timing_line())
    return report


def _make_client(
    config: LoadConfig, transport: httpx.AsyncBaseTransport | None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(config.timeout),
        limits=httpx.Limits(max_connections=config.concurrency),
    )


async def _run_batch(
    config: LoadConfig,
    client: httpx.AsyncClient,
    report: LoadReport,
    on_body: LineSink,
) -> None:
    semaphore: asyncio.Semaphore | None = None
    if config.concurrency is not None:
        semaphore = asyncio.Semaphore(config.concurrency)

    start = time.perf_counter()
    tasks = [
        asyncio.create_task(
            _fire(client, config, index, semaphore, on_body), name=f"load-{index}"
        )
        for index in range(config.count)
    ]

    try:
        if config.join is JoinPolicy.FAIL_FAST:
            await _join_fail_fast(tasks, report)
        else:
            report.outcomes.extend(await asyncio.gather(*tasks))
    finally:
        await _cancel_leftovers(tasks)

    report.elapsed_ms = (time.perf_counter() - start) * 1000
    report.outcomes.sort(key=lambda outcome: outcome.index)


async def _fire(
    client: httpx.AsyncClient,
    config: LoadConfig,
    index: int,
    semaphore: asyncio.Semaphore | None,
    on_body: LineSink,
) -> TaskOutcome:
    async with semaphore if semaphore is not None else nullcontext():
        start = time.perf_counter()
        try:
            response = await client.request(
                config.method,
                config.url,
                content=config.body,
                headers=config.headers,
            )
            if config.check_status:
                response.raise_for_status()
            body = response.text
            on_body(body)
        except Exception as exc:
            logger.warning("Request #%d to %s failed: %r", index, config.url, exc)
            return TaskOutcome(
                index=index,
                duration_ms=(time.perf_counter() - start) * 1000,
                error=exc,
            )

        return TaskOutcome(
            index=index,
            duration_ms=(time.perf_counter() - start) * 1000,
            status_code=response.status_code,
            body=body,
        )


async def _join_fail_fast(
    tasks: list[asyncio.Task[TaskOutcome]], report: LoadReport
) -> None:
    for next_done in asyncio.as_completed(tasks):
        outcome = await next_done
        if outcome.error is not None:
            raise LoadTaskFailed(outcome.index, outcome.error) from outcome.error
        report.outcomes.append(outcome)


async def _cancel_leftovers(tasks: list[asyncio.Task[TaskOutcome]]) -> None:
    pending = [task for task in tasks if not task.done()]
    for task in pending:
        task.cancel()
    if pending:
        logger.debug("Cancelled %d in-flight requests", len(pending))
        await asyncio.gather(*pending, return_exceptions=True)
    for task in tasks:
        if not task.cancelled():
            # Mark exceptions as retrieved so the loop does not report them
            task.exception()
