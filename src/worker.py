"""Background worker entry point.

Runs two periodic loops, asset price refresh and account sync, that only
log their ticks; no live price feed is wired in. SIGINT/SIGTERM stop
both loops and the process exits cleanly.

Run:
    python -m src.worker
"""

import asyncio
import signal

from src.core.config import settings
from src.core.container import get_logger
from src.domain.protocols.logger_protocol import LoggerProtocol


async def run_periodic(
    job: str,
    interval_seconds: float,
    stop: asyncio.Event,
    logger: LoggerProtocol,
) -> int:
    """Log a tick every ``interval_seconds`` until ``stop`` is set.

    Returns:
        Number of ticks logged.
    """
    logger.info("worker_job_started", job=job, interval_seconds=interval_seconds)
    ticks = 0
    while not stop.is_set():
        try:
            await asyncio.wait_for(stop.wait(), timeout=interval_seconds)
        except TimeoutError:
            ticks += 1
            logger.info("worker_job_tick", job=job, tick=ticks)
    logger.info("worker_job_stopped", job=job, ticks=ticks)
    return ticks


async def run_worker(stop: asyncio.Event | None = None) -> None:
    """Run every periodic job until stopped.

    Installs SIGINT/SIGTERM handlers when no external stop event is given.
    """
    logger = get_logger()
    if stop is None:
        stop = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, stop.set)

    logger.info("worker_started", environment=settings.environment.value)
    await asyncio.gather(
        run_periodic(
            "asset_price_refresh",
            settings.price_refresh_interval_seconds,
            stop,
            logger,
        ),
        run_periodic(
            "account_sync",
            settings.account_sync_interval_seconds,
            stop,
            logger,
        ),
    )
    logger.info("worker_stopped")


def main() -> None:
    asyncio.run(run_worker())


if __name__ == "__main__":
    main()
