from __future__ import annotations

import asyncio

from gate.config import Settings
from gate.core.logging import get_logger

logger = get_logger(__name__)

SHUTDOWN_GRACE_SECONDS = 1.0


class Notifier:
    """Fire-and-forget TCP sender: one connection per message, no retries."""

    def __init__(self, host: str, port: int, timeout: float = 5.0) -> None:
        self._host = host
        self._port = port
        self._timeout = timeout
        self._tasks: set[asyncio.Task[None]] = set()

    @classmethod
    def from_settings(cls, settings: Settings) -> Notifier:
        return cls(
            host=settings.NOTIFY_HOST,
            port=settings.NOTIFY_PORT,
            timeout=settings.NOTIFY_TIMEOUT,
        )

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def notify(self, message: str) -> asyncio.Task[None]:
        """Schedule delivery of message and return without waiting on it.

        Must be called from a running event loop. The returned task never
        raises; failures are logged and dropped.
        """
        task = asyncio.get_running_loop().create_task(self._deliver(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _deliver(self, message: str) -> None:
        try:
            await asyncio.wait_for(self._send(message.encode("utf-8")), timeout=self._timeout)
        except Exception as exc:
            logger.warning(
                "notify_failed",
                host=self._host,
                port=self._port,
                error=str(exc) or type(exc).__name__,
            )
        else:
            logger.info("notify_sent", host=self._host, port=self._port)

    async def _send(self, payload: bytes) -> None:
        _reader, writer = await asyncio.open_connection(self._host, self._port)
        try:
            writer.write(payload)
            await writer.drain()
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                pass

    async def aclose(self) -> None:
        """Give in-flight notifications a short grace period, then cancel them."""
        if not self._tasks:
            return
        tasks = list(self._tasks)
        _done, still_running = await asyncio.wait(tasks, timeout=SHUTDOWN_GRACE_SECONDS)
        for task in still_running:
            task.cancel()
        if still_running:
            await asyncio.gather(*still_running, return_exceptions=True)
            logger.info("notify_cancelled", count=len(still_running))
