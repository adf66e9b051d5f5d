from __future__ import annotations

import asyncio

from gate.config import Settings
from gate.core.logging import get_logger

logger = get_logger(__name__)


class Listener:
    """Diagnostic TCP sink: logs every chunk it receives and never replies."""

    def __init__(self, host: str, port: int, chunk_size: int = 4096) -> None:
        self._host = host
        self._port = port
        self._chunk_size = chunk_size
        self._server: asyncio.Server | None = None
        self._writers: set[asyncio.StreamWriter] = set()

    @classmethod
    def from_settings(cls, settings: Settings) -> Listener:
        return cls(
            host=settings.LISTENER_HOST,
            port=settings.LISTENER_PORT,
            chunk_size=settings.LISTENER_CHUNK_SIZE,
        )

    @property
    def is_serving(self) -> bool:
        return self._server is not None and self._server.is_serving()

    @property
    def port(self) -> int:
        """Bound port; differs from the configured one when that was 0."""
        if self._server is None or not self._server.sockets:
            return self._port
        return self._server.sockets[0].getsockname()[1]

    async def start(self) -> None:
        if self._server is not None:
            return
        self._server = await asyncio.start_server(self._handle, self._host, self._port)
        logger.info("listener_started", host=self._host, port=self.port)

    async def stop(self) -> None:
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        # wait_closed also waits on open connections
        for writer in list(self._writers):
            writer.close()
        await server.wait_closed()
        logger.info("listener_stopped")

    async def _handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        peer = writer.get_extra_info("peername")
        if not self.is_serving:
            writer.close()
            return
        logger.info("listener_connected", peer=str(peer))
        self._writers.add(writer)
        try:
            while True:
                chunk = await reader.read(self._chunk_size)
                if not chunk:
                    break
                logger.info(
                    "listener_message",
                    peer=str(peer),
                    message=chunk.decode("utf-8", errors="replace"),
                )
        except (ConnectionError, OSError) as exc:
            logger.warning("listener_connection_error", peer=str(peer), error=str(exc))
        finally:
            self._writers.discard(writer)
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                pass
        logger.info("listener_disconnected", peer=str(peer))
