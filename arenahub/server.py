"""The accounts manager HTTP server and its lifecycle."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from aiohttp import web

from arenahub.routes import build_app
from arenahub.status import AppData

logger = logging.getLogger(__name__)

_HOST = "127.0.0.1"


@web.middleware
async def _trace_middleware(
    request: web.Request,
    handler: Callable[[web.Request], Awaitable[web.StreamResponse]],
) -> web.StreamResponse:
    logger.debug(
        "started processing request method=%s uri=%s headers=%s",
        request.method,
        request.path_qs,
        dict(request.headers),
    )
    response = await handler(request)
    logger.debug("finished processing request status=%s", response.status)
    return response


class AccountsManagerServer:
    """A running accounts manager bound to an ephemeral local port."""

    def __init__(
        self,
        runner: web.AppRunner,
        host: str,
        port: int,
        app_data: AppData,
    ) -> None:
        self._runner = runner
        self._address = (host, port)
        self.app_data = app_data
        self._stop = asyncio.Event()
        self._shutdown_sent = False
        self._task = asyncio.create_task(self._serve())

    @classmethod
    async def run(cls) -> "AccountsManagerServer":
        """Start serving on 127.0.0.1 with a port chosen by the system."""
        app_data = AppData()
        app = build_app(app_data)
        app.middlewares.append(_trace_middleware)

        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, _HOST, 0)
        try:
            await site.start()
        except BaseException:
            await runner.cleanup()
            raise
        host, port = runner.addresses[0][:2]
        logger.info("accounts manager listening on %s:%s", host, port)
        return cls(runner, host, port, app_data)

    async def _serve(self) -> None:
        try:
            await self._stop.wait()
        finally:
            await self._runner.cleanup()

    def shutdown_gracefully(self) -> None:
        """Signal the server to stop; raises OSError if that cannot be done."""
        logger.info("Gracefully shutting down...")
        if self._shutdown_sent:
            message = "Shutdown signal was already sent"
            logger.warning(message)
            raise OSError(message)
        if self._task.done():
            message = "Could not send shutdown signal"
            logger.warning(message)
            raise OSError(message)
        self._shutdown_sent = True
        self._stop.set()

    async def await_shutdown(self) -> None:
        """Wait until the server has stopped serving."""
        await self._task
        logger.info("Server got shutdown!")

    async def shutdown_gracefully_await(self) -> None:
        """Signal the server to stop and wait until it has."""
        self.shutdown_gracefully()
        await self.await_shutdown()

    @property
    def address(self) -> tuple[str, int]:
        """The (host, port) pair the server listens on."""
        return self._address

    @property
    def url(self) -> str:
        """The base URL of the server."""
        host, port = self._address
        return f"http://{host}:{port}"

    async def __aenter__(self) -> "AccountsManagerServer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self._shutdown_sent and not self._task.done():
            self.shutdown_gracefully()
        await self.await_shutdown()