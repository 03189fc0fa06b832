import asyncio
from typing import TYPE_CHECKING

from aiohttp import web

from protocol_handler.logging import ProtocolLogger, setup_logging

from .app_factory import create_http_application

if TYPE_CHECKING:
    from protocol_handler.registry import ProtocolHandler


class HTTPTransport:
    def __init__(
        self,
        handler: "ProtocolHandler",
        host: str = "0.0.0.0",
        port: int = 3000,
        route: str = "/resolve",
        param: str | None = None,
        app_logger: ProtocolLogger | None = None,
    ):
        self._handler = handler
        self._host = host
        self._port = port
        self._route = route
        self._param = param
        self._logger = app_logger
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None

    @property
    def handler(self) -> "ProtocolHandler":
        return self._handler

    def run(self) -> None:
        try:
            asyncio.run(self._run_until_stopped())
        except KeyboardInterrupt:
            pass

    async def start(self) -> None:
        if self._logger is None:
            self._logger = setup_logging()

        app = create_http_application(
            self._handler,
            route=self._route,
            logger=self._logger,
            param=self._param,
        )

        self._runner = web.AppRunner(app)
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self._host, self._port)
        await self._site.start()

        self._logger.server_started(
            f"{self._host}:{self._port}", self._route
        )

    async def stop(self) -> None:
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._logger.server_stopped()

    async def _run_until_stopped(self) -> None:
        await self.start()

        try:
            while True:
                await asyncio.sleep(3600)
        except asyncio.CancelledError:
            pass
        finally:
            await self.stop()
