import inspect
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Union
from urllib.parse import unquote

from aiohttp import web

from protocol_handler.errors import (
    ProtocolHandlerError,
    UnresolvedURL,
)
from protocol_handler.logging import get_logger

if TYPE_CHECKING:
    from protocol_handler.registry import ProtocolHandler

logger = get_logger("transport.http")

ErrorCallback = Callable[
    [web.Request, Exception],
    Union[web.StreamResponse, Awaitable[web.StreamResponse]],
]


def error_response(error: ProtocolHandlerError) -> web.Response:
    return web.json_response(
        {"error": error.to_dict()}, status=400
    )


class ResolveRouteHandler:
    def __init__(
        self,
        handler: "ProtocolHandler",
        param: Optional[str] = None,
        on_error: Optional[ErrorCallback] = None,
    ):
        self._handler = handler
        self._param = param or handler.param
        self._on_error = on_error

    @property
    def param(self) -> str:
        return self._param

    async def handle(
        self, request: web.Request
    ) -> web.StreamResponse:
        url = unquote(request.query.get(self._param, ""))
        logger.request_received(url, request.get("request_id"))

        try:
            resolution = await self._handler.resolution(url)
        except ProtocolHandlerError as e:
            logger.resolution_failed(url, e)
            return error_response(e)
        except Exception as e:
            if self._on_error is None:
                raise
            response = self._on_error(request, e)
            if inspect.isawaitable(response):
                response = await response
            return response

        if resolution.target is None:
            return error_response(UnresolvedURL(url))

        raise web.HTTPFound(resolution.target)


def create_resolve_route(
    handler: "ProtocolHandler",
    param: Optional[str] = None,
    on_error: Optional[ErrorCallback] = None,
):
    return ResolveRouteHandler(
        handler, param=param, on_error=on_error
    ).handle
