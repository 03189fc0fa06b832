from typing import TYPE_CHECKING

from aiohttp import web

from protocol_handler.logging import ProtocolLogger

from .middleware import MIDDLEWARE_STACK
from .routes import register_all_routes

if TYPE_CHECKING:
    from protocol_handler.registry import ProtocolHandler


def create_http_application(
    handler: "ProtocolHandler",
    route: str = "/resolve",
    logger: ProtocolLogger | None = None,
    param: str | None = None,
) -> web.Application:
    app = web.Application(middlewares=MIDDLEWARE_STACK)

    app["handler"] = handler

    if logger:
        app["logger"] = logger

    register_all_routes(app, route, param)

    return app
