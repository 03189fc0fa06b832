from typing import Optional

from aiohttp import web

from .health_route import handle_health
from .protocols_route import handle_protocols
from .resolve_route import (
    ResolveRouteHandler,
    create_resolve_route,
    error_response,
)


def register_all_routes(
    app: web.Application,
    route: str = "/resolve",
    param: Optional[str] = None,
) -> None:
    app.router.add_get(
        route, create_resolve_route(app["handler"], param=param)
    )
    app.router.add_get("/health", handle_health)
    app.router.add_get("/protocols", handle_protocols)


__all__ = [
    "register_all_routes",
    "create_resolve_route",
    "error_response",
    "ResolveRouteHandler",
    "handle_health",
    "handle_protocols",
]
