from .http import (
    HTTPTransport,
    create_http_application,
    create_resolve_route,
)

__all__ = [
    "HTTPTransport",
    "create_http_application",
    "create_resolve_route",
]
