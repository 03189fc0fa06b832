from .app_factory import create_http_application
from .http_transport import HTTPTransport
from .routes import create_resolve_route

__all__ = [
    "HTTPTransport",
    "create_http_application",
    "create_resolve_route",
]
