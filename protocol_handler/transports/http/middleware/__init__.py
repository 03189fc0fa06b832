from .error_middleware import error_middleware
from .request_id_middleware import request_id_middleware

MIDDLEWARE_STACK = [
    error_middleware,
    request_id_middleware,
]

__all__ = [
    "MIDDLEWARE_STACK",
    "error_middleware",
    "request_id_middleware",
]
