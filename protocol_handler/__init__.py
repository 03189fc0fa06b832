"""
protocol-handler - redirect custom URL schemes

Register a resolver per URL scheme, then turn incoming URLs such as
``s3://bucket/key`` or ``gdrive://file-id`` into redirect locations,
standalone or behind an aiohttp endpoint.

Quick Start:

    from protocol_handler import create_handler

    handler = create_handler("url")
    handler.protocol("s3://", lambda url: "https://example.com")

    await handler.resolve("s3://test")
    # => "https://example.com"

aiohttp:

    from aiohttp import web

    app = web.Application()
    app.router.add_get("/resolve", handler.middleware())

    # GET /resolve?url=s3%3A%2F%2Ftest  ->  302 Location: https://example.com
    # GET /resolve?url=https://google.com ->  302 Location: https://google.com
    # GET /resolve?url=gdrive://test      ->  400 {"error": {"name": "UnknownProtocol", ...}}

CLI:

    protocol-handler serve ./resolvers.py --port 3000
    protocol-handler resolve ./redirects.yaml s3://bucket/key
    protocol-handler check s3:// gdrive: https://
"""

__version__ = "0.1.0"

# =============================================================================
# CORE TYPES
# =============================================================================

from .errors import (
    BlacklistedProtocol,
    InvalidProtocol,
    ProtocolHandlerError,
    UnknownProtocol,
    UnresolvedURL,
)
from .logging import (
    ProtocolLogger,
    get_logger,
    setup_logging,
)
from .registry import (
    FunctionResolver,
    ProtocolHandler,
    Resolver,
    create_handler,
    extract_scheme,
    is_protocol_relative,
    is_valid_scheme,
    normalize_scheme,
)
from .types import (
    DEFAULT_BLACKLIST,
    HandlerOptions,
    Resolution,
    ResolutionOutcome,
)

__all__ = [
    # Version
    "__version__",
    # Handler
    "ProtocolHandler",
    "create_handler",
    "HandlerOptions",
    "DEFAULT_BLACKLIST",
    # Resolvers
    "Resolver",
    "FunctionResolver",
    "Resolution",
    "ResolutionOutcome",
    # Scheme syntax
    "normalize_scheme",
    "is_valid_scheme",
    "is_protocol_relative",
    "extract_scheme",
    # Errors
    "ProtocolHandlerError",
    "InvalidProtocol",
    "BlacklistedProtocol",
    "UnknownProtocol",
    "UnresolvedURL",
    # Logging
    "ProtocolLogger",
    "setup_logging",
    "get_logger",
]
