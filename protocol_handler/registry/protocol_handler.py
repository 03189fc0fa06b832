from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Optional, Union

from protocol_handler.errors import (
    BlacklistedProtocol,
    InvalidProtocol,
    UnknownProtocol,
)
from protocol_handler.logging import get_logger
from protocol_handler.types import (
    DEFAULT_BLACKLIST,
    HandlerOptions,
    Resolution,
)

from .protocol_registry import ProtocolRegistry
from .registered_protocol import RegisteredProtocol
from .resolver import Resolver, ResolverFunction, as_resolver
from .resolver_invoker import invoke_resolver
from .scheme_syntax import (
    extract_scheme,
    is_protocol_relative,
    is_valid_scheme,
    normalize_blacklist_entry,
    normalize_scheme,
)

if TYPE_CHECKING:
    from aiohttp import web

    from protocol_handler.logging import ProtocolLogger

logger = get_logger("handler")


class ProtocolHandler:
    """
    Dispatches URLs to resolvers registered for their scheme.

    Registration is not safe to interleave with resolution; register
    every scheme before the handler starts serving traffic.

    Example:
        handler = ProtocolHandler()
        handler.protocol("s3://", lambda url: "https://example.com")
        target = await handler.resolve("s3://bucket/key")
    """

    def __init__(
        self,
        param: Optional[str] = None,
        options: Optional[HandlerOptions] = None,
    ) -> None:
        options = options or HandlerOptions()
        if param is not None:
            options = HandlerOptions(
                param=param, blacklist=options.blacklist
            )

        self._options: HandlerOptions = options
        self._blacklist: frozenset[str] = frozenset(
            normalize_blacklist_entry(scheme)
            for scheme in (
                *DEFAULT_BLACKLIST,
                *options.blacklist,
            )
        )
        self._registry: ProtocolRegistry = ProtocolRegistry()
        self._serving: bool = False

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    @property
    def options(self) -> HandlerOptions:
        return self._options

    @property
    def param(self) -> str:
        return self._options.param

    @property
    def blacklist(self) -> frozenset[str]:
        return self._blacklist

    @property
    def registry(self) -> ProtocolRegistry:
        return self._registry

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def protocol(
        self,
        scheme: str,
        resolver: Union[Resolver, ResolverFunction],
        description: Optional[str] = None,
    ) -> ProtocolHandler:
        """
        Register ``resolver`` for ``scheme`` and return self for chaining.

        Raises:
            InvalidProtocol: scheme is not ``[a-z0-9+]{2,}:`` once normalized
            BlacklistedProtocol: scheme is blacklisted
        """
        logger.debug(f"Attempt to register scheme: {scheme!r}")
        normalized = normalize_scheme(scheme)

        if not is_valid_scheme(normalized):
            raise InvalidProtocol(scheme)
        if normalized in self._blacklist:
            raise BlacklistedProtocol(normalized)

        if self._serving:
            logger.warning(
                f"Registering {normalized} after resolution started; "
                "registration is not safe against concurrent resolves"
            )

        self._registry.register(
            RegisteredProtocol(
                scheme=normalized,
                resolver=as_resolver(resolver),
                description=description,
            )
        )
        return self

    register = protocol

    def protocols_from(
        self,
        resolvers: Iterable[tuple[str, Union[Resolver, ResolverFunction]]],
    ) -> ProtocolHandler:
        for scheme, resolver in resolvers:
            self.protocol(scheme, resolver)
        return self

    @property
    def protocols(self) -> list[str]:
        """Registered schemes, in registration order."""
        return self._registry.schemes()

    def has_protocol(self, scheme: str) -> bool:
        return normalize_scheme(scheme) in self._registry

    def is_blacklisted(self, scheme: str) -> bool:
        return normalize_blacklist_entry(scheme) in self._blacklist

    def __contains__(self, scheme: object) -> bool:
        return isinstance(scheme, str) and self.has_protocol(scheme)

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    async def resolution(self, url: str) -> Resolution:
        """
        Resolve ``url`` to a tagged Resolution.

        Raises:
            InvalidProtocol: no scheme can be extracted from ``url``
            UnknownProtocol: scheme is neither registered nor blacklisted
        """
        self._serving = True

        if is_protocol_relative(url):
            return Resolution.protocol_relative(url)

        scheme = extract_scheme(url)
        logger.debug(f"url={url}, protocol={scheme}")
        if scheme is None:
            raise InvalidProtocol(url)

        registered = self._registry.get(scheme)
        if registered is not None:
            return await invoke_resolver(registered, url)

        if scheme in self._blacklist:
            return Resolution.passed_through(url, scheme)

        raise UnknownProtocol(scheme)

    async def resolve(self, url: str) -> Optional[str]:
        """Resolve ``url`` to its redirect location (None when declined)."""
        resolution = await self.resolution(url)
        return resolution.target

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    def middleware(
        self,
        param: Optional[str] = None,
        on_error: Optional[Callable] = None,
    ):
        """
        Return an aiohttp request handler redirecting to resolved URLs.

        Example:
            app.router.add_get("/resolve", handler.middleware())
        """
        from protocol_handler.transports.http.routes import (
            create_resolve_route,
        )

        return create_resolve_route(
            self, param=param, on_error=on_error
        )

    def create_app(
        self,
        route: str = "/resolve",
        param: Optional[str] = None,
        app_logger: Optional["ProtocolLogger"] = None,
    ) -> "web.Application":
        from protocol_handler.transports.http import (
            create_http_application,
        )

        return create_http_application(
            self, route=route, logger=app_logger, param=param
        )

    def serve(
        self,
        host: str = "0.0.0.0",
        port: int = 3000,
        route: str = "/resolve",
        param: Optional[str] = None,
        app_logger: Optional["ProtocolLogger"] = None,
    ) -> None:
        from protocol_handler.transports.http import (
            HTTPTransport,
        )

        HTTPTransport(
            self,
            host=host,
            port=port,
            route=route,
            param=param,
            app_logger=app_logger,
        ).run()

    def __repr__(self) -> str:
        return (
            f"ProtocolHandler(param={self.param!r}, "
            f"protocols={self.protocols!r})"
        )


def create_handler(
    param: Optional[str] = None,
    options: Optional[HandlerOptions] = None,
    *,
    blacklist: Optional[Iterable[str]] = None,
) -> ProtocolHandler:
    """
    Create a ProtocolHandler.

    Args:
        param: Name of the query parameter holding the target URL
            (``options.param``, or "url", when omitted)
        options: Base options
        blacklist: Extra schemes to blacklist on top of the defaults
    """
    options = options or HandlerOptions()
    if blacklist:
        options = options.with_blacklist(*blacklist)
    return ProtocolHandler(param=param, options=options)
