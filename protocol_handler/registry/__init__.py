from .protocol_handler import ProtocolHandler, create_handler
from .protocol_registry import ProtocolRegistry
from .registered_protocol import RegisteredProtocol
from .resolver import (
    FunctionResolver,
    Resolver,
    ResolverFunction,
    as_resolver,
)
from .resolver_invoker import invoke_resolver
from .scheme_syntax import (
    extract_scheme,
    is_protocol_relative,
    is_valid_scheme,
    normalize_blacklist_entry,
    normalize_scheme,
)

__all__ = [
    "ProtocolHandler",
    "create_handler",
    "ProtocolRegistry",
    "RegisteredProtocol",
    "Resolver",
    "FunctionResolver",
    "ResolverFunction",
    "as_resolver",
    "invoke_resolver",
    "normalize_scheme",
    "normalize_blacklist_entry",
    "is_valid_scheme",
    "is_protocol_relative",
    "extract_scheme",
]
