from __future__ import annotations

from typing import Any


class ProtocolHandlerError(ValueError):
    """Base class for every error the handler classifies itself."""

    code: str = "ERR_PROTOCOL_HANDLER"

    def __init__(self, message: str) -> None:
        self.message: str = message
        super().__init__(message)

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "code": self.code,
            "message": self.message,
        }


class InvalidProtocol(ProtocolHandlerError):
    code = "ERR_INVALID_PROTOCOL"

    def __init__(self, value: str | None = None) -> None:
        self.value: str | None = value
        if value is None:
            message = "Invalid protocol provided."
        else:
            message = f"Invalid protocol provided: {value!r}"
        super().__init__(message)


class BlacklistedProtocol(ProtocolHandlerError):
    code = "ERR_BLACKLISTED_PROTOCOL"

    def __init__(self, scheme: str) -> None:
        self.scheme: str = scheme
        super().__init__(
            f"Registering handler for `{scheme}` is not allowed."
        )


class UnknownProtocol(ProtocolHandlerError):
    code = "ERR_UNKNOWN_PROTOCOL"

    def __init__(self, scheme: str) -> None:
        self.scheme: str = scheme
        super().__init__(
            f"No handler registered for `{scheme}`."
        )


class UnresolvedURL(ProtocolHandlerError):
    code = "ERR_UNRESOLVED_URL"

    def __init__(self, url: str) -> None:
        self.url: str = url
        super().__init__(
            f"Registered handler did not resolve {url!r}."
        )


__all__ = [
    "ProtocolHandlerError",
    "InvalidProtocol",
    "BlacklistedProtocol",
    "UnknownProtocol",
    "UnresolvedURL",
]
