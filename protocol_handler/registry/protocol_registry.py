from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from protocol_handler.logging import get_logger

if TYPE_CHECKING:
    from .registered_protocol import RegisteredProtocol

logger = get_logger("registry")


class ProtocolRegistry:
    """
    Insertion-ordered scheme -> resolver mapping.

    Keys are normalized schemes. Re-registering a scheme replaces its
    resolver but keeps its original position.
    """

    def __init__(self) -> None:
        self._protocols: dict[str, RegisteredProtocol] = {}

    def register(
        self, protocol: RegisteredProtocol
    ) -> None:
        previous = self._protocols.get(protocol.scheme)
        self._protocols[protocol.scheme] = protocol

        if previous is not None:
            logger.debug(
                f"Replaced resolver for {protocol.scheme}: "
                f"{previous.resolver.describe()} -> "
                f"{protocol.resolver.describe()}"
            )
        logger.protocol_registered(
            protocol.scheme, protocol.description
        )

    def get(self, scheme: str) -> RegisteredProtocol | None:
        return self._protocols.get(scheme)

    def schemes(self) -> list[str]:
        return list(self._protocols.keys())

    def all_protocols(self) -> list[RegisteredProtocol]:
        return list(self._protocols.values())

    def __contains__(self, scheme: object) -> bool:
        return scheme in self._protocols

    def __iter__(self) -> Iterator[RegisteredProtocol]:
        return iter(self.all_protocols())

    def __len__(self) -> int:
        return len(self._protocols)
