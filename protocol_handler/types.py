"""
protocol-handler core types

- HandlerOptions: construction-time configuration (query param, blacklist)
- Resolution: tagged outcome of resolving a single URL
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# =============================================================================
# BLACKLIST DEFAULTS
# =============================================================================

DEFAULT_PARAM = "url"

# Standard schemes that can never get a custom resolver. During
# resolution they are passed through unchanged.
DEFAULT_BLACKLIST: tuple[str, ...] = ("http:", "https:", "file:")


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class HandlerOptions:
    """
    Options for a ProtocolHandler.

    ``blacklist`` holds schemes in addition to DEFAULT_BLACKLIST; entries
    are normalized by the handler the same way registration input is.
    """

    param: str = DEFAULT_PARAM
    blacklist: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.param:
            raise ValueError("Query parameter name must not be empty")
        # accept any iterable of strings, store a tuple
        object.__setattr__(self, "blacklist", tuple(self.blacklist))

    def with_blacklist(self, *schemes: str) -> HandlerOptions:
        return HandlerOptions(
            param=self.param,
            blacklist=self.blacklist + tuple(schemes),
        )


# =============================================================================
# RESOLUTION RESULT
# =============================================================================


class ResolutionOutcome(str, Enum):
    """How a URL was (or was not) turned into a redirect target."""

    RESOLVED = "resolved"  # registered resolver returned a target
    DECLINED = "declined"  # registered resolver returned nothing
    PASSED_THROUGH = "passed_through"  # blacklisted scheme, URL unchanged
    PROTOCOL_RELATIVE = "protocol_relative"  # "//host/path", URL unchanged


@dataclass
class Resolution:
    url: str
    outcome: ResolutionOutcome
    scheme: Optional[str] = None
    target: Optional[str] = None

    @property
    def redirects(self) -> bool:
        return self.target is not None

    @classmethod
    def resolved(
        cls, url: str, scheme: str, target: str
    ) -> Resolution:
        return cls(
            url=url,
            scheme=scheme,
            target=target,
            outcome=ResolutionOutcome.RESOLVED,
        )

    @classmethod
    def declined(cls, url: str, scheme: str) -> Resolution:
        return cls(
            url=url,
            scheme=scheme,
            outcome=ResolutionOutcome.DECLINED,
        )

    @classmethod
    def passed_through(
        cls, url: str, scheme: str
    ) -> Resolution:
        return cls(
            url=url,
            scheme=scheme,
            target=url,
            outcome=ResolutionOutcome.PASSED_THROUGH,
        )

    @classmethod
    def protocol_relative(cls, url: str) -> Resolution:
        return cls(
            url=url,
            target=url,
            outcome=ResolutionOutcome.PROTOCOL_RELATIVE,
        )
