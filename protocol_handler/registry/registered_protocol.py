from __future__ import annotations

from dataclasses import dataclass

from .resolver import Resolver


@dataclass
class RegisteredProtocol:
    scheme: str
    resolver: Resolver
    description: str | None = None
