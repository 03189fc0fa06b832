from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class YAMLProtocolDefinition:
    scheme: str
    target: str
    description: str | None = None


@dataclass
class YAMLManifest:
    name: str
    protocols: list[YAMLProtocolDefinition]
    param: str = "url"
    blacklist: list[str] = field(default_factory=list)
    description: str | None = None
