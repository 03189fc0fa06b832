from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from protocol_handler.registry import ProtocolHandler
from protocol_handler.types import HandlerOptions

from .schema import YAMLManifest, YAMLProtocolDefinition
from .template_resolver import TemplateResolver


class YamlHandlerLoader:

    def load_from_file(
        self, path: Path | str
    ) -> ProtocolHandler:
        resolved_path: Path = Path(path)
        raw_data: Any = self._read_yaml_file(resolved_path)
        manifest: YAMLManifest = (
            self._parse_manifest_from_raw_data(raw_data)
        )
        return self.build_handler(manifest)

    def build_handler(
        self, manifest: YAMLManifest
    ) -> ProtocolHandler:
        handler: ProtocolHandler = ProtocolHandler(
            options=HandlerOptions(
                param=manifest.param,
                blacklist=tuple(manifest.blacklist),
            )
        )

        for definition in manifest.protocols:
            handler.protocol(
                definition.scheme,
                TemplateResolver(definition.target),
                description=definition.description,
            )

        return handler

    @staticmethod
    def _read_yaml_file(path: Path) -> Any:
        with open(path) as file_handle:
            return yaml.safe_load(file_handle)

    @staticmethod
    def _parse_manifest_from_raw_data(
        data: Any,
    ) -> YAMLManifest:
        if not isinstance(data, dict):
            raise ValueError("Root must be a mapping")
        if "name" not in data:
            raise ValueError("Missing required field: name")

        raw_protocols: Any = data.get("protocols", [])
        if not isinstance(raw_protocols, list):
            raise ValueError("'protocols' must be a list")

        raw_blacklist: Any = data.get("blacklist") or []
        if not isinstance(raw_blacklist, list):
            raise ValueError("'blacklist' must be a list")

        parsed_protocols: list[YAMLProtocolDefinition] = []
        for index, raw_protocol in enumerate(raw_protocols):
            if (
                not isinstance(raw_protocol, dict)
                or "scheme" not in raw_protocol
                or "target" not in raw_protocol
            ):
                raise ValueError(
                    f"protocols[{index}]: 'scheme' and 'target' are required"
                )
            parsed_protocols.append(
                YAMLProtocolDefinition(
                    scheme=str(raw_protocol["scheme"]),
                    target=str(raw_protocol["target"]),
                    description=raw_protocol.get(
                        "description"
                    ),
                )
            )

        return YAMLManifest(
            name=data["name"],
            protocols=parsed_protocols,
            param=data.get("param", "url"),
            blacklist=[str(scheme) for scheme in raw_blacklist],
            description=data.get("description"),
        )
