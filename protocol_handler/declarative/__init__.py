from __future__ import annotations

from pathlib import Path

from protocol_handler.registry import ProtocolHandler

from .schema import YAMLManifest, YAMLProtocolDefinition
from .template_resolver import (
    TEMPLATE_VARIABLES,
    TemplateResolver,
    url_template_context,
)
from .yaml_handler_loader import YamlHandlerLoader
from .yaml_handler_validator import YamlHandlerValidator

_DEFAULT_LOADER: YamlHandlerLoader = YamlHandlerLoader()
_DEFAULT_VALIDATOR: YamlHandlerValidator = (
    YamlHandlerValidator()
)


def load_yaml_handler(path: Path | str) -> ProtocolHandler:
    return _DEFAULT_LOADER.load_from_file(path)


def validate_yaml_handler(
    path: Path | str,
) -> list[str]:
    return _DEFAULT_VALIDATOR.validate_file(path)


__all__: list[str] = [
    "load_yaml_handler",
    "validate_yaml_handler",
    "YamlHandlerLoader",
    "YamlHandlerValidator",
    "TemplateResolver",
    "TEMPLATE_VARIABLES",
    "url_template_context",
    "YAMLManifest",
    "YAMLProtocolDefinition",
]
