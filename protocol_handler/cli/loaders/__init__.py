from __future__ import annotations

from pathlib import Path
from typing import Optional

from ...registry import ProtocolHandler
from .base_handler_loader import BaseHandlerLoader
from .python_module_loader import (
    PythonModuleHandlerLoader,
)
from .yaml_handler_loader import YamlHandlerFileLoader


class HandlerLoaderRegistry:
    def __init__(self):
        self._loaders: list[BaseHandlerLoader] = [
            PythonModuleHandlerLoader(),
            YamlHandlerFileLoader(),
        ]

    def find_loader_for_path(
        self, path: Path
    ) -> Optional[BaseHandlerLoader]:
        for loader in self._loaders:
            if loader.can_load(path):
                return loader
        return None

    def load(
        self, path: Path, logger
    ) -> Optional[ProtocolHandler]:
        loader = self.find_loader_for_path(path)
        if loader is None:
            return None
        return loader.load(path, logger)


__all__ = [
    "HandlerLoaderRegistry",
    "BaseHandlerLoader",
    "PythonModuleHandlerLoader",
    "YamlHandlerFileLoader",
]
