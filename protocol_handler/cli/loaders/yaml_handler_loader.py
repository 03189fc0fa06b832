from __future__ import annotations

from pathlib import Path
from typing import Optional

from ...registry import ProtocolHandler
from .base_handler_loader import BaseHandlerLoader


class YamlHandlerFileLoader(BaseHandlerLoader):
    SUPPORTED_EXTENSIONS = (".yaml", ".yml")

    def can_load(self, path: Path) -> bool:
        return (
            path.is_file()
            and path.suffix in self.SUPPORTED_EXTENSIONS
        )

    def load(
        self, path: Path, logger
    ) -> Optional[ProtocolHandler]:
        from ...declarative import load_yaml_handler

        try:
            return load_yaml_handler(path)
        except Exception as e:
            logger.error(f"Failed to load YAML handler: {e}")
            return None
