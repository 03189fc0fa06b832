from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Optional

from ...registry import ProtocolHandler
from .base_handler_loader import BaseHandlerLoader

MODULE_NAME = "protocol_handler_module"


class PythonModuleHandlerLoader(BaseHandlerLoader):
    def can_load(self, path: Path) -> bool:
        return path.is_file() and path.suffix == ".py"

    def load(
        self, path: Path, logger
    ) -> Optional[ProtocolHandler]:
        try:
            module = self._import_module(path)
        except Exception as e:
            logger.error(f"Failed to load {path}: {e}")
            return None
        return self._find_protocol_handler(
            module, path, logger
        )

    def _import_module(self, path: Path):
        spec = importlib.util.spec_from_file_location(
            MODULE_NAME, path
        )
        module = importlib.util.module_from_spec(spec)
        sys.modules[MODULE_NAME] = module
        spec.loader.exec_module(module)
        return module

    def _find_protocol_handler(
        self, module, path: Path, logger
    ) -> Optional[ProtocolHandler]:
        for name in dir(module):
            obj = getattr(module, name)
            if isinstance(obj, ProtocolHandler):
                return obj

        logger.error(
            f"No ProtocolHandler found in {path}"
        )
        return None
