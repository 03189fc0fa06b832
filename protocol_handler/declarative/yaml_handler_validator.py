from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from protocol_handler.registry.scheme_syntax import (
    is_valid_scheme,
    normalize_blacklist_entry,
    normalize_scheme,
)
from protocol_handler.types import DEFAULT_BLACKLIST

from .template_resolver import (
    TEMPLATE_VARIABLES,
    TemplateResolver,
)


class YamlHandlerValidator:

    def validate_file(self, path: Path | str) -> list[str]:
        resolved_path: Path = Path(path)
        errors: list[str] = []

        raw_data: dict[str, Any] | None = (
            self._try_parse_yaml(resolved_path, errors)
        )
        if raw_data is None:
            return errors

        if not self._validate_root_structure(
            raw_data, errors
        ):
            return errors

        extra_blacklist: Any = raw_data.get("blacklist") or []
        if not isinstance(extra_blacklist, list):
            extra_blacklist = []
        blacklist: set[str] = {
            normalize_blacklist_entry(str(scheme))
            for scheme in (*DEFAULT_BLACKLIST, *extra_blacklist)
        }
        for index, protocol in enumerate(
            raw_data["protocols"]
        ):
            self._validate_single_protocol(
                protocol, f"protocols[{index}]", blacklist, errors
            )
        return errors

    @staticmethod
    def _try_parse_yaml(
        path: Path, errors: list[str]
    ) -> dict[str, Any] | None:
        try:
            with open(path) as file_handle:
                data: Any = yaml.safe_load(file_handle)
        except yaml.YAMLError as parse_error:
            errors.append(
                f"YAML parse error: {parse_error}"
            )
            return None

        if not isinstance(data, dict):
            errors.append("Root must be a mapping")
            return None

        return data

    @staticmethod
    def _validate_root_structure(
        data: dict[str, Any], errors: list[str]
    ) -> bool:
        if "name" not in data:
            errors.append("Missing required field: name")

        blacklist = data.get("blacklist")
        if blacklist is not None and not isinstance(
            blacklist, list
        ):
            errors.append("'blacklist' must be a list")

        if "protocols" not in data:
            errors.append(
                "Missing required field: protocols"
            )
            return False

        if not isinstance(data.get("protocols"), list):
            errors.append("'protocols' must be a list")
            return False

        return True

    def _validate_single_protocol(
        self,
        protocol: Any,
        error_prefix: str,
        blacklist: set[str],
        errors: list[str],
    ) -> None:
        if not isinstance(protocol, dict):
            errors.append(f"{error_prefix}: Must be a mapping")
            return

        if "scheme" not in protocol:
            errors.append(
                f"{error_prefix}: Missing required field 'scheme'"
            )
        else:
            scheme: str = normalize_scheme(
                str(protocol["scheme"])
            )
            if not is_valid_scheme(scheme):
                errors.append(
                    f"{error_prefix}.scheme: "
                    f"Invalid scheme '{protocol['scheme']}'"
                )
            elif scheme in blacklist:
                errors.append(
                    f"{error_prefix}.scheme: "
                    f"Scheme '{scheme}' is blacklisted"
                )

        if "target" not in protocol:
            errors.append(
                f"{error_prefix}: Missing required field 'target'"
            )
            return

        for variable in TemplateResolver.variables_in(
            str(protocol["target"])
        ):
            if variable not in TEMPLATE_VARIABLES:
                errors.append(
                    f"{error_prefix}.target: "
                    f"Unknown template variable '{variable}'"
                )
