"""Reads the YAML defaults file that backs the CLI run options."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from localnode.errors import LocalNodeError
from localnode.models import NetworkKind


class ConfigLoader:
    """Loads ``.localnode.yml`` style files and type-checks every key.

    Flags must be real YAML booleans: a quoted ``"false"`` is a string and is
    rejected instead of being read as true.
    """

    BOOL_KEYS = frozenset({"multinode", "full", "limits", "debug", "dev", "verbose"})
    STRING_KEYS = frozenset({"network", "workdir", "host", "log_file"})
    SUPPORTED_KEYS = BOOL_KEYS | STRING_KEYS

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.is_file():
            raise LocalNodeError(f"Config file not found: {config_path}")

        try:
            document = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
            raise LocalNodeError(f"Invalid config file '{config_path}': {exc}") from exc

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise LocalNodeError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(str(key) for key in document if key not in self.SUPPORTED_KEYS)
        if unknown:
            raise LocalNodeError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key, value in document.items():
            self._check_value(key, value)
        return document

    def _check_value(self, key: str, value: Any):
        if key in self.BOOL_KEYS:
            if not isinstance(value, bool):
                raise LocalNodeError(
                    f"Config key '{key}' must be true or false, got {value!r}."
                )
            return

        if not isinstance(value, str) or not value:
            raise LocalNodeError(f"Config key '{key}' must be a non-empty string, got {value!r}.")

        if key == "network":
            supported = [network.value for network in NetworkKind]
            if value not in supported:
                raise LocalNodeError(
                    f"Config key 'network' must be one of {', '.join(supported)}, got {value!r}."
                )
