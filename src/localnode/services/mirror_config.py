"""Typed adapter over the mirror-node ``application.yml`` document."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from localnode.errors import LocalNodeError

LINE_WIDTH = 256

_IMPORTER = ("hedera", "mirror", "importer")
_DOWNLOADER = _IMPORTER + ("downloader",)
_MONITOR = ("hedera", "mirror", "monitor")


@dataclass
class MirrorNodeSettings:
    """The only fields of the mirror-node document that localnode rewrites."""

    data_path: Optional[str] = None
    downloader_sources: Optional[List[Dict[str, Any]]] = None
    downloader_local: Optional[Dict[str, Any]] = None
    monitor_nodes: Optional[List[Dict[str, Any]]] = None


class MirrorNodeConfigAdapter:
    """Loads the document, exposes it as settings, and writes changes back.

    Keys outside ``MirrorNodeSettings`` are never touched, so sections the
    adapter does not know about survive a load/save cycle.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self.document: Dict[str, Any] = {}

    def load(self) -> MirrorNodeSettings:
        try:
            parsed = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
            raise LocalNodeError(f"Could not read mirror node config '{self.path}': {exc}") from exc

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            raise LocalNodeError(f"Mirror node config '{self.path}' must contain a YAML mapping.")

        self.document = parsed
        importer = self._get(_IMPORTER)
        downloader = self._get(_DOWNLOADER)
        monitor = self._get(_MONITOR)
        return MirrorNodeSettings(
            data_path=importer.get("dataPath"),
            downloader_sources=downloader.get("sources"),
            downloader_local=downloader.get("local"),
            monitor_nodes=monitor.get("nodes"),
        )

    def save(self, settings: MirrorNodeSettings):
        self._set(_IMPORTER, "dataPath", settings.data_path)
        self._set(_DOWNLOADER, "sources", settings.downloader_sources)
        self._set(_DOWNLOADER, "local", settings.downloader_local)
        self._set(_MONITOR, "nodes", settings.monitor_nodes)

        try:
            self.path.write_text(
                yaml.safe_dump(self.document, width=LINE_WIDTH, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise LocalNodeError(f"Could not write mirror node config '{self.path}': {exc}") from exc

    def _get(self, keys) -> Dict[str, Any]:
        node: Any = self.document
        for key in keys:
            if not isinstance(node, dict):
                return {}
            node = node.get(key) or {}
        return node if isinstance(node, dict) else {}

    def _set(self, keys, field_name: str, value: Any):
        # None means "not set"; the document keeps whatever it had.
        if value is None:
            return

        node = self.document
        for key in keys:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[field_name] = value
