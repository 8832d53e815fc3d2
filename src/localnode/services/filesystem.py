"""Filesystem helpers for localnode."""

import logging
import os
import shutil
import uuid
from typing import Iterable, Mapping

from rich.console import Console

from localnode.constants import EPHEMERAL_DIRECTORIES
from localnode.errors import LocalNodeError
from localnode.errors_catalog import actionable_error


class FileSystemService:
    """Encapsulates file and directory side effects."""

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def create_ephemeral_directories(self, root: str, directories: Iterable[str] = EPHEMERAL_DIRECTORIES):
        for relative_path in directories:
            path = os.path.join(root, relative_path)
            try:
                os.makedirs(path, exist_ok=True)
            except OSError as exc:
                raise LocalNodeError(f"Could not create directory {path}: {exc}") from exc
            self.logger.debug("Ensured directory: %s", path)

    def copy_paths(self, mapping: Mapping[str, str]):
        """Copy every source onto its destination, replacing what is there.

        Sources are all checked before the first copy. Each copy is staged next
        to its destination and swapped in, so a destination is either the old
        content or the complete new content.
        """
        missing = [source for source in mapping if not os.path.exists(source)]
        if missing:
            raise LocalNodeError(actionable_error("missing_resource", path=missing[0]))

        for source, destination in mapping.items():
            self._copy_path(source, destination)
            self.logger.debug("Copied %s to %s", source, destination)

    def _copy_path(self, source: str, destination: str):
        parent = os.path.dirname(os.path.abspath(destination))
        staging = os.path.join(parent, f".{os.path.basename(destination)}.{uuid.uuid4().hex[:8]}.tmp")

        try:
            os.makedirs(parent, exist_ok=True)
            if os.path.isdir(source):
                shutil.copytree(source, staging)
            else:
                shutil.copy2(source, staging)

            if os.path.isdir(destination) and not os.path.islink(destination):
                shutil.rmtree(destination)
            elif os.path.lexists(destination):
                os.remove(destination)
            os.replace(staging, destination)
        except OSError as exc:
            self._discard(staging)
            raise LocalNodeError(f"Failed to copy {source} to {destination}: {exc}") from exc

    def _discard(self, path: str):
        try:
            if os.path.isdir(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)
        except OSError as exc:
            self.logger.warning("Could not remove staging path %s: %s", path, exc)

    def cleanup_dir(self, path: str):
        if os.path.exists(path):
            try:
                shutil.rmtree(path)
                self.logger.debug("Removed directory: %s", path)
            except Exception as exc:
                message = f"Warning: Could not remove {path}: {exc}"
                self.console.print(f"[yellow]{message}[/yellow]")
                self.logger.warning(message)
