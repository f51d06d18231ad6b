"""Filesystem operations used when writing the export tree."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from photoframe.errors import ExportError


class LocalFilesystem:
    """Create directories and write files atomically on the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def create_directory_all(self, path: Path) -> None:
        """Create ``path`` and its parents; an existing directory is fine.

        Raises:
            ExportError: If the directory cannot be created.
        """
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExportError(f"Failed to create directory {path}: {exc}") from exc

    def write_file(self, path: Path, data: bytes) -> None:
        """Write ``data`` to ``path`` through a temporary sibling file.

        An existing file at ``path`` is replaced.

        Raises:
            ExportError: If the data cannot be written.
        """
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as handle:
                tmp_name = handle.name
                handle.write(data)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise ExportError(f"Failed to save {path}: {exc}") from exc


__all__ = ["LocalFilesystem"]
