"""Mirror an export tree onto a mounted photo frame volume."""

from __future__ import annotations

import fnmatch
import hashlib
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Set

from photoframe.errors import SyncError

LOGGER = logging.getLogger(__name__)

DEFAULT_EXCLUDES = (".DS_Store", ".Spotlight*")
_CHUNK_SIZE = 1024 * 1024


def file_digest(path: Path) -> str:
    """Return the SHA-256 hex digest of ``path``."""
    digest = hashlib.sha256()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


@dataclass(slots=True)
class SyncResult:
    """Paths touched by a mirror run, relative to the destination."""

    copied: List[Path] = field(default_factory=list)
    deleted: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "copied": len(self.copied),
            "deleted": len(self.deleted),
            "unchanged": len(self.unchanged),
        }


class FrameSync:
    """Make ``destination`` an exact copy of ``source``, compared by checksum."""

    def __init__(
        self,
        source: Path,
        destination: Path,
        *,
        excludes: Iterable[str] = DEFAULT_EXCLUDES,
        dry_run: bool = False,
    ) -> None:
        self.source = source.expanduser()
        self.destination = destination.expanduser()
        self.excludes = tuple(excludes)
        self.dry_run = dry_run

    def run(self) -> SyncResult:
        """Copy changed files, then delete entries absent from the source.

        Raises:
            SyncError: If either side is not an existing directory.
        """
        if not self.source.is_dir():
            raise SyncError(f"Export directory {self.source} does not exist")
        if not self.destination.is_dir():
            raise SyncError(f"Photo frame is not mounted at {self.destination}")

        result = SyncResult()
        wanted = self._copy_tree(result)
        self._delete_extraneous(wanted, result)
        return result

    def _excluded(self, name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self.excludes)

    def _walk(self, root: Path) -> Iterable[Path]:
        for path in sorted(root.iterdir()):
            if self._excluded(path.name):
                continue
            yield path
            if path.is_dir() and not path.is_symlink():
                yield from self._walk(path)

    def _copy_tree(self, result: SyncResult) -> Set[Path]:
        wanted: Set[Path] = set()
        for path in self._walk(self.source):
            relative = path.relative_to(self.source)
            wanted.add(relative)
            target = self.destination / relative
            if path.is_dir():
                if target.exists() and not target.is_dir():
                    self._remove(target, relative, result)
                if not self.dry_run:
                    target.mkdir(parents=True, exist_ok=True)
                continue

            if target.is_file() and file_digest(target) == file_digest(path):
                result.unchanged.append(relative)
                continue
            if target.is_dir():
                self._remove(target, relative, result)
            LOGGER.info("Copying %s", relative)
            if not self.dry_run:
                shutil.copy2(path, target)
            result.copied.append(relative)
        return wanted

    def _delete_extraneous(self, wanted: Set[Path], result: SyncResult) -> None:
        # Deepest entries first so directories are empty when removed.
        existing = sorted(
            self._walk(self.destination), key=lambda item: len(item.parts), reverse=True
        )
        for path in existing:
            relative = path.relative_to(self.destination)
            if relative in wanted:
                continue
            if path.is_dir() and not path.is_symlink() and self._holds_excluded(path):
                LOGGER.info("Keeping %s (holds excluded entries)", relative)
                continue
            self._remove(path, relative, result)

    def _holds_excluded(self, directory: Path) -> bool:
        return any(self._excluded(path.name) for path in directory.rglob("*"))

    def _remove(self, path: Path, relative: Path, result: SyncResult) -> None:
        LOGGER.info("Deleting %s", relative)
        if not self.dry_run:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        result.deleted.append(relative)


__all__ = ["DEFAULT_EXCLUDES", "FrameSync", "SyncResult", "file_digest"]
