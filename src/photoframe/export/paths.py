"""Album path construction for the export tree."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

PATH_SEPARATOR = "/"
FLATTEN_SEPARATOR = "_"


def sanitize_segment(value: str) -> str:
    """Replace path separators so ``value`` forms a single path component."""
    return value.replace(PATH_SEPARATOR, FLATTEN_SEPARATOR)


class TraversalPath:
    """Chain of collection names from a top-level node down to the current one.

    Each walker branch owns its builder; call :meth:`clone` before descending so
    sibling subtrees never share segments.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[str] = ()) -> None:
        self._segments = list(segments)

    def clone(self) -> "TraversalPath":
        """Return an independent copy of this path."""
        return TraversalPath(self._segments)

    def push(self, name: Optional[str], identifier: str) -> "TraversalPath":
        """Append a segment named ``name``, falling back to ``identifier``."""
        self._segments.append(sanitize_segment(name or identifier))
        return self

    def render(self) -> str:
        """Join the segments with ``/``; an empty path renders as ``""``."""
        return PATH_SEPARATOR.join(self._segments)

    @property
    def segments(self) -> Tuple[str, ...]:
        """Sanitized segments from the root downwards."""
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"TraversalPath({self.render()!r})"


def export_directory(output_root: Path, rendered: str, *, flatten: bool) -> Path:
    """Return the directory receiving images for the album at ``rendered``.

    Args:
        output_root: Root of the export tree.
        rendered: Slash-joined album path.
        flatten: Collapse the album path into a single directory name.

    Returns:
        Path: Target directory under ``output_root``.
    """
    if flatten:
        return output_root / rendered.replace(PATH_SEPARATOR, FLATTEN_SEPARATOR)
    return output_root.joinpath(*rendered.split(PATH_SEPARATOR))


__all__ = ["TraversalPath", "export_directory", "sanitize_segment"]
