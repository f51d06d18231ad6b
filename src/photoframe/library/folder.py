"""Photo library backed by a directory tree.

Directories play the role of albums and folders: a directory holding image
files can contain assets, and one holding subdirectories can contain
collections. Hidden entries (leading dot) are ignored throughout.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from PIL import ExifTags, Image, ImageOps, UnidentifiedImageError

from .models import AuthorizationStatus, CollectionNode, ImageAsset

LOGGER = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset(
    {".jpg", ".jpeg", ".png", ".tif", ".tiff", ".bmp", ".gif", ".webp"}
)
# EXIF orientations that rotate the image by 90 or 270 degrees.
_TRANSPOSED_ORIENTATIONS = frozenset({5, 6, 7, 8})
_EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def _is_image_file(path: Path) -> bool:
    return path.is_file() and not _is_hidden(path) and path.suffix.lower() in IMAGE_EXTENSIONS


class FolderLibrary:
    """Expose a directory tree through the library collaborator interfaces."""

    def __init__(self, root: Path) -> None:
        self.root = root.expanduser()

    # LibraryAuth ------------------------------------------------------

    def request_access(self) -> AuthorizationStatus:
        """Report whether the library root can be read."""
        if not self.root.is_dir():
            return AuthorizationStatus.NOT_DETERMINED
        if not os.access(self.root, os.R_OK | os.X_OK):
            return AuthorizationStatus.DENIED
        return AuthorizationStatus.AUTHORIZED

    # CollectionSource -------------------------------------------------

    def fetch_top_level(self) -> List[CollectionNode]:
        """Return nodes for the root's direct subdirectories."""
        return self.fetch_children(self.root)

    def fetch_children(self, container: Path) -> List[CollectionNode]:
        """Return nodes for the non-hidden subdirectories of ``container``."""
        return [self._node_for(path) for path in self._subdirectories(container)]

    # AssetSource ------------------------------------------------------

    def fetch_image_members(self, container: Path) -> List[ImageAsset]:
        """Return readable images stored directly in ``container``."""
        assets: List[ImageAsset] = []
        for path in sorted(container.iterdir()):
            if not _is_image_file(path):
                continue
            try:
                assets.append(self._asset_for(path))
            except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
                LOGGER.warning("Skipping unreadable image %s: %s", path, exc)
        return assets

    # ImageFetcher -----------------------------------------------------

    def fetch_pixels(self, asset: ImageAsset, width: int, height: int) -> Image.Image | None:
        """Return the asset scaled to cover ``width`` x ``height`` and cropped to fit.

        Returns:
            Image.Image | None: Exactly sized image, or ``None`` when the file
            cannot be decoded.
        """
        path = Path(asset.handle)
        try:
            with Image.open(path) as img:
                oriented = ImageOps.exif_transpose(img)
                return ImageOps.fit(
                    oriented,
                    (width, height),
                    method=Image.Resampling.LANCZOS,
                    centering=(0.5, 0.5),
                )
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError) as exc:
            LOGGER.debug("Image fetch failed for %s: %s", path, exc)
            return None

    # Internal helpers -------------------------------------------------

    def _subdirectories(self, directory: Path) -> List[Path]:
        return sorted(
            path for path in directory.iterdir() if path.is_dir() and not _is_hidden(path)
        )

    def _node_for(self, directory: Path) -> CollectionNode:
        identifier = directory.relative_to(self.root).as_posix()
        try:
            entries = [path for path in directory.iterdir() if not _is_hidden(path)]
        except OSError as exc:
            # Unreadable directories become empty leaves.
            LOGGER.warning("Skipping unreadable collection %s: %s", directory, exc)
            return CollectionNode(identifier=identifier, name=directory.name)
        return CollectionNode(
            identifier=identifier,
            name=directory.name,
            can_contain_assets=any(_is_image_file(path) for path in entries),
            can_contain_collections=any(path.is_dir() for path in entries),
            asset_container=directory,
            collection_container=directory,
        )

    def _asset_for(self, path: Path) -> ImageAsset:
        with Image.open(path) as img:
            width, height = img.size
            exif = img.getexif()
            orientation = exif.get(ExifTags.Base.Orientation)
            raw_date = exif.get_ifd(ExifTags.IFD.Exif).get(ExifTags.Base.DateTimeOriginal)
        if orientation in _TRANSPOSED_ORIENTATIONS:
            width, height = height, width

        return ImageAsset(
            identifier=path.relative_to(self.root).as_posix(),
            pixel_width=width,
            pixel_height=height,
            created_at=self._creation_time(path, raw_date),
            handle=path,
        )

    def _creation_time(self, path: Path, raw: object) -> Optional[datetime]:
        if isinstance(raw, str):
            try:
                # EXIF stores local wall-clock time.
                return datetime.strptime(raw.strip(), _EXIF_DATE_FORMAT).astimezone()
            except ValueError:
                LOGGER.debug("Ignoring malformed DateTimeOriginal %r in %s", raw, path)
        return datetime.fromtimestamp(path.stat().st_mtime).astimezone()
