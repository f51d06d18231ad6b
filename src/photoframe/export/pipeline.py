"""Per-album image export: admission, resize, encode, write."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from photoframe.config.models import ExportSettings
from photoframe.errors import ExportError
from photoframe.library.models import AssetSource, ImageAsset, ImageFetcher

from .encoding import ImageEncoder
from .filesystem import LocalFilesystem
from .geometry import GeometryPolicy
from .models import ExportResult, RejectedAsset
from .paths import sanitize_segment

LOGGER = logging.getLogger(__name__)

STEM_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def file_stem(asset: ImageAsset, naming: str, *, now: datetime | None = None) -> str:
    """Return the output file name, without extension, for ``asset``.

    Args:
        asset: Image being exported.
        naming: ``"date"`` for the capture time in UTC, ``"id"`` for the identifier.
        now: Timestamp used when the asset has no capture time.

    Returns:
        str: Stem safe to use as a single path component.
    """
    if naming == "id":
        stem = asset.identifier
    else:
        created = asset.created_at or now or datetime.now(timezone.utc)
        stem = created.astimezone(timezone.utc).strftime(STEM_DATE_FORMAT)
    return sanitize_segment(stem)


class AssetPipeline:
    """Write the admitted images of one album into its export directory."""

    def __init__(
        self,
        assets: AssetSource,
        fetcher: ImageFetcher,
        settings: ExportSettings,
        *,
        encoder: ImageEncoder | None = None,
        filesystem: LocalFilesystem | None = None,
    ) -> None:
        self.assets = assets
        self.fetcher = fetcher
        self.settings = settings
        self.encoder = encoder or ImageEncoder()
        self.filesystem = filesystem or LocalFilesystem()
        self.policy = GeometryPolicy(settings.width, settings.height)
        self.rule = self.policy.select_rule()

    def export(self, container: Any, directory: Path, result: ExportResult) -> None:
        """Export every admitted image in ``container`` to ``directory``.

        Failures are recorded on ``result`` and never stop the remaining images.
        """
        for asset in self.assets.fetch_image_members(container):
            decision = self.rule(asset)
            if not decision.accepted:
                LOGGER.info("Skipping asset %s (%s)", asset.describe(), decision.reason.value)
                result.rejected.append(
                    RejectedAsset(identifier=asset.identifier, reason=decision.reason.value)
                )
                continue

            LOGGER.info("Processing asset %s", asset.describe())
            try:
                written = self.export_asset(asset, directory)
            except ExportError as exc:
                LOGGER.error("%s: %s", asset.identifier, exc)
                result.errors.append(f"{asset.identifier}: {exc}")
                continue
            except Exception as exc:
                LOGGER.exception("Failed to export %s", asset.identifier)
                result.errors.append(f"{asset.identifier}: {exc}")
                continue
            LOGGER.info("Image saved to %s", written)
            result.exported.append(written)

    def export_asset(self, asset: ImageAsset, directory: Path) -> Path:
        """Fetch, encode and write one admitted image.

        Returns:
            Path: Location of the written file.

        Raises:
            ExportError: If any step fails for this image.
        """
        image = self.fetcher.fetch_pixels(asset, self.settings.width, self.settings.height)
        if image is None:
            raise ExportError(f"No image returned for {asset.identifier}")

        self.filesystem.create_directory_all(directory)
        target = directory / f"{file_stem(asset, self.settings.naming)}{self.settings.extension}"
        payload = self.encoder.encode(image, self.settings.format)
        self.filesystem.write_file(target, payload)
        return target


__all__ = ["AssetPipeline", "file_stem", "STEM_DATE_FORMAT"]
