"""Run a complete export against a library backend."""

from __future__ import annotations

import logging
from typing import Protocol

from photoframe.config.models import ExportSettings
from photoframe.errors import LibraryAccessError
from photoframe.library.models import (
    AssetSource,
    AuthorizationStatus,
    CollectionSource,
    ImageFetcher,
    LibraryAuth,
)

from .exclusion import ExclusionMatcher
from .models import ExportResult
from .pipeline import AssetPipeline
from .walker import CollectionWalker

LOGGER = logging.getLogger(__name__)


class PhotoLibrary(LibraryAuth, CollectionSource, AssetSource, ImageFetcher, Protocol):
    """Backend providing every collaborator an export needs."""


def run_export(settings: ExportSettings, library: PhotoLibrary) -> ExportResult:
    """Export the library into ``settings.output_dir``.

    Skip patterns are compiled before the library is touched.

    Raises:
        ExclusionPatternError: If a skip pattern is invalid.
        LibraryAccessError: If the library does not grant read access.
    """
    matcher = ExclusionMatcher(settings.skip)

    LOGGER.info("Getting authorisation...")
    status = library.request_access()
    if status is not AuthorizationStatus.AUTHORIZED:
        raise LibraryAccessError(status.describe())

    LOGGER.info("Processing collections...")
    pipeline = AssetPipeline(library, library, settings)
    walker = CollectionWalker(library, pipeline, matcher, settings)
    return walker.run()


__all__ = ["PhotoLibrary", "run_export"]
