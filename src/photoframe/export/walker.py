"""Depth-first walk over the library's album tree."""

from __future__ import annotations

import logging
from typing import Iterable

from photoframe.config.models import ExportSettings
from photoframe.library.models import CollectionNode, CollectionSource

from .exclusion import ExclusionMatcher
from .filesystem import LocalFilesystem
from .models import ExportResult
from .paths import TraversalPath, export_directory
from .pipeline import AssetPipeline

LOGGER = logging.getLogger(__name__)


class CollectionWalker:
    """Visit albums, skipping excluded or already exported ones."""

    def __init__(
        self,
        source: CollectionSource,
        pipeline: AssetPipeline,
        matcher: ExclusionMatcher,
        settings: ExportSettings,
        *,
        filesystem: LocalFilesystem | None = None,
    ) -> None:
        self.source = source
        self.pipeline = pipeline
        self.matcher = matcher
        self.settings = settings
        self.filesystem = filesystem or pipeline.filesystem

    def run(self) -> ExportResult:
        """Walk every top-level collection and return the aggregated result."""
        result = ExportResult()
        try:
            nodes = self.source.fetch_top_level()
        except Exception as exc:
            LOGGER.exception("Failed to list top-level collections")
            result.errors.append(f"top-level collections: {exc}")
            return result
        self._visit_all(nodes, TraversalPath(), result)
        return result

    def visit(self, node: CollectionNode, parent: TraversalPath, result: ExportResult) -> None:
        """Process ``node`` and, unless excluded, its descendants."""
        path = parent.clone().push(node.name, node.identifier)
        rendered = path.render()

        if self.matcher.matches(rendered):
            LOGGER.info("Skipping %s (on command line skip list)", rendered)
            result.excluded.append(rendered)
            return

        if node.can_contain_assets:
            self._export_assets(node, rendered, result)

        if node.can_contain_collections:
            container = node.as_collection_container()
            if container is None:
                self._internal_error(result, f"Can't enumerate collections in {rendered}")
                return
            LOGGER.info("Processing collections in %s", rendered)
            self._visit_all(self.source.fetch_children(container), path, result)

    def _visit_all(
        self, nodes: Iterable[CollectionNode], parent: TraversalPath, result: ExportResult
    ) -> None:
        for node in nodes:
            try:
                self.visit(node, parent, result)
            except Exception as exc:
                label = parent.clone().push(node.name, node.identifier).render()
                LOGGER.exception("Failed to process %s", label)
                result.errors.append(f"{label}: {exc}")

    def _export_assets(self, node: CollectionNode, rendered: str, result: ExportResult) -> None:
        directory = export_directory(
            self.settings.output_dir, rendered, flatten=self.settings.flatten
        )
        if self.filesystem.exists(directory):
            LOGGER.info("Skipping %s (directory %s already exists)", rendered, directory)
            result.skipped.append(directory)
            return

        container = node.as_asset_container()
        if container is None:
            self._internal_error(result, f"Can't enumerate assets in {rendered}")
            return
        LOGGER.info("Processing assets in %s", rendered)
        self.pipeline.export(container, directory, result)

    def _internal_error(self, result: ExportResult, message: str) -> None:
        LOGGER.error("Internal error: %s", message)
        result.errors.append(message)


__all__ = ["CollectionWalker"]
