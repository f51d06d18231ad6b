"""Photo library backends and the interfaces the exporter consumes."""

from .folder import FolderLibrary
from .models import (
    AssetSource,
    AuthorizationStatus,
    CollectionNode,
    CollectionSource,
    ImageAsset,
    ImageFetcher,
    LibraryAuth,
)

__all__ = [
    "AssetSource",
    "AuthorizationStatus",
    "CollectionNode",
    "CollectionSource",
    "FolderLibrary",
    "ImageAsset",
    "ImageFetcher",
    "LibraryAuth",
]
