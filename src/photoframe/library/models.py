"""Entities and collaborator interfaces exposed by photo library backends."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Protocol, Sequence

from PIL import Image


class AuthorizationStatus(str, Enum):
    """Outcome of asking a library for read access."""

    AUTHORIZED = "authorized"
    DENIED = "denied"
    RESTRICTED = "restricted"
    LIMITED = "limited"
    NOT_DETERMINED = "not_determined"

    def describe(self) -> str:
        """Return a human readable explanation for the status."""
        return _STATUS_MESSAGES.get(self, f"Unknown photo library authorisation status {self.value}")


_STATUS_MESSAGES = {
    AuthorizationStatus.AUTHORIZED: "Access to photo library is authorised",
    AuthorizationStatus.DENIED: "Access to photo library is denied",
    AuthorizationStatus.RESTRICTED: "Access to photo library is restricted",
    AuthorizationStatus.LIMITED: "Access to photo library is limited",
    AuthorizationStatus.NOT_DETERMINED: "Photo library authorisation could not be determined",
}


@dataclass(frozen=True, slots=True)
class CollectionNode:
    """Read-only view of one album or folder in a library.

    Attributes:
        identifier: Opaque identifier, stable across runs.
        name: Display name; may be missing.
        can_contain_assets: Whether the node holds images directly.
        can_contain_collections: Whether the node holds child collections.
        asset_container: Backend handle used to enumerate images.
        collection_container: Backend handle used to enumerate children.
    """

    identifier: str
    name: Optional[str] = None
    can_contain_assets: bool = False
    can_contain_collections: bool = False
    asset_container: Any = field(default=None, compare=False, repr=False)
    collection_container: Any = field(default=None, compare=False, repr=False)

    def as_asset_container(self) -> Any | None:
        """Return the handle for image enumeration, or ``None`` when absent."""
        return self.asset_container if self.can_contain_assets else None

    def as_collection_container(self) -> Any | None:
        """Return the handle for child enumeration, or ``None`` when absent."""
        return self.collection_container if self.can_contain_collections else None


@dataclass(frozen=True, slots=True)
class ImageAsset:
    """Image held by a collection.

    Attributes:
        identifier: Opaque identifier of the image.
        pixel_width: Width in pixels, as displayed.
        pixel_height: Height in pixels, as displayed.
        created_at: Capture timestamp when known.
        handle: Backend handle used to fetch pixel data.
    """

    identifier: str
    pixel_width: int
    pixel_height: int
    created_at: Optional[datetime] = None
    handle: Any = field(default=None, compare=False, repr=False)

    def describe(self) -> str:
        return f"{self.identifier} size {self.pixel_width}x{self.pixel_height}"


class LibraryAuth(Protocol):
    def request_access(self) -> AuthorizationStatus: ...


class CollectionSource(Protocol):
    def fetch_top_level(self) -> Sequence[CollectionNode]: ...

    def fetch_children(self, container: Any) -> Sequence[CollectionNode]: ...


class AssetSource(Protocol):
    def fetch_image_members(self, container: Any) -> Sequence[ImageAsset]: ...


class ImageFetcher(Protocol):
    def fetch_pixels(self, asset: ImageAsset, width: int, height: int) -> Image.Image | None: ...


__all__ = [
    "AuthorizationStatus",
    "CollectionNode",
    "ImageAsset",
    "LibraryAuth",
    "CollectionSource",
    "AssetSource",
    "ImageFetcher",
]
