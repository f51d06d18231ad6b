"""Admission rules deciding which images suit the frame's aspect ratio."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from photoframe.library.models import ImageAsset

# Largest factor by which the cropped dimension may exceed the target after scaling.
MAX_STRETCH = 2


class AdmissionReason(str, Enum):
    """Why an image was admitted or rejected by the active rule."""

    ACCEPTED = "accepted"
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    TOO_TALL = "too tall"
    TOO_WIDE = "too wide"


@dataclass(frozen=True, slots=True)
class AdmissionDecision:
    """Outcome of checking one image against the active rule."""

    reason: AdmissionReason

    @property
    def accepted(self) -> bool:
        return self.reason is AdmissionReason.ACCEPTED

    def __bool__(self) -> bool:
        return self.accepted


ACCEPT = AdmissionDecision(AdmissionReason.ACCEPTED)

AdmissionRule = Callable[[ImageAsset], AdmissionDecision]


class GeometryPolicy:
    """Admission rules for a fixed target size.

    The bounds compare by integer cross-multiplication, so an image sitting
    exactly on the stretch limit is accepted whatever its pixel counts.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Target size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def orientation(self) -> str:
        if self.width < self.height:
            return "portrait"
        if self.width > self.height:
            return "landscape"
        return "square"

    def select_rule(self) -> AdmissionRule:
        """Return the rule matching the target's orientation."""
        return {
            "portrait": self.check_portrait,
            "landscape": self.check_landscape,
            "square": self.check_square,
        }[self.orientation]

    def check_portrait(self, asset: ImageAsset) -> AdmissionDecision:
        if asset.pixel_width > asset.pixel_height:
            return AdmissionDecision(AdmissionReason.LANDSCAPE)
        return self._check_too_tall(asset)

    def check_landscape(self, asset: ImageAsset) -> AdmissionDecision:
        if asset.pixel_width < asset.pixel_height:
            return AdmissionDecision(AdmissionReason.PORTRAIT)
        return self._check_too_wide(asset)

    def check_square(self, asset: ImageAsset) -> AdmissionDecision:
        if asset.pixel_width < asset.pixel_height:
            return self._check_too_tall(asset)
        return self._check_too_wide(asset)

    def _check_too_tall(self, asset: ImageAsset) -> AdmissionDecision:
        # height * (width_t / width) <= MAX_STRETCH * height_t
        if asset.pixel_height * self.width > MAX_STRETCH * self.height * asset.pixel_width:
            return AdmissionDecision(AdmissionReason.TOO_TALL)
        return ACCEPT

    def _check_too_wide(self, asset: ImageAsset) -> AdmissionDecision:
        # width * (height_t / height) <= MAX_STRETCH * width_t
        if asset.pixel_width * self.height > MAX_STRETCH * self.width * asset.pixel_height:
            return AdmissionDecision(AdmissionReason.TOO_WIDE)
        return ACCEPT


__all__ = [
    "MAX_STRETCH",
    "AdmissionDecision",
    "AdmissionReason",
    "AdmissionRule",
    "GeometryPolicy",
]
