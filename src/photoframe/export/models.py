"""Export result models."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field


class RejectedAsset(BaseModel):
    """Image left out because it does not suit the frame."""

    identifier: str
    reason: str


class ExportResult(BaseModel):
    """Aggregated outcome of an export run.

    Attributes:
        exported: Files written during the run.
        rejected: Images refused by the admission rule.
        excluded: Album paths matched by a skip pattern.
        skipped: Album directories that already existed.
        errors: Per-asset and per-album failures.
    """

    exported: List[Path] = Field(default_factory=list)
    rejected: List[RejectedAsset] = Field(default_factory=list)
    excluded: List[str] = Field(default_factory=list)
    skipped: List[Path] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "exported": len(self.exported),
            "rejected": len(self.rejected),
            "excluded": len(self.excluded),
            "skipped": len(self.skipped),
            "errors": len(self.errors),
        }


__all__ = ["ExportResult", "RejectedAsset"]
