"""Album traversal and image export."""

from .exclusion import ExclusionMatcher
from .geometry import MAX_STRETCH, AdmissionDecision, AdmissionReason, GeometryPolicy
from .models import ExportResult, RejectedAsset
from .paths import TraversalPath, export_directory
from .pipeline import AssetPipeline
from .service import run_export
from .walker import CollectionWalker

__all__ = [
    "MAX_STRETCH",
    "AdmissionDecision",
    "AdmissionReason",
    "AssetPipeline",
    "CollectionWalker",
    "ExclusionMatcher",
    "ExportResult",
    "GeometryPolicy",
    "RejectedAsset",
    "TraversalPath",
    "export_directory",
    "run_export",
]
