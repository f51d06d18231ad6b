"""Copy the export tree onto the photo frame's storage."""

from .mirror import DEFAULT_EXCLUDES, FrameSync, SyncResult, file_digest

__all__ = ["DEFAULT_EXCLUDES", "FrameSync", "SyncResult", "file_digest"]
