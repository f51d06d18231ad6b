"""Exception hierarchy shared across photoframe packages."""


class PhotoFrameError(Exception):
    """Base exception for photoframe failures."""


class LibraryAccessError(PhotoFrameError):
    """Raised when the photo library refuses read access."""


class ExportError(PhotoFrameError):
    """Raised when a single asset cannot be written to the export tree."""


class SyncError(PhotoFrameError):
    """Raised when the frame volume cannot be synchronized."""
