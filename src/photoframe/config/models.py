"""Configuration models describing photoframe settings."""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

OutputFormat = Literal["png", "jpg"]
NamingMode = Literal["date", "id"]


class PhotoFrameBaseModel(BaseModel):
    """Shared configuration for photoframe Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class LibrarySettings(PhotoFrameBaseModel):
    """Location of the photo library to export from.

    Attributes:
        path: Root directory of the folder library.
    """

    path: str = "~/Pictures"


class ExportOptions(PhotoFrameBaseModel):
    """Persisted defaults for the export command.

    Attributes:
        flatten: Whether album paths collapse into a single directory level.
        skip: Whole-path regular expressions naming albums to leave out.
        format: Output image encoding.
        naming: Strategy used to derive output file names.
    """

    flatten: bool = False
    skip: List[str] = Field(default_factory=list)
    format: OutputFormat = "jpg"
    naming: NamingMode = "date"


class LoggingSettings(PhotoFrameBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level used when ``--verbose`` is absent.
    """

    level: str = "WARNING"


class PhotoFrameConfig(PhotoFrameBaseModel):
    """Top-level configuration struct for photoframe.

    Attributes:
        library: Source library settings.
        export: Export defaults.
        logging: Logging configuration.
    """

    library: LibrarySettings = Field(default_factory=LibrarySettings)
    export: ExportOptions = Field(default_factory=ExportOptions)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ExportSettings(PhotoFrameBaseModel):
    """Effective settings for a single export run.

    The object is threaded through the walker and the asset pipeline so no
    component reads ambient state.

    Attributes:
        width: Target pixel width.
        height: Target pixel height.
        output_dir: Root directory receiving exported albums.
        library_path: Root directory of the source library.
        flatten: Whether album paths collapse into a single directory level.
        skip: Whole-path exclusion patterns.
        format: Output image encoding.
        naming: Output file stem strategy.
        verbose: Whether diagnostic logging is enabled.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: PositiveInt
    height: PositiveInt
    output_dir: Path
    library_path: Path
    flatten: bool = False
    skip: List[str] = Field(default_factory=list)
    format: OutputFormat = "jpg"
    naming: NamingMode = "date"
    verbose: bool = False

    @property
    def extension(self) -> str:
        """Return the file extension for the configured output format."""
        return f".{self.format}"


__all__ = [
    "PhotoFrameBaseModel",
    "LibrarySettings",
    "ExportOptions",
    "LoggingSettings",
    "PhotoFrameConfig",
    "ExportSettings",
    "OutputFormat",
    "NamingMode",
]
