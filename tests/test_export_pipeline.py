"""Tests for per-album image export."""

from datetime import datetime, timezone
from pathlib import Path

from PIL import Image

from photoframe.config import ExportSettings
from photoframe.errors import ExportError
from photoframe.export.models import ExportResult
from photoframe.export.pipeline import AssetPipeline, file_stem
from photoframe.library.models import ImageAsset

CREATED = datetime(2024, 9, 30, 12, 34, 56, tzinfo=timezone.utc)


def _settings(tmp_path: Path, **overrides) -> ExportSettings:
    values = {
        "width": 90,
        "height": 160,
        "output_dir": tmp_path / "out",
        "library_path": tmp_path / "library",
    }
    values.update(overrides)
    return ExportSettings(**values)


class FakeLibrary:
    def __init__(self, assets: list[ImageAsset], missing: set[str] | None = None) -> None:
        self.assets = assets
        self.missing = missing or set()
        self.fetched: list[tuple[str, int, int]] = []

    def fetch_image_members(self, container):  # type: ignore[override]
        return list(self.assets)

    def fetch_pixels(self, asset: ImageAsset, width: int, height: int):
        self.fetched.append((asset.identifier, width, height))
        if asset.identifier in self.missing:
            return None
        return Image.new("RGB", (width, height), color="blue")


def test_file_stem_uses_capture_time_in_utc() -> None:
    asset = ImageAsset("a/b", 10, 20, created_at=CREATED)

    assert file_stem(asset, "date") == "2024-09-30T12:34:56Z"
    assert file_stem(asset, "id") == "a_b"


def test_file_stem_falls_back_to_now_without_capture_time() -> None:
    asset = ImageAsset("x", 10, 20)

    assert file_stem(asset, "date", now=CREATED) == "2024-09-30T12:34:56Z"


def test_pipeline_exports_admitted_assets_only(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    library = FakeLibrary(
        [
            ImageAsset("portrait", 200, 300, created_at=CREATED),
            ImageAsset("landscape", 300, 200, created_at=CREATED),
            ImageAsset("sliver", 100, 1000, created_at=CREATED),
        ]
    )
    pipeline = AssetPipeline(library, library, settings)
    directory = settings.output_dir / "Trip"
    result = ExportResult()

    pipeline.export(object(), directory, result)

    assert result.exported == [directory / "2024-09-30T12:34:56Z.jpg"]
    assert {item.identifier: item.reason for item in result.rejected} == {
        "landscape": "landscape",
        "sliver": "too tall",
    }
    assert library.fetched == [("portrait", 90, 160)]
    with Image.open(result.exported[0]) as img:
        assert img.format == "JPEG"
        assert img.size == (90, 160)


def test_pipeline_does_not_create_directory_when_nothing_admitted(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    library = FakeLibrary([ImageAsset("landscape", 300, 200)])
    directory = settings.output_dir / "Trip"

    AssetPipeline(library, library, settings).export(object(), directory, ExportResult())

    assert not directory.exists()


def test_pipeline_png_and_id_naming(tmp_path: Path) -> None:
    settings = _settings(tmp_path, format="png", naming="id")
    library = FakeLibrary([ImageAsset("Trip/IMG_1.jpg", 200, 300)])
    directory = settings.output_dir / "Trip"
    result = ExportResult()

    AssetPipeline(library, library, settings).export(object(), directory, result)

    assert result.exported == [directory / "Trip_IMG_1.jpg.png"]
    with Image.open(result.exported[0]) as img:
        assert img.format == "PNG"


def test_missing_pixel_data_is_recorded_and_run_continues(tmp_path: Path) -> None:
    settings = _settings(tmp_path, naming="id")
    library = FakeLibrary(
        [ImageAsset("gone", 200, 300), ImageAsset("kept", 200, 300)],
        missing={"gone"},
    )
    directory = settings.output_dir / "Trip"
    result = ExportResult()

    AssetPipeline(library, library, settings).export(object(), directory, result)

    assert result.exported == [directory / "kept.jpg"]
    assert len(result.errors) == 1
    assert "No image returned for gone" in result.errors[0]


def test_existing_file_is_overwritten(tmp_path: Path) -> None:
    settings = _settings(tmp_path, naming="id")
    directory = settings.output_dir / "Trip"
    directory.mkdir(parents=True)
    (directory / "same.jpg").write_bytes(b"stale")
    library = FakeLibrary([ImageAsset("same", 200, 300)])

    target = AssetPipeline(library, library, settings).export_asset(library.assets[0], directory)

    assert target == directory / "same.jpg"
    assert target.read_bytes() != b"stale"
    assert sorted(p.name for p in directory.iterdir()) == ["same.jpg"]


def test_write_failure_is_per_asset(tmp_path: Path) -> None:
    class FailingFilesystem:
        def exists(self, path: Path) -> bool:
            return path.exists()

        def create_directory_all(self, path: Path) -> None:
            raise ExportError(f"Failed to create directory {path}: denied")

        def write_file(self, path: Path, data: bytes) -> None:  # pragma: no cover
            raise AssertionError("write should not be reached")

    settings = _settings(tmp_path, naming="id")
    library = FakeLibrary([ImageAsset("one", 200, 300), ImageAsset("two", 200, 300)])
    pipeline = AssetPipeline(library, library, settings, filesystem=FailingFilesystem())
    result = ExportResult()

    pipeline.export(object(), settings.output_dir / "Trip", result)

    assert not result.exported
    assert len(result.errors) == 2
    assert all("denied" in message for message in result.errors)


def test_unexpected_backend_error_does_not_stop_remaining_assets(tmp_path: Path) -> None:
    class FlakyLibrary(FakeLibrary):
        def fetch_pixels(self, asset: ImageAsset, width: int, height: int):
            if asset.identifier == "a1":
                raise RuntimeError("backend hiccup")
            return super().fetch_pixels(asset, width, height)

    settings = _settings(tmp_path, naming="id")
    library = FlakyLibrary([ImageAsset(f"a{index}", 200, 300) for index in range(3)])
    directory = settings.output_dir / "Trip"
    result = ExportResult()

    AssetPipeline(library, library, settings).export(object(), directory, result)

    assert result.exported == [directory / "a0.jpg", directory / "a2.jpg"]
    assert result.errors == ["a1: backend hiccup"]
