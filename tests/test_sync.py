"""Tests for mirroring the export tree onto the frame."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from photoframe.cli import cli
from photoframe.errors import SyncError
from photoframe.sync import FrameSync


def _write(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def test_sync_copies_changed_and_deletes_extraneous(tmp_path: Path) -> None:
    source = tmp_path / "export"
    frame = tmp_path / "frame"
    _write(source / "Trip" / "a.jpg", b"new-a")
    _write(source / "Trip" / "b.jpg", b"same")
    _write(frame / "Trip" / "a.jpg", b"old-a")
    _write(frame / "Trip" / "b.jpg", b"same")
    _write(frame / "Gone" / "c.jpg", b"stale")
    _write(frame / ".DS_Store", b"finder")
    _write(frame / ".Spotlight-V100" / "store", b"index")

    result = FrameSync(source, frame).run()

    assert result.copied == [Path("Trip/a.jpg")]
    assert result.unchanged == [Path("Trip/b.jpg")]
    assert set(result.deleted) == {Path("Gone"), Path("Gone/c.jpg")}
    assert (frame / "Trip" / "a.jpg").read_bytes() == b"new-a"
    assert not (frame / "Gone").exists()
    assert (frame / ".DS_Store").exists()
    assert (frame / ".Spotlight-V100" / "store").exists()


def test_sync_ignores_excluded_source_files(tmp_path: Path) -> None:
    source = tmp_path / "export"
    frame = tmp_path / "frame"
    frame.mkdir()
    _write(source / ".DS_Store", b"finder")
    _write(source / "a.jpg", b"a")

    result = FrameSync(source, frame).run()

    assert result.copied == [Path("a.jpg")]
    assert not (frame / ".DS_Store").exists()


def test_dry_run_leaves_frame_untouched(tmp_path: Path) -> None:
    source = tmp_path / "export"
    frame = tmp_path / "frame"
    _write(source / "Trip" / "a.jpg", b"a")
    _write(frame / "old.jpg", b"old")

    result = FrameSync(source, frame, dry_run=True).run()

    assert result.copied == [Path("Trip/a.jpg")]
    assert result.deleted == [Path("old.jpg")]
    assert sorted(p.name for p in frame.iterdir()) == ["old.jpg"]


def test_unmounted_frame_raises(tmp_path: Path) -> None:
    (tmp_path / "export").mkdir()

    with pytest.raises(SyncError, match="not mounted"):
        FrameSync(tmp_path / "export", tmp_path / "missing").run()


def test_sync_command_reports_summary(tmp_path: Path) -> None:
    source = tmp_path / "export"
    frame = tmp_path / "frame"
    frame.mkdir()
    _write(source / "a.jpg", b"a")

    result = CliRunner().invoke(
        cli, ["sync", str(source), str(frame)], env={"HOME": str(tmp_path)}
    )

    assert result.exit_code == 0, result.output
    assert "copied=1" in result.output
    assert (frame / "a.jpg").read_bytes() == b"a"


def test_sync_command_fails_when_frame_missing(tmp_path: Path) -> None:
    (tmp_path / "export").mkdir()

    result = CliRunner().invoke(
        cli,
        ["sync", str(tmp_path / "export"), str(tmp_path / "missing")],
        env={"HOME": str(tmp_path)},
    )

    assert result.exit_code == 1
    assert "Photo frame is not mounted" in result.output


def test_extraneous_directory_with_excluded_entry_is_kept(tmp_path: Path) -> None:
    source = tmp_path / "export"
    frame = tmp_path / "frame"
    source.mkdir()
    _write(frame / "Gone" / "c.jpg", b"stale")
    _write(frame / "Gone" / ".DS_Store", b"finder")
    _write(frame / "Old" / "Day1" / ".DS_Store", b"finder")

    result = FrameSync(source, frame).run()

    assert result.deleted == [Path("Gone/c.jpg")]
    assert not (frame / "Gone" / "c.jpg").exists()
    assert (frame / "Gone" / ".DS_Store").exists()
    assert (frame / "Old" / "Day1" / ".DS_Store").exists()
