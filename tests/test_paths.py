"""Tests for album path construction."""

from pathlib import Path

from photoframe.export.paths import TraversalPath, export_directory


def test_empty_path_renders_empty_string() -> None:
    assert TraversalPath().render() == ""
    assert len(TraversalPath()) == 0


def test_push_prefers_name_and_falls_back_to_identifier() -> None:
    path = TraversalPath()
    path.push("Holidays", "id-1").push(None, "id-2").push("", "id-3")

    assert path.render() == "Holidays/id-2/id-3"
    assert len(path) == 3


def test_push_replaces_slashes_in_segment() -> None:
    path = TraversalPath().push("2024/09 Trip", "id-1")

    assert path.segments == ("2024_09 Trip",)
    assert path.render() == "2024_09 Trip"


def test_cloned_branches_do_not_share_segments() -> None:
    prefix = TraversalPath().push("Root", "r")

    left = prefix.clone().push("A", "a").push("B", "b")
    right = prefix.clone().push("C", "c")

    assert left.render() == "Root/A/B"
    assert right.render() == "Root/C"
    assert prefix.render() == "Root"


def test_export_directory_hierarchical_and_flattened() -> None:
    root = Path("/frame")

    assert export_directory(root, "A/B/C", flatten=False) == Path("/frame/A/B/C")
    assert export_directory(root, "A/B/C", flatten=True) == Path("/frame/A_B_C")
