"""Test project directory detection"""

from pathlib import Path

from pagesmith.config import override_settings
from pagesmith.processors import ProjectPath


def test_marker_directory_in_ancestor(tmp_path: Path) -> None:
    project = tmp_path / "site" / ".pagesmith"
    entries = tmp_path / "site" / "content" / "entries"
    project.mkdir(parents=True)
    entries.mkdir(parents=True)

    assert ProjectPath(entries).get() == project.resolve()


def test_path_inside_marker_directory(tmp_path: Path) -> None:
    project = tmp_path / "_pagesmith"
    entries = project / "entries"
    entries.mkdir(parents=True)

    assert ProjectPath(entries).get() == project.resolve()


def test_outside_project_returns_none(tmp_path: Path) -> None:
    entries = tmp_path / "plain" / "entries"
    entries.mkdir(parents=True)

    assert ProjectPath(entries, max_depth=3).get() is None
    assert str(ProjectPath(entries, max_depth=3)) == ""


def test_marker_file_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".pagesmith").write_text("not a directory", encoding="utf-8")
    entries = tmp_path / "entries"
    entries.mkdir()

    assert ProjectPath(entries, max_depth=2).get() is None


def test_custom_markers(tmp_path: Path) -> None:
    project = tmp_path / ".site"
    project.mkdir()

    assert ProjectPath(tmp_path, markers=[".site"]).get() == project.resolve()
    assert ProjectPath(tmp_path, markers=[".other"], max_depth=1).get() is None


def test_markers_default_from_settings(tmp_path: Path) -> None:
    project = tmp_path / ".custom"
    project.mkdir()

    with override_settings(project_markers=(".custom",)):
        assert ProjectPath(tmp_path).get() == project.resolve()


def test_depth_limit(tmp_path: Path) -> None:
    (tmp_path / ".pagesmith").mkdir()
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)

    assert ProjectPath(deep, max_depth=2).get() is None
    assert ProjectPath(deep, max_depth=4).get() == (tmp_path / ".pagesmith").resolve()
