"""Tests for adventure metadata loading and discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from sceneventure import Adventure, AdventureError, demo_adventure_path, search_adventures


def _write_about(directory: Path, text: str, *, filename: str = "about.yaml") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(text, encoding="utf-8")
    return path


def test_load_bundled_metadata(kitten_dir: Path) -> None:
    adventure = Adventure.from_file(kitten_dir / "about.yaml")

    assert adventure.name == "A cuddly kitten"
    assert adventure.author == "Fiona"
    assert adventure.version == "1.0"
    assert adventure.start == kitten_dir / "kitten.scene"
    assert str(adventure) == '"A cuddly kitten" by Fiona (version 1.0)'


def test_start_scene_loads_first_scene(kitten_dir: Path) -> None:
    adventure = Adventure.from_file(kitten_dir / "about.yaml")

    scene = adventure.start_scene()

    assert scene.description.strip() == "There's a little kitten in front of you!"


def test_format_without_version(tmp_path: Path) -> None:
    adventure = Adventure.from_file(
        _write_about(tmp_path, "name: Test Adventure\nauthor: Me\n")
    )

    assert adventure.version is None
    assert str(adventure) == '"Test Adventure" by Me'


def test_start_defaults_to_start_scene(tmp_path: Path) -> None:
    adventure = Adventure.from_file(_write_about(tmp_path, "name: A\nauthor: B\n"))

    assert adventure.start == tmp_path / "start.scene"


@pytest.mark.parametrize("value", ["5", "[1, 2]", "''", "'   '"])
def test_unusable_start_falls_back_to_default(tmp_path: Path, value: str) -> None:
    adventure = Adventure.from_file(
        _write_about(tmp_path, f"name: A\nauthor: B\nstart: {value}\n")
    )

    assert adventure.start == tmp_path / "start.scene"


def test_numeric_version_is_text(tmp_path: Path) -> None:
    adventure = Adventure.from_file(
        _write_about(tmp_path, "name: A\nauthor: B\nversion: 2.5\n")
    )

    assert adventure.version == "2.5"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "no data in file"),
        ("- just\n- a list\n", "must be a mapping"),
        ("author: Me\n", "name"),
        ("name: Nameless\n", "author"),
        ("name: [unclosed\n", "invalid YAML"),
    ],
)
def test_invalid_metadata_is_rejected(tmp_path: Path, text: str, message: str) -> None:
    path = _write_about(tmp_path, text)

    with pytest.raises(AdventureError) as excinfo:
        Adventure.from_file(path)

    assert message in str(excinfo.value)


def test_search_finds_nested_adventures(tmp_path: Path) -> None:
    _write_about(tmp_path / "b_second" / "deep", "name: Second\nauthor: Bo\n", filename="about.yml")
    _write_about(tmp_path / "a_first", "name: First\nauthor: Al\n")
    (tmp_path / "notes.txt").write_text("not an adventure", encoding="utf-8")

    adventures = search_adventures(tmp_path)

    assert [adventure.name for adventure in adventures] == ["First", "Second"]
    assert adventures[1].start == tmp_path / "b_second" / "deep" / "start.scene"


def test_search_empty_directory(tmp_path: Path) -> None:
    assert search_adventures(tmp_path) == []


def test_search_propagates_invalid_metadata(tmp_path: Path) -> None:
    _write_about(tmp_path / "bad", "name: Only\n")

    with pytest.raises(AdventureError):
        search_adventures(tmp_path)


def test_demo_adventure_is_discoverable() -> None:
    adventures = search_adventures(demo_adventure_path())

    assert len(adventures) == 1
    assert adventures[0].name == "A cuddly kitten"


def test_undecodable_metadata_raises_os_error(tmp_path: Path) -> None:
    path = tmp_path / "about.yaml"
    path.write_bytes(b"name: \xff\n")

    with pytest.raises(OSError):
        Adventure.from_file(path)
