"""Test configuration for the scene adventure project."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from typing import Any

import pytest

KITTEN_DIR = SRC / "sceneventure" / "data" / "kitten"


@pytest.fixture()
def kitten_dir() -> Path:
    """Return the directory of the bundled kitten adventure."""

    return KITTEN_DIR


@pytest.fixture()
def kitten_scene_path(kitten_dir: Path) -> Path:
    return kitten_dir / "kitten.scene"


@pytest.fixture()
def write_scene(tmp_path: Path) -> Any:
    """Factory fixture writing scene files into a temporary directory."""

    def _factory(name: str, text: str, *, directory: Path | None = None) -> Path:
        target_dir = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / f"{name}.scene"
        path.write_text(text, encoding="utf-8")
        return path

    return _factory


__all__ = ["KITTEN_DIR", "kitten_dir", "kitten_scene_path", "write_scene"]
