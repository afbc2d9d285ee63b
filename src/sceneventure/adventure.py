"""Adventure metadata and discovery of adventures in a directory tree."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .scene import Scene

METADATA_FILENAMES = ("about.yaml", "about.yml")
DEFAULT_START_SCENE = "start.scene"


class AdventureError(ValueError):
    """Raised when adventure metadata is missing or malformed."""


class Adventure(BaseModel):
    """Metadata describing an adventure and where it starts."""

    model_config = ConfigDict(frozen=True)

    name: str
    author: str
    version: str | None = None
    start: Path

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # ``version: 1.0`` loads as a float.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_file(cls, path: str | Path) -> "Adventure":
        """Load metadata from an ``about.yaml`` file.

        The starting scene is resolved relative to the metadata file and
        defaults to ``start.scene``.

        Raises:
            OSError: If the file cannot be read.
            AdventureError: If the file is empty, not a mapping or lacks the
                required ``name`` and ``author`` fields.
        """

        metadata_path = Path(path)
        try:
            text = metadata_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise OSError(f"{metadata_path}: {exc}") from exc
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise AdventureError(f"{metadata_path}: invalid YAML: {exc}") from exc

        if data is None:
            raise AdventureError(f"{metadata_path}: no data in file")
        if not isinstance(data, dict):
            raise AdventureError(f"{metadata_path}: invalid data, must be a mapping")

        # Anything but a non-blank string falls back to the default start.
        start_name = data.get("start")
        if not isinstance(start_name, str) or not start_name.strip():
            start_name = DEFAULT_START_SCENE

        payload = {key: data.get(key) for key in ("name", "author", "version")}
        payload = {key: value for key, value in payload.items() if value is not None}
        payload["start"] = metadata_path.parent / start_name.strip()

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise AdventureError(f"{metadata_path}: {problems}") from exc

    def start_scene(self) -> Scene:
        """Load the adventure's starting scene."""

        return Scene.load(self.start)

    def __str__(self) -> str:
        text = f'"{self.name}" by {self.author}'
        if self.version is not None:
            text += f" (version {self.version})"
        return text


def search_adventures(directory: str | Path) -> List[Adventure]:
    """Find every adventure below ``directory``.

    Any directory holding an ``about.yaml`` or ``about.yml`` file is treated
    as an adventure. Entries are visited in sorted order so results are
    stable across platforms.
    """

    found: List[Adventure] = []
    for entry in sorted(Path(directory).iterdir()):
        if entry.is_dir():
            found.extend(search_adventures(entry))
        elif entry.name in METADATA_FILENAMES:
            found.append(Adventure.from_file(entry))
    return found


def demo_adventure_path() -> Path:
    """Return the directory of the bundled kitten adventure."""

    return Path(str(resources.files("sceneventure.data").joinpath("kitten")))


__all__ = [
    "Adventure",
    "AdventureError",
    "DEFAULT_START_SCENE",
    "METADATA_FILENAMES",
    "demo_adventure_path",
    "search_adventures",
]
