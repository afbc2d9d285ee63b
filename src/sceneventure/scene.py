"""Loading of scene files and lookup of the actions they define."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .actions import Action, SceneError, parse_action

SCENE_SUFFIX = ".scene"


def sibling_scene_path(path: str | Path, name: str) -> Path:
    """Return the path of scene ``name`` in the same directory as ``path``."""

    return Path(path).parent / f"{name}{SCENE_SUFFIX}"


def _read_description(lines: Iterator[str]) -> tuple[str, Action | None]:
    """Consume description lines until the first line that parses as an action."""

    description: list[str] = []
    for line in lines:
        try:
            return "".join(description), parse_action(line.strip())
        except SceneError:
            description.append(line)
    return "".join(description), None


def _read_actions(lines: Iterator[str]) -> list[Action]:
    actions: list[Action] = []
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        actions.append(parse_action(stripped))
    return actions


@dataclass(frozen=True)
class Scene:
    """A description paired with the ordered actions the player can trigger.

    The description is everything in the file before the first line that
    parses as an action, kept verbatim. Every non-blank line after that must
    be an action; the first one matching the player's input wins.
    """

    location: Path
    description: str
    actions: tuple[Action, ...] = ()

    @classmethod
    def load(cls, path: str | Path) -> "Scene":
        """Read and parse the scene file at ``path``.

        Raises:
            OSError: If the file cannot be opened, read or decoded as UTF-8.
            InvalidActionLine: If a line in the action block is malformed.
            InvalidPattern: If an action's regular expression does not compile.
        """

        location = Path(path)
        actions: list[Action] = []
        # Lines end only at "\n" and keep their original line endings.
        with location.open("r", encoding="utf-8", newline="\n") as handle:
            lines = iter(handle)
            try:
                description, first_action = _read_description(lines)
                if first_action is not None:
                    actions.append(first_action)
                    actions.extend(_read_actions(lines))
            except UnicodeDecodeError as exc:
                raise OSError(f"{location}: {exc}") from exc

        return cls(location=location, description=description, actions=tuple(actions))

    def get_action(self, player_input: str) -> Action | None:
        """Return the first action matching ``player_input``, if any."""

        text = player_input.strip()
        for action in self.actions:
            if action.matches(text):
                return action
        return None

    def load_next(self, name: str) -> "Scene":
        """Load the sibling scene called ``name`` as a brand-new scene."""

        return Scene.load(sibling_scene_path(self.location, name))

    @property
    def is_dead_end(self) -> bool:
        """Return ``True`` when no input can ever trigger an action."""

        return not self.actions

    def __str__(self) -> str:
        return self.description


def load_scene(path: str | Path) -> Scene:
    """Convenience wrapper around :meth:`Scene.load`."""

    return Scene.load(path)


__all__ = ["SCENE_SUFFIX", "Scene", "load_scene", "sibling_scene_path"]
