"""Drive a single live scene in response to player input."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .actions import ChangeScene, Output
from .scene import Scene


@dataclass(frozen=True)
class TurnOutcome:
    """What the player should see after a line of input.

    ``text`` is ``None`` when the input matched no action. When
    ``scene_changed`` is set the text is the description of the new scene.
    """

    text: str | None = None
    scene_changed: bool = False


class SceneSession:
    """Hold the current scene and replace it when a transition is triggered."""

    def __init__(self, scene: Scene) -> None:
        self._scene = scene

    @classmethod
    def start(cls, path: str | Path) -> "SceneSession":
        """Create a session positioned on the scene file at ``path``."""

        return cls(Scene.load(path))

    @property
    def scene(self) -> Scene:
        return self._scene

    def respond(self, player_input: str) -> TurnOutcome:
        """Apply the first action matching ``player_input``.

        A failed transition raises and leaves the current scene untouched.
        """

        action = self._scene.get_action(player_input)
        if action is None:
            return TurnOutcome()

        effect = action.effect
        if isinstance(effect, Output):
            return TurnOutcome(text=effect.text)
        if isinstance(effect, ChangeScene):
            next_scene = self._scene.load_next(effect.name)
            self._scene = next_scene
            return TurnOutcome(text=next_scene.description, scene_changed=True)

        raise TypeError(f"unsupported effect: {effect!r}")


__all__ = ["SceneSession", "TurnOutcome"]
