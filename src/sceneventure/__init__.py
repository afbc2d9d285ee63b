"""Interactive adventures driven by plain-text scene files."""

from .actions import (
    Action,
    ChangeScene,
    Effect,
    InvalidActionLine,
    InvalidPattern,
    Output,
    SceneError,
    parse_action,
)
from .adventure import Adventure, AdventureError, demo_adventure_path, search_adventures
from .scene import SCENE_SUFFIX, Scene, load_scene, sibling_scene_path
from .session import SceneSession, TurnOutcome
from .settings import SceneventureSettings
from .transcript import TranscriptLogger

__all__ = [
    "Action",
    "ChangeScene",
    "Effect",
    "InvalidActionLine",
    "InvalidPattern",
    "Output",
    "SceneError",
    "parse_action",
    "Scene",
    "SCENE_SUFFIX",
    "load_scene",
    "sibling_scene_path",
    "SceneSession",
    "TurnOutcome",
    "Adventure",
    "AdventureError",
    "demo_adventure_path",
    "search_adventures",
    "SceneventureSettings",
    "TranscriptLogger",
]
