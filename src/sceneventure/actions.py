"""Parsing of action lines into input matchers and their effects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


class SceneError(ValueError):
    """Base class for problems found while reading scene text."""


class InvalidActionLine(SceneError):
    """Raised when a line does not follow the action grammar."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid action line: {line}")
        self.line = line


class InvalidPattern(SceneError):
    """Raised when an action's pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


# ``!<kind>:<pattern> -> <verb> <argument>``. The pattern group is greedy, so
# a pattern containing " -> " is split at the last separator.
ACTION_LINE_PATTERN = re.compile(r"!(\w+):(.*)\s->\s(\w+)\s(.*)")

KEYWORD_KIND = "kw"
SCENE_VERB = "scene"


@dataclass(frozen=True)
class Output:
    """Text shown to the player; the scene stays the same."""

    text: str


@dataclass(frozen=True)
class ChangeScene:
    """Request to continue in the sibling scene called ``name``."""

    name: str


Effect = Union[Output, ChangeScene]


@dataclass(frozen=True)
class Action:
    """A compiled input matcher paired with the effect it triggers."""

    matcher: re.Pattern[str]
    effect: Effect

    def matches(self, text: str) -> bool:
        """Return ``True`` when ``text`` triggers this action."""

        return self.matcher.search(text) is not None


def compile_keyword(keyword: str) -> re.Pattern[str]:
    """Return a matcher accepting exactly ``keyword`` and nothing else."""

    return re.compile(rf"\A{re.escape(keyword)}\Z")


def parse_action(line: str) -> Action:
    """Convert a single trimmed line into an :class:`Action`.

    Raises:
        InvalidActionLine: If ``line`` does not follow the action grammar.
        InvalidPattern: If a non-keyword pattern fails to compile.
    """

    match = ACTION_LINE_PATTERN.fullmatch(line)
    if match is None:
        raise InvalidActionLine(line)

    kind, expression, verb, argument = match.groups()

    if kind == KEYWORD_KIND:
        matcher = compile_keyword(expression)
    else:
        try:
            matcher = re.compile(expression)
        except re.error as exc:
            raise InvalidPattern(expression, str(exc)) from exc

    effect: Effect
    if verb == SCENE_VERB:
        effect = ChangeScene(argument)
    else:
        effect = Output(argument)

    return Action(matcher=matcher, effect=effect)


__all__ = [
    "ACTION_LINE_PATTERN",
    "Action",
    "ChangeScene",
    "Effect",
    "InvalidActionLine",
    "InvalidPattern",
    "Output",
    "SceneError",
    "compile_keyword",
    "parse_action",
]
