"""Configuration helpers for the command-line player."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_PROMPT = "> "


def _normalise_path(value: str | None) -> Path | None:
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    return Path(trimmed).expanduser()


@dataclass(frozen=True)
class SceneventureSettings:
    """Runtime settings read from the environment.

    Empty strings are treated as if the variable was unset and paths are
    expanded to support ``~`` prefixes. Command-line flags take precedence
    over these values.
    """

    start_path: Path = Path(".")
    log_file: Path | None = None
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None
    ) -> "SceneventureSettings":
        """Return settings populated from ``environ``.

        Args:
            environ: Optional mapping of environment variables. When omitted,
                :data:`os.environ` is used.
        """

        source = environ if environ is not None else os.environ

        start_path = _normalise_path(source.get("SCENEVENTURE_PATH")) or Path(".")
        log_file = _normalise_path(source.get("SCENEVENTURE_LOG_FILE"))

        # Trailing spaces are significant in a prompt, so only blank values
        # fall back to the default.
        prompt = source.get("SCENEVENTURE_PROMPT")
        if prompt is None or not prompt.strip():
            prompt = DEFAULT_PROMPT

        return cls(start_path=start_path, log_file=log_file, prompt=prompt)


__all__ = ["DEFAULT_PROMPT", "SceneventureSettings"]
