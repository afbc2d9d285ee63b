"""Transcript recording for play sessions."""

from __future__ import annotations

from typing import TextIO

from .scene import Scene


class TranscriptLogger:
    """Structured writer that records play transcripts for debugging."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._turn = 0

    def log_scene(self, scene: Scene) -> None:
        """Record that ``scene`` became the live scene."""

        self._write("")
        self._write(f"=== Scene {scene.location.name} ===")
        for line in scene.description.splitlines() or ("",):
            self._write(f"  {line}")
        if scene.is_dead_end:
            self._write("Actions: none (dead end)")
        else:
            self._write(f"Actions: {len(scene.actions)}")
        self._stream.flush()

    def log_player_input(self, text: str) -> None:
        """Record the player's latest line of input."""

        self._turn += 1
        formatted = text if text else "(empty)"
        self._write(f"[{self._turn}] Player input: {formatted}")
        self._stream.flush()

    def log_output(self, text: str | None) -> None:
        """Record the text shown in response, if any."""

        if text is None:
            self._write("    (no matching action)")
        else:
            self._write(f"    Output: {text}")
        self._stream.flush()

    def log_error(self, message: str) -> None:
        self._write(f"    Error: {message}")
        self._stream.flush()

    def _write(self, text: str) -> None:
        self._stream.write(f"{text}\n")


__all__ = ["TranscriptLogger"]
