"""Command-line entry point for playing scene-file adventures."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from sceneventure import (
    Adventure,
    AdventureError,
    SceneError,
    SceneSession,
    SceneventureSettings,
    TranscriptLogger,
    demo_adventure_path,
    search_adventures,
)
from sceneventure.settings import DEFAULT_PROMPT


def _read_line(input_stream: TextIO, output_stream: TextIO, prompt: str) -> str | None:
    """Prompt for and return one line of input, or ``None`` at end of input."""

    output_stream.write(prompt)
    output_stream.flush()
    line = input_stream.readline()
    if not line:
        return None
    return line


def _select_adventure(
    adventures: Sequence[Adventure],
    input_stream: TextIO,
    output_stream: TextIO,
    prompt: str,
) -> Adventure | None:
    """Ask the player to pick one of several adventures by number."""

    output_stream.write("Please select an adventure by number:\n")
    for index, adventure in enumerate(adventures, start=1):
        output_stream.write(f"{index}: {adventure}\n")

    while True:
        line = _read_line(input_stream, output_stream, prompt)
        if line is None:
            return None
        try:
            choice = int(line.strip())
        except ValueError:
            choice = 0
        if 1 <= choice <= len(adventures):
            return adventures[choice - 1]
        output_stream.write(
            f"Please select a valid number (1 to {len(adventures)})!\n"
        )


def _start_session(
    path: Path,
    input_stream: TextIO,
    output_stream: TextIO,
    prompt: str,
) -> SceneSession | None:
    """Open ``path`` as a scene file, or search it for adventures."""

    if not path.is_dir():
        return SceneSession.start(path)

    adventures = search_adventures(path)
    if not adventures:
        raise AdventureError("no adventures found")

    if len(adventures) == 1:
        adventure = adventures[0]
        output_stream.write(f"Starting adventure: {adventure}\n\n")
    else:
        selected = _select_adventure(adventures, input_stream, output_stream, prompt)
        if selected is None:
            output_stream.write("\n")
            return None
        adventure = selected

    return SceneSession(adventure.start_scene())


def run_cli(
    path: Path,
    input_stream: TextIO,
    output_stream: TextIO,
    *,
    prompt: str = DEFAULT_PROMPT,
    transcript_logger: TranscriptLogger | None = None,
) -> None:
    """Play the adventure at ``path`` until the input stream is exhausted.

    ``path`` may be a single scene file or a directory to search for
    adventures. Errors while loading the starting scene propagate; a failed
    transition is reported and play continues in the current scene.
    """

    session = _start_session(path, input_stream, output_stream, prompt)
    if session is None:
        return

    if transcript_logger is not None:
        transcript_logger.log_scene(session.scene)
    output_stream.write(session.scene.description)
    output_stream.flush()

    while True:
        line = _read_line(input_stream, output_stream, prompt)
        if line is None:
            output_stream.write("\n")
            output_stream.flush()
            break

        player_input = line.strip()
        if transcript_logger is not None:
            transcript_logger.log_player_input(player_input)

        try:
            outcome = session.respond(player_input)
        except (OSError, SceneError) as exc:
            output_stream.write(f"Error: {exc}\n")
            if transcript_logger is not None:
                transcript_logger.log_error(str(exc))
            continue

        if outcome.scene_changed:
            if transcript_logger is not None:
                transcript_logger.log_scene(session.scene)
            output_stream.write(session.scene.description)
            output_stream.flush()
            continue

        if transcript_logger is not None:
            transcript_logger.log_output(outcome.text)
        if outcome.text is not None:
            output_stream.write(f"{outcome.text}\n")


def _parse_args(
    argv: Sequence[str] | None, settings: SceneventureSettings
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play an adventure made of plain-text scene files."
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=settings.start_path,
        help=(
            "Scene file to start from, or directory to search for adventures. "
            "Defaults to SCENEVENTURE_PATH or the current directory."
        ),
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play the bundled kitten adventure instead of PATH.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=settings.log_file,
        help="Path to a transcript log capturing player input and narration.",
    )
    parser.add_argument(
        "--prompt",
        default=settings.prompt,
        help="Prompt shown while waiting for input (default: '> ').",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Start playing the configured adventure on stdin/stdout."""

    settings = SceneventureSettings.from_env()
    args = _parse_args(argv, settings)
    path: Path = demo_adventure_path() if args.demo else args.path

    log_handle: TextIO | None = None
    transcript_logger: TranscriptLogger | None = None
    try:
        if args.log_file is not None:
            args.log_file.parent.mkdir(parents=True, exist_ok=True)
            log_handle = args.log_file.open("a", encoding="utf-8")
            transcript_logger = TranscriptLogger(log_handle)

        run_cli(
            path,
            sys.stdin,
            sys.stdout,
            prompt=args.prompt,
            transcript_logger=transcript_logger,
        )
    except (OSError, SceneError, AdventureError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    finally:
        if log_handle is not None:
            log_handle.close()


if __name__ == "__main__":
    main()
