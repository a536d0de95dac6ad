"""Command-line front end: choose a game mode and play in the terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

from .history import History
from .vs_ai import AIMatch
from .vs_player import DEFAULT_PLAYER2, PlayerMatch

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MOVE_PROMPT = "Move (row col), 'n' new game, 'h' history, 'q' back: "
AGAIN_PROMPT = "Would you like to play again? [Y/n] "
MODE_PROMPT = "Choose 1) play vs AI, 2) play vs player, or 'q' to quit: "

_QUIT = {"q", "quit", "b", "back"}
_HISTORY = {"h", "history"}
_NEW_GAME = {"n", "new"}
_YES = {"", "y", "yes"}


class GameMode(Enum):
    """Who the user plays against."""

    AI = "ai"
    PLAYER = "player"


def parse_move(text: str) -> tuple[int, int]:
    """Parse ``"row col"`` or ``"row,col"`` (each 1 to 3) into 0-based indices."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"expected a row and a column, got {text!r}")
    try:
        row, col = (int(part) for part in parts)
    except ValueError:
        raise ValueError(f"row and column must be numbers, got {text!r}") from None
    if not (1 <= row <= 3 and 1 <= col <= 3):
        raise ValueError(f"row and column must be between 1 and 3, got {text!r}")
    return row - 1, col - 1


def _read(input_fn: InputFn, prompt: str) -> str | None:
    try:
        return input_fn(prompt)
    except EOFError:
        return None


def _ask_again(input_fn: InputFn) -> bool:
    answer = _read(input_fn, AGAIN_PROMPT)
    return answer is not None and answer.strip().lower() in _YES


def run_ai_match(
    username: str,
    history: History | None,
    input_fn: InputFn,
    output_fn: OutputFn,
) -> AIMatch:
    """Play games against the computer until the user goes back."""
    match = AIMatch(username, history)
    output_fn(match.title)
    output_fn(match.score_text())
    while True:
        output_fn(match.game.render())
        output_fn(match.status)
        line = _read(input_fn, MOVE_PROMPT)
        if line is None:
            break
        command = line.strip().lower()
        if command in _QUIT:
            break
        if command in _HISTORY:
            output_fn(match.history_text())
            continue
        if command in _NEW_GAME:
            match.new_game()
            continue
        try:
            outcome = match.play(*parse_move(command))
        except ValueError as exc:
            output_fn(f"Invalid move: {exc}")
            continue
        if match.last_ai_move is not None:
            row, col = match.last_ai_move
            output_fn(f"AI plays {row + 1} {col + 1}")
        if outcome is None:
            continue
        output_fn(match.game.render())
        output_fn(outcome.message)
        output_fn(match.score_text())
        if not _ask_again(input_fn):
            break
        match.new_game()
    return match


def run_player_match(
    username: str,
    player2: str,
    history: History | None,
    input_fn: InputFn,
    output_fn: OutputFn,
) -> PlayerMatch:
    """Play games between two people at one terminal until they go back."""
    match = PlayerMatch(username, player2, history)
    output_fn(match.matchup)
    output_fn(match.score_text())
    while True:
        output_fn(match.game.render())
        output_fn(match.turn_text())
        output_fn(match.status)
        line = _read(input_fn, MOVE_PROMPT)
        if line is None:
            break
        command = line.strip().lower()
        if command in _QUIT:
            break
        if command in _HISTORY:
            output_fn(match.history_text())
            continue
        if command in _NEW_GAME:
            match.new_game()
            continue
        try:
            result = match.play(*parse_move(command))
        except ValueError as exc:
            output_fn(f"Invalid move: {exc}")
            continue
        if result is None:
            continue
        output_fn(match.game.render())
        output_fn(result)
        output_fn(match.score_text())
        if not _ask_again(input_fn):
            break
        match.new_game()
    return match


def _choose_mode(username: str, input_fn: InputFn, output_fn: OutputFn) -> GameMode | None:
    output_fn("CHOOSE GAME MODE")
    output_fn(f"Welcome, {username}!")
    while True:
        answer = _read(input_fn, MODE_PROMPT)
        if answer is None:
            return None
        choice = answer.strip().lower()
        if choice in _QUIT:
            return None
        if choice in {"1", "ai"}:
            return GameMode.AI
        if choice in {"2", "player"}:
            return GameMode.PLAYER
        output_fn("Please choose 1 or 2.")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``tictacplay`` command."""
    parser = argparse.ArgumentParser(
        prog="tictacplay", description="Play tic-tac-toe in the terminal."
    )
    parser.add_argument("username", help="name of the player, used for the history file")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        help="play against the AI or another player (asked when omitted)",
    )
    parser.add_argument("--player2", help="name of the second player")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the history files"
    )
    args = parser.parse_args(argv)

    data_dir = Path(args.data_dir)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        print(
            "Could not create application data directory.\n"
            "The application may not function properly.",
            file=sys.stderr,
        )

    history = History(args.username, data_dir)
    if args.mode is not None:
        mode: GameMode | None = GameMode(args.mode)
    else:
        mode = _choose_mode(args.username, input, print)
    if mode is None:
        return 0

    if mode is GameMode.AI:
        run_ai_match(args.username, history, input, print)
        return 0

    player2 = args.player2
    if player2 is None:
        player2 = _read(input, "Enter Player 2 name: ") or DEFAULT_PLAYER2
    run_player_match(args.username, player2, history, input, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())