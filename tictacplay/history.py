"""Per-user game result history stored as a simple text file."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GameResult:
    """One finished game: when it was played and how it ended."""

    date: str
    result: str


class History:
    """Appends results to, and reads them from, ``history_<username>.txt``."""

    def __init__(self, username: str, directory: str | os.PathLike[str] = ".") -> None:
        self.username = username
        self.path = Path(directory) / f"history_{username}.txt"

    def save_result(self, result: GameResult) -> None:
        """Append one result as a ``date,result`` line."""
        with self.path.open("a", encoding="utf-8") as out:
            out.write(f"{result.date},{result.result}\n")

    def load_history(self) -> list[GameResult]:
        """All stored results in order; an absent file gives an empty list."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except FileNotFoundError:
            return []

        results = []
        for line in lines:
            date, comma, outcome = line.partition(",")
            if comma and outcome:
                results.append(GameResult(date, outcome))
        return results


def format_history(results: Iterable[GameResult]) -> str:
    """Text listing of results, as shown to the player."""
    lines = [f"{entry.date}: {entry.result}\n" for entry in results]
    return "Game History:\n\n" + ("".join(lines) if lines else "No games played yet!")