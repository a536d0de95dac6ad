"""A human player (X) against the computer (O), with score and history."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from enum import Enum

from .ai import AI
from .game import Game, Player
from .history import GameResult, History, format_history

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
YOUR_TURN = "Your turn!"


class Outcome(Enum):
    """How a game against the computer ended; the value is the result message."""

    PLAYER_WIN = "You win! 🎉"
    AI_WIN = "AI wins! 🤖"
    DRAW = "It's a draw! 🤝"

    @property
    def message(self) -> str:
        """Result text shown to the player and stored in the history."""
        return self.value

    @property
    def status(self) -> str:
        """Short status line for the finished game."""
        return _STATUS[self]


_STATUS = {
    Outcome.PLAYER_WIN: "You won!",
    Outcome.AI_WIN: "AI won!",
    Outcome.DRAW: "Draw!",
}


class AIMatch:
    """A series of games in which the user plays X and the computer plays O."""

    def __init__(
        self,
        username: str,
        history: History | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.username = username
        self.history = history if history is not None else History(username)
        self.ai = AI(Player.O)
        self.game = Game()
        self._clock = clock
        self.player_wins = 0
        self.ai_wins = 0
        self.draws = 0
        self.outcome: Outcome | None = None
        self.last_ai_move: tuple[int, int] | None = None
        self.status = YOUR_TURN

    @property
    def title(self) -> str:
        """Heading naming the user."""
        return f"Player: {self.username} (X)"

    def play(self, row: int, col: int) -> Outcome | None:
        """Make the user's move and the computer's reply.

        Returns the outcome if the game ended, otherwise None. Raises
        ValueError if the game is already over or the cell is taken.
        """
        if self.outcome is not None:
            raise ValueError("the game is over; start a new game")
        if not self.game.make_move(row, col):
            raise ValueError(f"cell ({row}, {col}) is already taken")

        self.last_ai_move = None
        if self._finished():
            return self._end_game()

        move = self.ai.find_best_move(self.game)
        if move is not None:
            self.game.make_move(*move)
            self.last_ai_move = move
        self.status = YOUR_TURN

        if self._finished():
            return self._end_game()
        return None

    def new_game(self) -> None:
        """Clear the board for another game; the score is kept."""
        self.game.reset()
        self.outcome = None
        self.last_ai_move = None
        self.status = YOUR_TURN

    def score_text(self) -> str:
        """The running score line."""
        return f"Wins: {self.player_wins} | AI: {self.ai_wins} | Draws: {self.draws}"

    def history_text(self) -> str:
        """The user's stored game history as text."""
        return format_history(self.history.load_history())

    def _finished(self) -> bool:
        return self.game.winner() is not Player.NONE or self.game.is_draw()

    def _end_game(self) -> Outcome:
        winner = self.game.winner()
        if winner is Player.X:
            outcome = Outcome.PLAYER_WIN
            self.player_wins += 1
        elif winner is Player.O:
            outcome = Outcome.AI_WIN
            self.ai_wins += 1
        else:
            outcome = Outcome.DRAW
            self.draws += 1

        self.outcome = outcome
        self.status = outcome.status
        date = self._clock().strftime(DATE_FORMAT)
        self.history.save_result(GameResult(date, outcome.message))
        return outcome