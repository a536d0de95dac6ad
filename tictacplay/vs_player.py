"""Two people sharing one board: the user plays X, a second player plays O."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from .game import Game, Player
from .history import GameResult, History, format_history

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_PLAYER2 = "Player 2"
DRAW_MESSAGE = "It's a draw! 🤝"
NEW_GAME_STATUS = "New game started! X goes first."


class PlayerMatch:
    """A series of games between two named players, with score and history."""

    def __init__(
        self,
        username: str,
        player2: str = DEFAULT_PLAYER2,
        history: History | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.username = username
        self.player1_name = username
        self.player2_name = player2.strip() or DEFAULT_PLAYER2
        self.history = history if history is not None else History(username)
        self.game = Game()
        self._clock = clock
        self.player1_wins = 0
        self.player2_wins = 0
        self.draws = 0
        self.result: str | None = None
        self.winner: Player = Player.NONE
        self.status = self._move_prompt()

    @property
    def title(self) -> str:
        """Window-style heading naming both players."""
        return f"Tic Tac Toe - {self.player1_name} vs {self.player2_name}"

    @property
    def matchup(self) -> str:
        """Which player holds which mark."""
        return f"{self.player1_name} (X) vs {self.player2_name} (O)"

    def play(self, row: int, col: int) -> str | None:
        """Place the current player's mark.

        Returns the result message if the move ended the game, otherwise None.
        Raises ValueError if the game is over or the cell is taken.
        """
        if self.result is not None:
            raise ValueError("the game is over; start a new game")
        if not self.game.make_move(row, col):
            raise ValueError(f"cell ({row}, {col}) is already taken")

        if self.game.winner() is not Player.NONE or self.game.is_draw():
            return self._end_game()
        self.status = self._move_prompt()
        return None

    def new_game(self) -> None:
        """Clear the board for another game; the score is kept."""
        self.game.reset()
        self.result = None
        self.winner = Player.NONE
        self.status = NEW_GAME_STATUS

    def turn_text(self) -> str:
        """Whose turn it is, or how the finished game ended."""
        if self.result is not None:
            if self.winner is Player.NONE:
                return "🤝 Draw!"
            return f"🎉 {self._name_of(self.winner)} Wins!"
        current = self.game.current_player
        return f"{self._name_of(current)}'s Turn ({current.name})"

    def score_text(self) -> str:
        """The running score line."""
        return (
            f"{self.player1_name}: {self.player1_wins} | "
            f"{self.player2_name}: {self.player2_wins} | "
            f"Draws: {self.draws}"
        )

    def history_text(self) -> str:
        """The user's stored game history as text."""
        return format_history(self.history.load_history())

    def _name_of(self, player: Player) -> str:
        return self.player1_name if player is Player.X else self.player2_name

    def _move_prompt(self) -> str:
        return f"{self._name_of(self.game.current_player)}, make your move!"

    def _end_game(self) -> str:
        winner = self.game.winner()
        if winner is Player.X:
            self.player1_wins += 1
        elif winner is Player.O:
            self.player2_wins += 1
        else:
            self.draws += 1

        if winner is Player.NONE:
            message = DRAW_MESSAGE
            self.status = "Game ended in a draw!"
        else:
            name = self._name_of(winner)
            message = f"{name} wins! 🎉"
            self.status = f"{name} won the game!"

        self.winner = winner
        self.result = message
        date = self._clock().strftime(DATE_FORMAT)
        self.history.save_result(GameResult(date, message))
        return message