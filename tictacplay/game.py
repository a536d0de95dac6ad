"""Board state and rules for three-by-three tic-tac-toe."""

from __future__ import annotations

from enum import Enum

SIZE = 3

LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    # rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Player(Enum):
    """Occupant of a cell, or whose turn it is."""

    NONE = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> Player:
        """The other mark; NONE has no opponent."""
        if self is Player.X:
            return Player.O
        if self is Player.O:
            return Player.X
        return Player.NONE

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board."""
        return "." if self is Player.NONE else self.name


def _check_cell(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"cell ({row}, {col}) is outside the board")


class Game:
    """A game in progress: the board, whose turn it is and the move count."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Clear the board and give the first move to X."""
        self._board = [[Player.NONE] * SIZE for _ in range(SIZE)]
        self.current_player = Player.X
        self.move_count = 0

    def make_move(self, row: int, col: int) -> bool:
        """Place the current player's mark; return False if the cell is taken."""
        _check_cell(row, col)
        if self._board[row][col] is not Player.NONE:
            return False
        self._board[row][col] = self.current_player
        self.current_player = self.current_player.opponent
        self.move_count += 1
        return True

    def is_win(self, player: Player) -> bool:
        """True if *player* holds a complete row, column or diagonal."""
        board = self._board
        for line in LINES:
            if all(board[r][c] is player for r, c in line):
                return True
        return False

    def is_draw(self) -> bool:
        """True once all nine moves are played without a winner."""
        return self.move_count == SIZE * SIZE and self.winner() is Player.NONE

    def winner(self) -> Player:
        """The winning player, or Player.NONE."""
        for player in (Player.X, Player.O):
            if self.is_win(player):
                return player
        return Player.NONE

    def available_moves(self) -> list[tuple[int, int]]:
        """Empty cells in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self._board)
            for c, cell in enumerate(row)
            if cell is Player.NONE
        ]

    def at(self, row: int, col: int) -> Player:
        """The mark at the given cell."""
        _check_cell(row, col)
        return self._board[row][col]

    def copy(self) -> Game:
        """An independent copy of this game."""
        clone = Game.__new__(Game)
        clone._board = [row[:] for row in self._board]
        clone.current_player = self.current_player
        clone.move_count = self.move_count
        return clone

    def render(self) -> str:
        """The board as text, one line per row, cells followed by a space."""
        return "".join(
            "".join(f"{cell.symbol} " for cell in row) + "\n" for row in self._board
        )

    def __str__(self) -> str:
        return self.render()