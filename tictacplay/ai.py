"""Computer opponent using minimax with alpha-beta pruning."""

from __future__ import annotations

from .game import LINES, Game, Player

_NEG_INF = -(10**9)
_POS_INF = 10**9
_CORNERS = ((0, 0), (0, 2), (2, 0), (2, 2))
_MAX_DEPTH = 9


def _completes_line(game: Game, row: int, col: int, player: Player) -> bool:
    """True if *player* placing a mark at (row, col) would complete a line."""
    target = (row, col)

    def mark(cell: tuple[int, int]) -> Player:
        return player if cell == target else game.at(*cell)

    return any(
        all(mark(cell) is player for cell in line)
        for line in LINES
        if target in line
    )


class AI:
    """Chooses moves for one side of the game."""

    def __init__(self, player: Player) -> None:
        if player is Player.NONE:
            raise ValueError("the AI must play X or O")
        self.player = player

    def find_best_move(self, game: Game) -> tuple[int, int] | None:
        """The cell to play next, or None when the board is full."""
        moves = game.available_moves()
        if not moves:
            return None
        if len(moves) == 1:
            return moves[0]

        for move in moves:
            trial = game.copy()
            trial.make_move(*move)
            if trial.winner() is self.player:
                return move

        opponent = self.player.opponent
        for move in moves:
            if _completes_line(game, *move, opponent):
                return move

        best_move, best_value = moves[0], _NEG_INF
        for move in moves:
            trial = game.copy()
            trial.make_move(*move)
            value = self._minimax(trial, _NEG_INF, _POS_INF, 0)
            if value > best_value:
                best_value, best_move = value, move
        return best_move

    def _minimax(self, game: Game, alpha: int, beta: int, depth: int) -> int:
        winner = game.winner()
        if winner is self.player:
            return 10 - depth
        if winner is not Player.NONE:
            return depth - 10
        if game.is_draw():
            return 0
        if depth > _MAX_DEPTH:
            return 0

        maximizing = game.current_player is self.player
        best = _NEG_INF if maximizing else _POS_INF
        for move in game.available_moves():
            trial = game.copy()
            trial.make_move(*move)
            value = self._minimax(trial, alpha, beta, depth + 1)
            if maximizing:
                best = max(best, value)
                alpha = max(alpha, value)
            else:
                best = min(best, value)
                beta = min(beta, value)
            if beta <= alpha:
                break
        return best

    def _cell_score(self, cell: Player, weight: int) -> int:
        if cell is self.player:
            return weight
        if cell is not Player.NONE:
            return -weight
        return 0

    def evaluate_position(self, game: Game) -> int:
        """Heuristic score: centre and corners held, plus line potential."""
        score = self._cell_score(game.at(1, 1), 3)
        score += sum(self._cell_score(game.at(*corner), 2) for corner in _CORNERS)
        return score + self.evaluate_lines(game)

    def evaluate_lines(self, game: Game) -> int:
        """Score each row, column and diagonal by how many marks each side holds."""
        score = 0
        for line in LINES:
            cells = [game.at(*cell) for cell in line]
            own = sum(cell is self.player for cell in cells)
            empty = sum(cell is Player.NONE for cell in cells)
            other = len(cells) - own - empty

            if own == 3:
                score += 100
            elif own == 2 and empty == 1:
                score += 10
            elif own == 1 and empty == 2:
                score += 1

            if other == 3:
                score -= 100
            elif other == 2 and empty == 1:
                score -= 10
            elif other == 1 and empty == 2:
                score -= 1
        return score