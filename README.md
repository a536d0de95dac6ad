# tictacplay

Tic-tac-toe for the terminal. You can play against a computer opponent that
searches the whole game tree, or against a friend at the same keyboard. Every
finished game is added to a history file for the named player.

## Installation

```
pip install .
```

## Playing

Start the game with your name:

```
tictacplay alice
```

Options:

- `--mode ai` or `--mode player` picks the game mode. Without it you are asked
  to choose `1` (against the AI) or `2` (against another player).
- `--player2 NAME` names the second player in a two-player match. Without it
  you are asked for a name. An empty name becomes `Player 2`.
- `--data-dir DIR` is the directory that holds the history files. The default
  is the current directory, and the directory is created if it is missing.

During a game, give a move as a row and a column, each from 1 to 3, separated
by a space or a comma. For example, `2 2` is the centre. Other commands:

- `n` or `new` starts a new game. The score is kept.
- `h` or `history` shows your stored results.
- `q` or `back` leaves the match.

Against the computer you play X and the computer plays O. In a two-player match
the first player (the name given on the command line) is X and the second player
is O. When a game ends you are asked whether to play again.

Results are appended to `history_<username>.txt` in the data directory, one
`date,result` line per game. The date has the form `YYYY-MM-DD hh:mm:ss`.

## Using the library

```python
from tictacplay.game import Game, Player
from tictacplay.ai import AI

game = Game()
game.make_move(0, 0)            # X takes a corner (rows and columns are 0-based here)
move = AI(Player.O).find_best_move(game)
print(move)                     # (1, 1)
```

Modules:

- `tictacplay.game` provides `Game` and `Player`. It tracks the board and whose
  turn it is, and detects wins and draws. `make_move` returns `False` for a
  taken cell and raises `IndexError` for a cell off the board. `render()` draws
  the board as text.
- `tictacplay.ai` provides `AI`. Its `find_best_move` takes a winning move first
  and blocks the opponent next. Otherwise it runs minimax with alpha-beta
  pruning. It returns `None` when the board is full. `evaluate_position` and
  `evaluate_lines` give heuristic scores for a board.
- `tictacplay.history` provides `History`, `GameResult` and `format_history`
  for reading and writing per-user result files.
- `tictacplay.vs_ai` provides `AIMatch` and `Outcome`. `AIMatch` is a series of
  games against the computer that keeps score and records results.
- `tictacplay.vs_player` provides `PlayerMatch`, a two-player series that keeps
  score and records results.
- `tictacplay.cli` provides `main`, `parse_move`, `run_ai_match`,
  `run_player_match` and `GameMode`. `main` is the `tictacplay` command.

## What it does not do

- There are no user accounts. The name given on the command line is used as-is
  to pick the history file. There is no registration, login or password check.
- There is no graphical interface. The game is played entirely in the terminal.

## Running the tests

```
pip install .[test]
pytest
```