"""Tic-tac-toe with a minimax opponent, two-player matches, per-user history and a terminal command."""

__version__ = "1.0.0"
__all__ = ["game", "ai", "history", "vs_ai", "vs_player", "cli"]