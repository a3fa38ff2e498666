"""Tic-tac-toe board, server connection and pygame drawing for a networked game."""

__version__ = "0.1.0"