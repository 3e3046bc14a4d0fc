"""Checkie: a checkers player driven by minimax search with alpha-beta pruning."""

__version__ = "0.1.0"
