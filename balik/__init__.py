"""Balik: a Go Fish card game played in the terminal against the computer."""

__version__ = "0.1.0"
__all__ = ["cards", "game"]