"""A terminal detective game of suspects, clues and guesses, with ANSI drawing helpers."""

__version__ = "0.1.0"