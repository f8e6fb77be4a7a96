"""Functions for classic exercises on strings, arrays, matrices, graphs and games."""

__version__ = "0.1.0"

__all__ = ["arrays", "games", "graphs", "matrices", "strings"]