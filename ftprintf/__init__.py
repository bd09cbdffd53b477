"""A minimal printf with number, character, string, memory and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "numconv", "output", "printf", "strings"]