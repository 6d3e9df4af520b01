"""A string-keyed mapping backed by a ternary search tree."""

__version__ = "0.1.0"
__all__ = ["table"]