"""Two-stack integer sorting with a restricted set of operations."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "sorter", "stack"]