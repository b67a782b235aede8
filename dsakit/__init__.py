"""Classic algorithm exercises: notation conversion, maze paths and binary trees."""

__version__ = "0.1.0"
__all__ = ["maze", "notation", "trees"]