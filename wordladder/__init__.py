"""Word ladder solver and terminal game with hints, saved sessions and analytics."""

__version__ = "0.1.0"
__all__ = ["__version__"]