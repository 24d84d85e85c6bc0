"""A terminal adventure game over a graph of scenarios read from CSV."""

__version__ = "0.1.0"
__all__ = ["csvtools", "hashmap", "game"]