"""A lane-based lawn defense game: plant defenders, stop the zombie waves."""

__version__ = "0.1.0"
__all__ = ["constants", "framework", "sprites", "objects", "world", "manager"]