"""Error taxonomy for maze generation.

Every precondition violation raises immediately; nothing here is retried.
``code`` is a short machine-readable tag, ``message`` the human text.
"""
from __future__ import annotations


class MazeError(Exception):
    code = "maze"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidSizeError(MazeError):
    """Grid size unusable for the requested operation (even or zero axis)."""
    code = "size"


class InvalidDimensionError(MazeError):
    code = "dimension"


class MazeConfigError(MazeError):
    """Parameter out of its documented range (percent, bug, border width)."""
    code = "config"


class MazeBoundsError(MazeError):
    code = "bounds"


class NoFreeCellError(MazeError):
    code = "no_free_cell"


class UnknownStepError(MazeError):
    code = "unknown_step"


__all__ = [
    "MazeError",
    "InvalidSizeError",
    "InvalidDimensionError",
    "MazeConfigError",
    "MazeBoundsError",
    "NoFreeCellError",
    "UnknownStepError",
]
