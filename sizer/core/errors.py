# sizer/core/errors.py
from __future__ import annotations


class SizingError(ValueError):
    """Base class for errors raised by the sizing core."""


class InvalidSizingInput(SizingError):
    """A row count, row size, volume or pricing input is not usable."""


class ScenarioFileError(SizingError):
    """A scenario file is missing, unreadable or has the wrong shape."""
