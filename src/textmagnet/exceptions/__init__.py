"""Exception hierarchy for textmagnet."""

from .analysis import (
    AnalysisError,
    DegenerateIndexError,
    InvalidInputError,
    ItemTypeError,
)
from .base import TextMagnetError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "TextMagnetError",
    "AnalysisError",
    "InvalidInputError",
    "DegenerateIndexError",
    "ItemTypeError",
    "ConfigurationError",
    "InvalidConfigError",
]
