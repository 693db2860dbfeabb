"""Indexing and clustering errors: bad input, degenerate matrices, bad casts."""

from typing import Dict, Optional

from .base import TextMagnetError


class AnalysisError(TextMagnetError):
    """Base class for indexing, query and clustering errors."""
    pass


class InvalidInputError(AnalysisError, ValueError):
    """Raised when a required argument is missing, empty or out of range."""

    def __init__(self, argument: str, reason: str):
        super().__init__(
            f"Invalid input for {argument}: {reason}",
            details={"argument": argument, "reason": reason},
        )
        self.argument = argument
        self.reason = reason


class DegenerateIndexError(AnalysisError):
    """Raised when the word/document matrix is too small to decompose."""

    def __init__(self, reason: str, shape: Optional[tuple] = None):
        details: Dict[str, str] = {"reason": reason}
        if shape is not None:
            details["shape"] = "x".join(str(d) for d in shape)

        super().__init__(f"Cannot build LSI matrix: {reason}", details=details)
        self.reason = reason
        self.shape = shape


class ItemTypeError(AnalysisError, TypeError):
    """Raised when a group or result item is cast to an incompatible type."""

    def __init__(self, item: object, expected: type):
        super().__init__(
            f"Cannot cast {type(item).__name__} to {expected.__name__}",
            details={"item": repr(item), "expected": expected.__name__},
        )
        self.item = item
        self.expected = expected
