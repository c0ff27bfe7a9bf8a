"""Custom exception classes for similarity and config errors."""

from __future__ import annotations

from pathlib import Path


class SimilarityError(Exception):
    """Base exception for linksim failures."""


class SequenceTypeError(SimilarityError, TypeError):
    """Raised when an argument cannot be compared element by element."""

    def __init__(self, argument: str, value: object):
        super().__init__(
            f"Argument '{argument}' must be a str, bytes or indexable sequence, "
            f"got {type(value).__name__}"
        )
        self.argument = argument
        self.value_type = type(value)


class ConfigError(SimilarityError):
    """Raised when runtime configuration or a reference corpus cannot be loaded."""

    def __init__(self, message: str, path: Path | None = None):
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path
