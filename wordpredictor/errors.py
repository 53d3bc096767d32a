"""
Exceptions raised inside the prediction engine.

Components raise these; only PredictionEngine.predict turns them into
a Failure result.
"""

from typing import Optional


class WordPredictorError(Exception):
    """Base class for all engine errors."""


class ConfigError(WordPredictorError):
    """Raised when an engine configuration is invalid."""


class DataLoadError(WordPredictorError):
    """
    A data file is missing, unreadable, empty or malformed.

    Attributes:
        path: The offending file, when known
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class BackoffTimeout(WordPredictorError):
    """The wall-clock bound on a single prediction was exceeded."""
