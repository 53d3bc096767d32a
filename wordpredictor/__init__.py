"""
Next Word Prediction Package

Predicts the most probable next words of a phrase from precomputed
n-gram tables (orders 2 to 6) and a term frequency table, backing off
to shorter contexts when a longer one has no match.
"""

from .config import EngineConfig, MemoryMode
from .engine import (
    PredictionEngine, EngineResult, Invalid, NoPrediction, Ranked, Failure
)
from .errors import WordPredictorError, ConfigError, DataLoadError, BackoffTimeout
from .normalizer import BAD_INPUT, normalize
from .scoring import ScoringMethod
from .store import GramOrder

__version__ = "0.1.0"
__all__ = [
    "EngineConfig", "MemoryMode", "ScoringMethod", "GramOrder",
    "PredictionEngine", "EngineResult", "Invalid", "NoPrediction", "Ranked", "Failure",
    "WordPredictorError", "ConfigError", "DataLoadError", "BackoffTimeout",
    "BAD_INPUT", "normalize",
]
