"""
Engine Configuration

Settings shared by the n-gram store, the scorer and the backoff
controller. Defaults match the deployed predictor: ephemeral memory
mode, single-term scoring, 800,000-record samples.
"""

import json
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Any

from .errors import ConfigError
from .scoring import ScoringMethod


class MemoryMode(Enum):
    """How loaded n-gram files are kept between calls."""
    RESIDENT = "resident"     # read each file once, keep the full copy
    EPHEMERAL = "ephemeral"   # re-read on every load, drop on release


DEFAULT_NGRAM_FILES: Dict[int, str] = {
    2: "bigram.txt",
    3: "trigram.txt",
    4: "quadgram.txt",
    5: "pentagram.txt",
    6: "sextagram.txt",
}

TERM_FREQ_VECTOR_FILE = "term_freq_vector.txt"
TERM_FREQ_NAMES_FILE = "term_freq_names.txt"

MAX_CONTEXT_WORDS = 5


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for a PredictionEngine.

    Attributes:
        data_dir: Directory holding the n-gram and frequency files
        memory_mode: Resident or ephemeral corpus residency
        scoring_method: Which scoring strategy ranks candidates
        max_context_words: Size of the sliding context window (1-5)
        ngram_sample_size: Records sampled per load; also the score denominator
        match_sample_size: Matches kept before scoring
        max_predictions: Number of words returned in a ranked result
        resample: Take a fresh sample on every load (resident mode only)
        seed: Seed for the engine's random generator
        max_backoff_seconds: Optional wall-clock bound on one prediction
    """
    data_dir: str = "."
    memory_mode: MemoryMode = MemoryMode.EPHEMERAL
    scoring_method: ScoringMethod = ScoringMethod.SINGLE_TERM
    max_context_words: int = MAX_CONTEXT_WORDS
    ngram_sample_size: int = 800000
    match_sample_size: int = 150
    max_predictions: int = 5
    resample: bool = True
    seed: Optional[int] = None
    max_backoff_seconds: Optional[float] = None
    ngram_files: Dict[int, str] = field(default_factory=lambda: dict(DEFAULT_NGRAM_FILES))
    freq_vector_file: str = TERM_FREQ_VECTOR_FILE
    freq_names_file: str = TERM_FREQ_NAMES_FILE

    def __post_init__(self):
        for name in ('ngram_sample_size', 'match_sample_size', 'max_predictions'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        words = self.max_context_words
        if not isinstance(words, int) or isinstance(words, bool) or not 1 <= words <= MAX_CONTEXT_WORDS:
            raise ConfigError(
                f"max_context_words must be an integer between 1 and {MAX_CONTEXT_WORDS}, "
                f"got {words!r}"
            )

        seconds = self.max_backoff_seconds
        if seconds is not None and (not isinstance(seconds, (int, float))
                                    or isinstance(seconds, bool) or seconds <= 0):
            raise ConfigError(f"max_backoff_seconds must be a positive number, got {seconds!r}")

        missing = set(DEFAULT_NGRAM_FILES) - set(self.ngram_files)
        if missing:
            raise ConfigError(f"No file name configured for orders {sorted(missing)}")

    def path_for(self, order: int) -> Path:
        """Return the n-gram file for an order (2..6)."""
        return Path(self.data_dir) / self.ngram_files[order]

    def frequency_paths(self) -> Tuple[Path, Path]:
        """Return (counts file, names file) of the term frequency table."""
        base = Path(self.data_dir)
        return base / self.freq_vector_file, base / self.freq_names_file

    def with_overrides(self, **changes) -> 'EngineConfig':
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineConfig':
        """
        Build a configuration from a plain mapping.

        Enum fields accept their string values ("resident", "paired", ...)
        and `ngram_files` accepts string keys, as JSON produces them.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        values = dict(data)
        try:
            if 'memory_mode' in values:
                values['memory_mode'] = MemoryMode(values['memory_mode'])
            if 'scoring_method' in values:
                values['scoring_method'] = ScoringMethod.from_name(values['scoring_method'])
        except ValueError as e:
            raise ConfigError(str(e)) from e

        if 'ngram_files' in values:
            files = dict(DEFAULT_NGRAM_FILES)
            try:
                files.update({int(k): v for k, v in values['ngram_files'].items()})
            except (AttributeError, TypeError, ValueError) as e:
                raise ConfigError(
                    f"ngram_files must map orders 2-6 to file names, got {values['ngram_files']!r}"
                ) from e
            values['ngram_files'] = files

        return cls(**values)

    @classmethod
    def from_json(cls, path: str) -> 'EngineConfig':
        """Load a configuration from a JSON file."""
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        return cls.from_dict(data)
