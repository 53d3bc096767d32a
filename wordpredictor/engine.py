"""
Next-Word Prediction Engine

The backoff controller. A normalized context picks the starting n-gram
order (one word searches bigrams, five words search sextagrams). When an
order yields no match, the leftmost search word is dropped and the next
lower order is tried, down to bigrams. Candidates are always scored
against the full normalized context, however far the search backed off.

All corpus state lives on the PredictionEngine instance; one lock
serializes predictions that share an engine.
"""

import logging
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .config import EngineConfig
from .errors import BackoffTimeout, WordPredictorError
from .frequency import FrequencyTable
from .matcher import match
from .normalizer import BAD_INPUT, NormalizedContext, normalize
from .scoring import Candidate, get_scorer
from .store import GramOrder, NGramStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invalid:
    """The input was rejected before any data was touched."""
    message: str = BAD_INPUT


@dataclass(frozen=True)
class NoPrediction:
    """Valid input, but no order down to bigrams produced a match."""
    orders_tried: Tuple[GramOrder, ...] = ()


@dataclass(frozen=True)
class Ranked:
    """
    Up to `max_predictions` candidates, highest score first.

    Attributes:
        predictions: (word, score) pairs
        order: The order whose grams matched
        context: The full normalized context used for scoring
        search_context: The backed-off context that matched
        orders_tried: Every order searched, in backoff order
    """
    predictions: Tuple[Candidate, ...]
    order: GramOrder
    context: Tuple[str, ...] = ()
    search_context: Tuple[str, ...] = ()
    orders_tried: Tuple[GramOrder, ...] = ()

    @property
    def words(self) -> List[str]:
        return [word for word, _ in self.predictions]

    @property
    def scores(self) -> List[float]:
        return [score for _, score in self.predictions]


@dataclass(frozen=True)
class Failure:
    """A data or I/O problem aborted the prediction."""
    reason: str
    orders_tried: Tuple[GramOrder, ...] = ()


EngineResult = Union[Invalid, NoPrediction, Ranked, Failure]


@dataclass
class _Run:
    """Bookkeeping for one prediction call."""
    anchor: NormalizedContext
    deadline: Optional[float] = None
    orders_tried: List[GramOrder] = field(default_factory=list)


class PredictionEngine:
    """
    Predicts the next word of a phrase from n-gram and term frequency files.

    Attributes:
        config: Engine configuration
        rng: Random generator shared by the store and the scorer
        store: Per-order n-gram samples
        scorer: Active scoring strategy
        frequencies: Term frequency table, loaded on first use
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.rng = random.Random(self.config.seed)
        self.store = NGramStore(self.config, rng=self.rng)
        self.scorer = get_scorer(
            self.config.scoring_method,
            denominator=self.config.ngram_sample_size,
            match_sample_size=self.config.match_sample_size,
            rng=self.rng
        )
        self.frequencies: Optional[FrequencyTable] = None

        self._active_order: Optional[GramOrder] = None
        self._frozen_matches: Dict[Tuple[GramOrder, Tuple[str, ...]], List[str]] = {}
        self._lock = threading.Lock()

    def load_frequencies(self) -> FrequencyTable:
        """Load the term frequency table once per engine."""
        if self.frequencies is None:
            counts_path, names_path = self.config.frequency_paths()
            self.frequencies = FrequencyTable.load(counts_path, names_path)
            logger.debug("Term frequency table ready: %d terms", len(self.frequencies))
        return self.frequencies

    def _switch_to(self, order: GramOrder) -> List[str]:
        if self._active_order is not None:
            self.store.release(self._active_order)
            self._active_order = None
        grams = self.store.load(order)
        self._active_order = order
        return grams

    def _release_active(self) -> None:
        if self._active_order is not None:
            self.store.release(self._active_order)
            self._active_order = None

    def _check_deadline(self, run: _Run) -> None:
        if run.deadline is not None and time.monotonic() > run.deadline:
            logger.warning("Prediction exceeded %.2fs after orders %s",
                           self.config.max_backoff_seconds,
                           [o.value for o in run.orders_tried])
            raise BackoffTimeout(
                f"Prediction exceeded {self.config.max_backoff_seconds}s"
            )

    def _frozen_subsample(self, order: GramOrder, search_context, matches: List[str]) -> List[str]:
        # A frozen store must also draw the same match subsample every time
        if not self.store.frozen or len(matches) <= self.config.match_sample_size:
            return matches
        key = (order, tuple(search_context))
        if key not in self._frozen_matches:
            self._frozen_matches[key] = self.rng.sample(matches, self.config.match_sample_size)
        return self._frozen_matches[key]

    def _backoff(self, run: _Run) -> EngineResult:
        anchor = run.anchor
        order = GramOrder.for_context_length(min(len(anchor), GramOrder.SEXTAGRAM.context_length))

        while True:
            self._check_deadline(run)
            frequencies = self.load_frequencies()
            grams = self._switch_to(order)

            search_context = anchor.last(order.context_length)
            run.orders_tried.append(order)
            matches = match(search_context, grams)
            logger.debug("%s search for %r: %d matches",
                         order.name.lower(), " ".join(search_context), len(matches))

            if not matches:
                lower = order.lower()
                if lower is None:
                    return NoPrediction(tuple(run.orders_tried))
                logger.debug("Backing off from %s to %s", order.name.lower(), lower.name.lower())
                order = lower
                continue

            matches = self._frozen_subsample(order, search_context, matches)
            ranked = self.scorer.score(matches, anchor.tokens, frequencies)
            top = ranked[:self.config.max_predictions]
            if not top:
                return NoPrediction(tuple(run.orders_tried))

            return Ranked(
                predictions=tuple(top),
                order=order,
                context=anchor.tokens,
                search_context=tuple(search_context),
                orders_tried=tuple(run.orders_tried)
            )

    def predict(self, text) -> EngineResult:
        """
        Predict the next words for a phrase.

        Args:
            text: Raw user input

        Returns:
            Invalid, NoPrediction, Ranked or Failure
        """
        context = normalize(text, self.config.max_context_words)
        if context is None:
            return Invalid()

        with self._lock:
            run = _Run(anchor=context)
            if self.config.max_backoff_seconds is not None:
                run.deadline = time.monotonic() + self.config.max_backoff_seconds

            try:
                return self._backoff(run)
            except WordPredictorError as e:
                logger.error("Prediction for %r failed: %s", context.text, e)
                self._release_active()
                return Failure(str(e), tuple(run.orders_tried))

    def predict_words(self, text) -> Union[str, List[str]]:
        """
        Words only, as a front end shows them: BAD_INPUT for rejected
        input, an empty list when there is nothing to show.
        """
        result = self.predict(text)
        if isinstance(result, Invalid):
            return result.message
        if isinstance(result, Ranked):
            return result.words
        return []

    def release(self) -> None:
        """Drop every loaded n-gram sample (and cached files in ephemeral mode)."""
        with self._lock:
            self._active_order = None
            self.store.release_all()

    def stats(self) -> Dict:
        return {
            'memory_mode': self.config.memory_mode.value,
            'scoring_method': self.config.scoring_method.value,
            'store': self.store.stats(),
            'frequencies': self.frequencies.stats() if self.frequencies is not None else None,
        }
