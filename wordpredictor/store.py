"""
N-gram Store

Holds the n-gram lines for orders 2 to 6. Every load draws a fixed-size
random sample of the order's file; the memory mode decides whether the
full file stays cached between loads (resident) or is re-read each time
and dropped on release (ephemeral).
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional

from .config import EngineConfig, MemoryMode
from .datafiles import read_lines


logger = logging.getLogger(__name__)


class GramOrder(Enum):
    """N-gram orders searched by the backoff controller."""
    BIGRAM = 2
    TRIGRAM = 3
    QUADGRAM = 4
    PENTAGRAM = 5
    SEXTAGRAM = 6

    @property
    def context_length(self) -> int:
        """Number of context words searched at this order."""
        return self.value - 1

    @classmethod
    def for_context_length(cls, length: int) -> 'GramOrder':
        """Map a context of 1..5 words to the order that predicts its next word."""
        return cls(length + 1)

    def lower(self) -> Optional['GramOrder']:
        """The next order to back off to, or None below bigrams."""
        if self is GramOrder.BIGRAM:
            return None
        return GramOrder(self.value - 1)


class NGramStore:
    """
    Per-order n-gram samples with resident/ephemeral residency.

    Attributes:
        config: Engine configuration (data paths, mode, sample size)
        rng: Random generator used for sampling
    """

    def __init__(self, config: EngineConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random(config.seed)

        # Full files, only kept in resident mode
        self._full: Dict[GramOrder, List[str]] = {}
        # Samples handed out by load()
        self._samples: Dict[GramOrder, List[str]] = {}
        # First sample per order when resampling is disabled
        self._frozen: Dict[GramOrder, List[str]] = {}

    @property
    def resident(self) -> bool:
        return self.config.memory_mode == MemoryMode.RESIDENT

    @property
    def frozen(self) -> bool:
        """True when every load of an order returns the same sample."""
        return self.resident and not self.config.resample

    def _sample(self, records: List[str]) -> List[str]:
        size = min(self.config.ngram_sample_size, len(records))
        return self.rng.sample(records, size)

    def load(self, order: GramOrder) -> List[str]:
        """
        Load a random sample of the n-grams for an order.

        Returns:
            List of n-gram lines (at most `ngram_sample_size`)

        Raises:
            DataLoadError: If the order's file is missing or empty
        """
        path = self.config.path_for(order.value)

        if self.resident:
            if order not in self._full:
                logger.debug("Reading %s into memory", path)
                self._full[order] = read_lines(path)

            if not self.config.resample and order in self._frozen:
                sample = self._frozen[order]
            else:
                sample = self._sample(self._full[order])
                if not self.config.resample:
                    self._frozen[order] = sample
        else:
            logger.debug("Reading %s on demand", path)
            sample = self._sample(read_lines(path))

        self._samples[order] = sample
        logger.debug("Loaded %s: %d records sampled", order.name.lower(), len(sample))
        return sample

    def release(self, order: GramOrder) -> None:
        """
        Drop the sample for an order. In ephemeral mode any cached full
        copy is dropped as well.
        """
        self._samples.pop(order, None)
        if not self.resident:
            self._full.pop(order, None)
        logger.debug("Released %s", order.name.lower())

    def release_all(self) -> None:
        for order in GramOrder:
            self.release(order)

    def loaded_orders(self) -> List[GramOrder]:
        """Orders that currently hold a sample."""
        return [order for order in GramOrder if order in self._samples]

    def is_cached(self, order: GramOrder) -> bool:
        """Whether the full file for an order is held in memory."""
        return order in self._full

    def stats(self) -> Dict:
        """Per-order residency statistics."""
        return {
            order.name.lower(): {
                'cached': order in self._full,
                'population': len(self._full[order]) if order in self._full else None,
                'sampled': len(self._samples.get(order, ())),
            }
            for order in GramOrder
        }
