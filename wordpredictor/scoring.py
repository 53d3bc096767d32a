"""
Probability Scoring for Candidate Words

This module turns matched n-grams into ranked candidate words. Each
candidate is appended to the anchor context and the resulting word
sequence is scored with a chain of term frequencies, walked from the
last word to the first.
"""

import random
from enum import Enum
from typing import List, Mapping, Optional, Sequence, Tuple


# Denominator used by the deployed model: the n-gram sample size
DEFAULT_DENOMINATOR = 800000

# Matches kept before scoring when a search returns many results
DEFAULT_MATCH_SAMPLE_SIZE = 150

# Frequency assumed for terms missing from the frequency table
UNSEEN_TERM_FREQUENCY = 1

Candidate = Tuple[str, float]


class ScoringMethod(Enum):
    """Available scoring strategies."""
    SINGLE_TERM = "single"   # product of individual term frequencies
    PAIRED_TERM = "paired"   # each term's frequency plus its left neighbour's

    @classmethod
    def from_name(cls, name) -> 'ScoringMethod':
        """Accept an enum member, its value or its name ("paired", "PAIRED_TERM")."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for method in cls:
            if key in (method.value, method.name.lower()):
                return method
        raise ValueError(f"Unknown scoring method: {name!r}")


class Scorer:
    """
    Base class for scoring strategies.

    Subclasses implement `chain_probability`; sampling, candidate
    extraction and ranking are shared.
    """

    def __init__(self, denominator: int = DEFAULT_DENOMINATOR,
                 match_sample_size: int = DEFAULT_MATCH_SAMPLE_SIZE,
                 rng: Optional[random.Random] = None):
        self.denominator = denominator
        self.match_sample_size = match_sample_size
        self.rng = rng or random.Random()

    def frequency(self, term: str, frequencies: Mapping[str, int]) -> int:
        """Look up a term, smoothing unseen terms to a count of 1."""
        return frequencies.get(term, UNSEEN_TERM_FREQUENCY)

    def chain_probability(self, tokens: Sequence[str],
                          frequencies: Mapping[str, int]) -> float:
        """Return the probability estimate for a word sequence."""
        raise NotImplementedError

    def score(self, matches: Sequence[str], anchor: Sequence[str],
              frequencies: Mapping[str, int]) -> List[Candidate]:
        """
        Rank the candidate words exposed by a list of matched n-grams.

        Args:
            matches: Matched n-gram lines
            anchor: The full normalized context (not the backed-off one)
            frequencies: Term -> count mapping

        Returns:
            List of (word, score) sorted by descending score. Duplicate
            words are kept; equal scores keep their discovery order.
        """
        if not matches:
            return []

        if len(matches) > self.match_sample_size:
            matches = self.rng.sample(list(matches), self.match_sample_size)

        candidates = []
        for gram in matches:
            word = gram.split()[-1]
            tokens = list(anchor) + [word]
            candidates.append((word, self.chain_probability(tokens, frequencies)))

        # list.sort is stable with reverse=True
        candidates.sort(key=lambda c: c[1], reverse=True)
        return candidates


class SingleTermScorer(Scorer):
    """
    Single-term chain.

    p = prod_i freq(w_i) / N

    Where N is the denominator (the n-gram sample size).
    """

    def chain_probability(self, tokens: Sequence[str],
                          frequencies: Mapping[str, int]) -> float:
        p = 1.0
        for term in reversed(tokens):
            p *= self.frequency(term, frequencies) / self.denominator
        return p


class PairedTermScorer(Scorer):
    """
    Paired-term chain, a rough bigram-smoothed chain rule.

    p = prod_i (freq(w_i) + freq(w_{i-1})) / N

    The leftmost word has no neighbour of its own; the neighbour term
    carried into that step is the one looked up for it in the previous
    step.
    """

    def chain_probability(self, tokens: Sequence[str],
                          frequencies: Mapping[str, int]) -> float:
        p = 1.0
        neighbour = 0
        for j in range(len(tokens) - 1, -1, -1):
            freq = self.frequency(tokens[j], frequencies)
            if j > 0:
                neighbour = self.frequency(tokens[j - 1], frequencies)
            p *= (freq + neighbour) / self.denominator
        return p


def get_scorer(method: ScoringMethod, **kwargs) -> Scorer:
    """Factory function to create the appropriate scorer."""
    if method == ScoringMethod.SINGLE_TERM:
        return SingleTermScorer(**kwargs)
    elif method == ScoringMethod.PAIRED_TERM:
        return PairedTermScorer(**kwargs)
    else:
        raise ValueError(f"Unknown scoring method: {method}")
