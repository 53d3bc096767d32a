"""
Input Normalization

Validates raw user text and turns it into a short, lowercase word
context for the backoff search.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import MAX_CONTEXT_WORDS


logger = logging.getLogger(__name__)


# Value shown to callers for rejected input
BAD_INPUT = "BAD INPUT"

# Any character outside this set rejects the whole input
CHAR_FILTER = re.compile(r"[^a-zA-Z0-9';:!?,. ]")

# Characters kept once the input is accepted; the rest become spaces
ALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9' ]")

REPEAT_WHITESPACE = re.compile(r"\s+")

# A run of digits standing as a word on its own
NUMBER_AS_WORD = re.compile(r"\b[0-9]+\b")


@dataclass(frozen=True)
class NormalizedContext:
    """An ordered sequence of 1-5 lowercase words."""
    tokens: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def text(self) -> str:
        return " ".join(self.tokens)

    def last(self, n: int) -> Tuple[str, ...]:
        """The last n tokens, dropping leading ones."""
        return self.tokens[-n:] if n > 0 else ()


def clean_text(raw: str) -> str:
    """Replace punctuation with spaces, collapse whitespace and trim."""
    text = ALLOWED_CHARS.sub(" ", raw)
    return REPEAT_WHITESPACE.sub(" ", text).strip()


def normalize(raw, max_words: int = MAX_CONTEXT_WORDS) -> Optional[NormalizedContext]:
    """
    Validate and canonicalize raw input.

    Args:
        raw: Text typed by the user
        max_words: Sliding window size; older words are dropped

    Returns:
        The normalized context, or None if the input is invalid
    """
    if not isinstance(raw, str) or raw == "":
        logger.debug("Rejected input: empty or not text")
        return None

    if CHAR_FILTER.search(raw):
        logger.debug("Rejected input: disallowed characters in %r", raw)
        return None

    text = clean_text(raw)
    if not text:
        logger.debug("Rejected input: nothing left after cleaning %r", raw)
        return None

    if NUMBER_AS_WORD.search(text):
        logger.debug("Rejected input: numbers used as words in %r", raw)
        return None

    tokens = tuple(text.lower().split(" "))
    if len(tokens) > max_words:
        tokens = tokens[-max_words:]

    return NormalizedContext(tokens)
