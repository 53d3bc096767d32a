"""
Gram Matching

Finds the stored n-grams that continue a context. A gram matches when it
starts with the context words, in order, followed by a space and at
least one more character (the candidate next word).
"""

from typing import Iterable, List, Sequence


def prefix_for(context: Sequence[str]) -> str:
    """The literal prefix a matching gram must start with."""
    return " ".join(context) + " "


def match(context: Sequence[str], grams: Iterable[str]) -> List[str]:
    """
    Return the grams that continue `context`, in store order.

    Args:
        context: Search context words (already backed off, if any)
        grams: N-gram lines for the order being searched

    Returns:
        Matching grams; empty when there is no evidence at this order
    """
    prefix = prefix_for(context)
    size = len(prefix)
    return [g for g in grams if len(g) > size and g.startswith(prefix)]
