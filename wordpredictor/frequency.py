"""
Term Frequency Table

Word -> occurrence count mapping, stored on disk as two parallel files:
one count per line and one term per line, joined by position.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from .datafiles import read_lines
from .errors import DataLoadError


logger = logging.getLogger(__name__)


class FrequencyTable(Mapping):
    """Read-only mapping of lowercase term -> count."""

    def __init__(self, counts: Mapping[str, int]):
        self._counts: Dict[str, int] = dict(counts)

    def __getitem__(self, term: str) -> int:
        return self._counts[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def total(self) -> int:
        """Sum of all counts."""
        return sum(self._counts.values())

    def stats(self) -> Dict:
        return {
            'terms': len(self),
            'total_count': self.total(),
        }

    @classmethod
    def load(cls, counts_path: Path, names_path: Path) -> 'FrequencyTable':
        """
        Load the table from its two backing files.

        Args:
            counts_path: One integer count per line
            names_path: One term per line, same length as counts_path

        Raises:
            DataLoadError: If either file is missing or empty, a count is
                not a non-negative integer, or the two files disagree in length
        """
        raw_counts = read_lines(counts_path)
        names = read_lines(names_path)

        if len(raw_counts) != len(names):
            logger.error("Frequency files disagree in length: %d counts, %d names",
                         len(raw_counts), len(names))
            raise DataLoadError(
                f"Frequency table mismatch: {len(raw_counts)} counts in {counts_path} "
                f"but {len(names)} names in {names_path}",
                path=str(counts_path)
            )

        counts: Dict[str, int] = {}
        for lineno, (raw, name) in enumerate(zip(raw_counts, names), start=1):
            count = _parse_count(raw)
            if count is None:
                logger.error("Invalid count %r on line %d of %s", raw, lineno, counts_path)
                raise DataLoadError(
                    f"Invalid count {raw!r} on line {lineno} of {counts_path}",
                    path=str(counts_path)
                )
            # First occurrence wins for duplicated names
            counts.setdefault(name, count)

        logger.debug("Loaded %d term frequencies", len(counts))
        return cls(counts)


def _parse_count(raw: str) -> Optional[int]:
    """A non-negative integer count, or None. Integral floats like 10.0 pass."""
    try:
        count = int(raw)
    except ValueError:
        try:
            value = float(raw)
        except ValueError:
            return None
        if not value.is_integer():
            return None
        count = int(value)
    return count if count >= 0 else None
