"""
Reading the flat, line-oriented data files produced by the corpus pipeline.
"""

import logging
from pathlib import Path
from typing import List

from .errors import DataLoadError


logger = logging.getLogger(__name__)


def read_lines(path: Path) -> List[str]:
    """
    Read a data file into a list of stripped, non-blank lines.

    Raises:
        DataLoadError: If the file is missing, unreadable or has no lines
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
    except FileNotFoundError as e:
        logger.error("Data file not found: %s", path)
        raise DataLoadError(f"Data file not found: {path}", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read data file %s: %s", path, e)
        raise DataLoadError(f"Cannot read data file {path}: {e}", path=str(path)) from e

    lines = [line for line in lines if line]
    if not lines:
        logger.error("Data file is empty: %s", path)
        raise DataLoadError(f"Data file is empty: {path}", path=str(path))

    return lines
