"""
Splitting, mapping and rejoining delimiter-separated batches of IDs.
"""
import logging
import re
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)

NEWLINE = "\n"
COMMA = ","

_ITEM_BOUNDARY = re.compile(r"[\n,]")


def detect_delimiter(raw: str) -> str:
    """Newline if the input has more newlines than commas, else comma."""
    return NEWLINE if raw.count(NEWLINE) > raw.count(COMMA) else COMMA


def split_items(raw: str) -> List[str]:
    """Splits on any newline or comma, trims items and drops the empty ones."""
    return [item for item in (part.strip() for part in _ITEM_BOUNDARY.split(raw)) if item]


def split_batch(raw: str) -> Tuple[List[str], str]:
    return split_items(raw), detect_delimiter(raw)


def apply(raw: str, operation: Callable[[str], str]) -> str:
    """
    Runs `operation` over every item of `raw` in order and rejoins the results.

    The first failing item aborts the whole batch, its exception propagates
    unchanged and no partial output is produced.
    """
    items, delimiter = split_batch(raw)

    results = []
    for index, item in enumerate(items):
        try:
            results.append(operation(item))
        except Exception as e:
            logger.warning(f"Batch aborted at item {index + 1} of {len(items)}: {e}")
            raise
    return delimiter.join(results)
