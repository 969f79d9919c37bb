"""Splits the raw input line into individual location queries."""

import logging
from typing import List

from twn_weather.errors import EmptyQueryError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"


def parse_queries(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """
    Split a delimiter-separated line into trimmed location queries.

    Pieces that are empty after trimming (e.g. from a trailing delimiter)
    are dropped.

    Args:
        line: Raw user input, e.g. "Atlanta ; new york "
        delimiter: Separator between locations (";" or ",")

    Returns:
        List of queries, e.g. ["Atlanta", "new york"]

    Raises:
        EmptyQueryError: if the line holds no queries
    """
    if not line or not line.strip():
        raise EmptyQueryError()

    queries = [piece.strip() for piece in line.split(delimiter)]
    queries = [q for q in queries if q]

    if not queries:
        raise EmptyQueryError()

    logger.debug(f"[parse_queries] {len(queries)} queries: {queries}")
    return queries


def city_component(query: str) -> str:
    """Return the part of a "city, region" query used for matching."""
    return query.split(",")[0].strip()
