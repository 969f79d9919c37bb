"""
TWN Weather Orchestrator

Runs the per-query lookup pipeline for every requested location:
1. Build the search URL and resolve it to a result page URL
2. Render the result page and extract its metrics
3. Print the metrics as a table (or plain lines)

Each query is one task on a fixed-size thread pool sized to the CPU
count. Tasks print their own output, so blocks from different queries
interleave. A failing task is logged with its stack trace and does not
affect the others; the pool is always drained before returning.
"""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from colorama import Fore, Style

from twn_weather.errors import categorize_error
from twn_weather.formatter import render_lines, render_table
from twn_weather.providers.metrics import MetricsExtractor
from twn_weather.providers.search import SearchResolver, build_search_url

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_NOT_FOUND = "not_found"
STATUS_FAILED = "failed"

SEPARATOR = "--+--+--+--+--+--+--"


@dataclass
class TaskOutcome:
    """Completion record for one query (no metrics, just how it ended)."""
    query: str
    status: str
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED


def default_worker_count() -> int:
    """Pool size: one worker per available CPU."""
    return os.cpu_count() or 1


def run_query(
    query: str,
    resolver: SearchResolver,
    extractor: MetricsExtractor,
    plain: bool = False
) -> TaskOutcome:
    """
    Run the full lookup pipeline for one query and print its block.

    Fetch and render failures propagate to the caller.
    """
    worker = threading.current_thread().name

    search_url = build_search_url(query)
    print(f"\n{worker}: Search Page URL for {query}: {search_url}\nLoading query results...")

    result_url = resolver.resolve(query)
    if result_url is None:
        print(
            f"\n{SEPARATOR}\n\n"
            f"{Fore.YELLOW}{worker}: No results found for {query.upper()}.{Style.RESET_ALL}"
            f"\n\n{SEPARATOR}\n"
        )
        return TaskOutcome(query=query, status=STATUS_NOT_FOUND)

    print(f"{worker}: Result url: {result_url}")
    print(f"\n{worker}: Loading result details...")

    metrics = extractor.extract(result_url)
    body = render_lines(metrics) if plain else render_table(metrics)

    print(
        f"\n\n{Fore.CYAN}{worker}: Weather details for {query.upper()}{Style.RESET_ALL}\n\n"
        f"{body}"
    )
    return TaskOutcome(query=query, status=STATUS_OK)


def _run_task(
    query: str,
    resolver: SearchResolver,
    extractor: MetricsExtractor,
    plain: bool
) -> TaskOutcome:
    """Task boundary: nothing raised here reaches the pool."""
    try:
        return run_query(query, resolver, extractor, plain=plain)
    except Exception as e:
        error_type, error_msg = categorize_error(e)
        logger.error(
            f"[run_queries] Query {query!r} failed: {error_type.value} - {error_msg}",
            exc_info=True
        )
        print(f"{Fore.RED}{threading.current_thread().name}: Lookup failed for {query.upper()}: {error_msg}{Style.RESET_ALL}")
        return TaskOutcome(query=query, status=STATUS_FAILED, error=error_msg)


def run_queries(
    queries: List[str],
    resolver: Optional[SearchResolver] = None,
    extractor: Optional[MetricsExtractor] = None,
    plain: bool = False,
    max_workers: Optional[int] = None
) -> List[TaskOutcome]:
    """
    Run every query on a fixed-size worker pool and wait for all of them.

    Args:
        queries: Location queries (already split and trimmed)
        resolver: Search resolver shared by all tasks
        extractor: Metrics extractor shared by all tasks (it starts a
            separate browser per call)
        plain: Print plain lines instead of tables
        max_workers: Pool size (defaults to the CPU count)

    Returns:
        One TaskOutcome per query, in submission order

    Raises:
        ValueError: if max_workers is given and below 1
    """
    resolver = resolver or SearchResolver()
    extractor = extractor or MetricsExtractor()
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")
    workers = max_workers or default_worker_count()

    logger.info(f"[run_queries] {len(queries)} queries on {workers} workers")

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="worker") as pool:
        futures = [
            pool.submit(_run_task, query, resolver, extractor, plain)
            for query in queries
        ]
        outcomes = [future.result() for future in futures]

    failed = sum(1 for o in outcomes if o.failed)
    not_found = sum(1 for o in outcomes if o.status == STATUS_NOT_FOUND)
    logger.info(
        f"[run_queries] Done: {len(outcomes) - failed - not_found} ok, "
        f"{not_found} not found, {failed} failed"
    )
    return outcomes
