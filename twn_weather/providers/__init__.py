"""
Providers package for TWN Weather

Site access for The Weather Network, one module per page type:

1. search.py  - Search results page (static HTML via curl_cffi)
2. metrics.py - Per-location weather page (headless Chrome via selenium)
"""

from twn_weather.providers.search import (
    SearchResolver,
    build_search_url,
    find_result_url,
    SITE_ORIGIN,
)

from twn_weather.providers.metrics import (
    MetricsExtractor,
    MetricValue,
    MetricsTable,
    parse_metrics,
    create_headless_chrome,
    TEMPERATURE_LABEL,
)

__all__ = [
    # Search page
    "SearchResolver",
    "build_search_url",
    "find_result_url",
    "SITE_ORIGIN",
    # Result page
    "MetricsExtractor",
    "MetricValue",
    "MetricsTable",
    "parse_metrics",
    "create_headless_chrome",
    "TEMPERATURE_LABEL",
]
