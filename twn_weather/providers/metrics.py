"""
Metrics Extractor for The Weather Network

The per-location weather page ships an empty shell; current conditions
are filled in by client-side script after load. Each extraction therefore
starts its own headless Chrome session, lets the page render, snapshots
the resulting HTML and hands it to BeautifulSoup.

Page structure used:
    span.temp / div.unitwrap      - current temperature and its unit
    div.detailed-metrics          - one block per other metric, holding
        span.label  (required)
        span.value  (required)
        span.metric (optional unit)
        span.vector (optional direction, e.g. wind "NW")

One browser per call, never shared between queries; it is always quit
before extract() returns.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup
from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

logger = logging.getLogger(__name__)

TEMPERATURE_LABEL = "Temperature"
METRIC_BLOCK_SELECTOR = "div.detailed-metrics"
DEFAULT_RENDER_WAIT_SECONDS = 10.0


@dataclass(frozen=True)
class MetricValue:
    """One metric reading, e.g. Wind = 3 mph NW."""
    magnitude: str
    unit: str
    direction: Optional[str] = None  # None for temperature, "" when a block has no vector

    def parts(self) -> List[str]:
        """Magnitude, unit and (when the metric has one) direction."""
        if self.direction is None:
            return [self.magnitude, self.unit]
        return [self.magnitude, self.unit, self.direction]


MetricsTable = Dict[str, MetricValue]


def _first_text(scope, selector: str) -> Optional[str]:
    element = scope.select_one(selector)
    if element is None:
        return None
    return element.get_text(" ", strip=True)


def parse_metrics(html: str) -> MetricsTable:
    """
    Extract the metrics table from a rendered result page.

    Temperature is always present (empty strings when the page lacks it).
    Metric blocks without a label or value, or labelled Temperature, are
    skipped; missing unit and vector default to "".
    """
    soup = BeautifulSoup(html, 'html.parser')
    metrics: MetricsTable = {}

    metrics[TEMPERATURE_LABEL] = MetricValue(
        magnitude=_first_text(soup, "span.temp") or "",
        unit=_first_text(soup, "div.unitwrap") or "",
    )

    for block in soup.select(METRIC_BLOCK_SELECTOR):
        label = _first_text(block, "span.label")
        if label is None:
            continue

        if label == TEMPERATURE_LABEL:
            logger.debug("[MetricsExtractor] Ignoring metric block labelled Temperature")
            continue

        value = _first_text(block, "span.value")
        if value is None:
            logger.debug(f"[MetricsExtractor] Block {label!r} has no value, skipping")
            continue

        metrics[label] = MetricValue(
            magnitude=value,
            unit=_first_text(block, "span.metric") or "",
            direction=_first_text(block, "span.vector") or "",
        )

    logger.debug(f"[MetricsExtractor] Parsed {len(metrics)} metrics")
    return metrics


def create_headless_chrome() -> WebDriver:
    """Start a new headless Chrome session."""
    options = Options()
    options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")

    chrome_binary = os.getenv("TWN_WEATHER_CHROME_BINARY")
    if chrome_binary:
        options.binary_location = chrome_binary

    return webdriver.Chrome(options=options)


def _render_wait_from_env() -> float:
    raw = os.getenv("TWN_WEATHER_RENDER_WAIT")
    if not raw:
        return DEFAULT_RENDER_WAIT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"[MetricsExtractor] Invalid TWN_WEATHER_RENDER_WAIT={raw!r}, using default")
        return DEFAULT_RENDER_WAIT_SECONDS


class MetricsExtractor:
    """
    Renders result pages in headless Chrome and extracts their metrics.

    Args:
        driver_factory: Callable returning a fresh WebDriver per call
        render_wait: Seconds to wait for metric blocks to appear
    """

    def __init__(
        self,
        driver_factory: Optional[Callable[[], WebDriver]] = None,
        render_wait: Optional[float] = None
    ):
        self.driver_factory = driver_factory or create_headless_chrome
        self.render_wait = render_wait if render_wait is not None else _render_wait_from_env()

    def _wait_for_metrics(self, driver: WebDriver, url: str) -> None:
        if self.render_wait <= 0:
            return
        try:
            WebDriverWait(driver, self.render_wait).until(
                EC.presence_of_element_located((By.CSS_SELECTOR, METRIC_BLOCK_SELECTOR))
            )
        except TimeoutException:
            # Parse whatever rendered; missing fields become empty values
            logger.warning(
                f"[MetricsExtractor] Metric blocks not rendered after {self.render_wait:.0f}s: {url}"
            )

    def extract(self, url: str) -> MetricsTable:
        """
        Load a result page with script execution and parse its metrics.

        The browser session is quit on every path out of this method.
        """
        logger.info(f"[MetricsExtractor] Rendering {url}")
        driver = self.driver_factory()
        try:
            driver.get(url)
            self._wait_for_metrics(driver, url)
            metrics = parse_metrics(driver.page_source)
        finally:
            try:
                driver.quit()
            except WebDriverException as e:
                logger.warning(f"[MetricsExtractor] Browser quit failed: {e}")

        logger.info(f"[MetricsExtractor] [OK] {len(metrics)} metrics from {url}")
        return metrics
