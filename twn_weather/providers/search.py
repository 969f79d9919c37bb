"""
Search Resolver for The Weather Network

Turns a free-text location query into the URL of the site's weather page
for that location. The search results page is plain server-rendered HTML,
so a single curl_cffi request is enough here (no script execution).

Result entries are ``li.result`` elements; the first one whose text
contains the query's city (case-insensitive) and whose link is not an
airport page wins. No ranking or scoring is applied.
"""

import logging
from typing import Optional
from urllib.parse import quote_plus

from bs4 import BeautifulSoup
from curl_cffi.requests import Session
from curl_cffi.requests.exceptions import RequestException

from twn_weather.errors import FetchError
from twn_weather.query import city_component
from twn_weather.ssl_helper import get_ca_bundle_for_curl

logger = logging.getLogger(__name__)

SITE_ORIGIN = "https://www.theweathernetwork.com"
SITE_HOST = "www.theweathernetwork.com"
SEARCH_URL_TEMPLATE = SITE_ORIGIN + "/us/search?q={query}&lat=&lon="

# Airport observation pages also match city names ("Atlanta Airport")
REJECTED_URL_MARKER = "airport"


def build_search_url(query: str) -> str:
    """Embed a URL-encoded query (spaces become '+') in the search template."""
    return SEARCH_URL_TEMPLATE.format(query=quote_plus(query))


def find_result_url(
    soup: BeautifulSoup,
    query: str,
    reject_airports: bool = True
) -> Optional[str]:
    """
    Pick the first matching result link from a parsed search page.

    Args:
        soup: Parsed search results page
        query: Location query, optionally "city, region"
        reject_airports: Skip candidate URLs containing "airport"

    Returns:
        Absolute result URL, or None when nothing matches
    """
    city = city_component(query).lower()

    for result in soup.select("li.result"):
        if city not in result.get_text(" ", strip=True).lower():
            continue

        anchor = result.select_one("a[href]")
        if anchor is None:
            continue

        candidate = SITE_ORIGIN + anchor["href"]
        if reject_airports and REJECTED_URL_MARKER in candidate.lower():
            logger.debug(f"[SearchResolver] Skipping airport result: {candidate}")
            continue

        return candidate

    return None


class SearchResolver:
    """
    Resolves location queries to result page URLs.

    Uses curl_cffi with Chrome impersonation; the site expects its own
    Host header and a Referer from its US landing page.
    """

    HEADERS = {
        "Host": SITE_HOST,
        "Referer": SITE_ORIGIN + "/us/",
        "Accept": "text/html,application/xhtml+xml",
    }
    IMPERSONATE = "chrome110"
    TIMEOUT_SECONDS = 30

    def __init__(self, reject_airports: bool = True):
        self.reject_airports = reject_airports
        logger.debug(f"[SearchResolver] Initialized (reject_airports={reject_airports})")

    def fetch_document(self, url: str) -> BeautifulSoup:
        """
        Fetch a page as static HTML and parse it.

        Raises:
            FetchError: on network failure or a non-200 response
        """
        logger.info(f"[SearchResolver] Fetching {url}")
        try:
            with Session(impersonate=self.IMPERSONATE) as session:
                response = session.get(
                    url,
                    headers=self.HEADERS,
                    timeout=self.TIMEOUT_SECONDS,
                    verify=get_ca_bundle_for_curl()
                )
        except RequestException as e:
            raise FetchError(url, f"{type(e).__name__}: {e}") from e

        if response.status_code != 200:
            logger.error(f"[SearchResolver] HTTP {response.status_code} for {url}")
            raise FetchError(url, f"HTTP {response.status_code}", status_code=response.status_code)

        return BeautifulSoup(response.content, 'html.parser')

    def resolve(self, query: str) -> Optional[str]:
        """
        Find the weather page URL for a location query.

        Returns:
            Absolute URL, or None if no search result matches (not an error)

        Raises:
            FetchError: if the search page cannot be retrieved
        """
        search_url = build_search_url(query)
        soup = self.fetch_document(search_url)

        result_url = find_result_url(soup, query, reject_airports=self.reject_airports)
        if result_url:
            logger.info(f"[SearchResolver] [OK] {query!r} -> {result_url}")
        else:
            logger.info(f"[SearchResolver] No match for {query!r}")
        return result_url
