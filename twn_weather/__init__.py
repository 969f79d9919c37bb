"""
TWN Weather: Command-Line Weather Lookup

Looks up current conditions for one or more cities on The Weather Network
(www.theweathernetwork.com) and prints them as a table per city.

The site's search page is static HTML, but the per-city result page only
fills in its metrics after client-side script runs, so each lookup is a
two-stage pipeline:
- Static fetch of the search page (curl_cffi + BeautifulSoup)
- Headless Chrome render of the result page (selenium + BeautifulSoup)

Architecture:
    query.py        - Splits the raw input line into location queries
    providers/      - Site access:
                      * search.py  - Search page -> result URL
                      * metrics.py - Result page -> metrics table
    formatter.py    - Plain-line and bordered-table rendering
    orchestrator.py - Per-query pipeline on a fixed-size worker pool
    errors.py       - Exception taxonomy and error categorization
    ssl_helper.py   - CA bundle selection for curl_cffi

Entry Point:
    main.py         - Interactive CLI
"""

__version__ = "1.0.0"
__author__ = "TWN Weather"
