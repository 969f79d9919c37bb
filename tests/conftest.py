"""Shared fixtures: make the repo root importable and provide page HTML."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


SEARCH_PAGE_HTML = """
<html><body>
<ul class="results">
  <li class="result"><a href="/us/weather/georgia/atlanta-airport">Atlanta Airport, Georgia</a></li>
  <li class="result"><a href="/us/weather/georgia/atlanta">Atlanta, Georgia, United States</a></li>
  <li class="result"><a href="/us/weather/texas/atlanta">Atlanta, Texas, United States</a></li>
  <li class="result"><a href="/us/weather/illinois/chicago">Chicago, Illinois, United States</a></li>
</ul>
</body></html>
"""

RESULT_PAGE_HTML = """
<html><body>
<div class="current">
  <span class="temp">55</span>
  <div class="unitwrap">&deg;F</div>
</div>
<div class="detailed-metrics">
  <span class="label">Wind</span>
  <span class="value">3</span>
  <span class="metric">mph</span>
  <span class="vector">NW</span>
</div>
<div class="detailed-metrics">
  <span class="label">Humidity</span>
  <span class="value">64</span>
  <span class="metric">%</span>
</div>
<div class="detailed-metrics">
  <span class="label">Pressure</span>
  <span class="value">30.1</span>
  <span class="metric">inHg</span>
</div>
</body></html>
"""


@pytest.fixture
def search_page_html():
    return SEARCH_PAGE_HTML


@pytest.fixture
def result_page_html():
    return RESULT_PAGE_HTML
