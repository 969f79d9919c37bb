"""
Tests for CA bundle selection

Run with: python -m pytest tests/test_ssl_helper.py -v
"""

import certifi
import pytest

from twn_weather import ssl_helper


@pytest.fixture(autouse=True)
def fresh_cache():
    ssl_helper.reset_ca_bundle_cache()
    yield
    ssl_helper.reset_ca_bundle_cache()


class TestGetCaBundle:

    def test_env_override(self, monkeypatch, tmp_path):
        bundle = tmp_path / "corp.pem"
        bundle.write_text("-----BEGIN CERTIFICATE-----\n")
        monkeypatch.setenv("TWN_WEATHER_CA_BUNDLE", str(bundle))

        assert ssl_helper.get_ca_bundle_for_curl() == str(bundle)

    def test_missing_env_path_falls_back_to_certifi(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TWN_WEATHER_CA_BUNDLE", str(tmp_path / "missing.pem"))
        assert ssl_helper.get_ca_bundle_for_curl() == certifi.where()

    def test_default_is_certifi(self, monkeypatch):
        monkeypatch.delenv("TWN_WEATHER_CA_BUNDLE", raising=False)
        assert ssl_helper.get_ca_bundle_for_curl() == certifi.where()

    def test_result_cached(self, monkeypatch, tmp_path):
        monkeypatch.delenv("TWN_WEATHER_CA_BUNDLE", raising=False)
        first = ssl_helper.get_ca_bundle_for_curl()

        bundle = tmp_path / "later.pem"
        bundle.write_text("")
        monkeypatch.setenv("TWN_WEATHER_CA_BUNDLE", str(bundle))

        assert ssl_helper.get_ca_bundle_for_curl() == first
