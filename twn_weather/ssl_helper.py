"""
SSL Helper for the static page client

curl_cffi uses libcurl, which needs a PEM file on disk rather than an
ssl.SSLContext. This module picks that file once per process:

1. TWN_WEATHER_CA_BUNDLE environment variable (explicit override,
   e.g. a corporate inspection CA)
2. certifi CA bundle (standard Mozilla CA bundle)
3. True (curl's default CA store, verification stays on)
"""

import logging
import os
import threading

import certifi

logger = logging.getLogger(__name__)

_FALSY_OVERRIDES = ('', 'true', '1', 'yes')

# Resolved bundle for process lifetime; workers share it
_cached_bundle: str | bool | None = None
_cache_lock = threading.Lock()


def _resolve_ca_bundle() -> str | bool:
    env_bundle = os.getenv("TWN_WEATHER_CA_BUNDLE")
    if env_bundle and env_bundle.lower() not in _FALSY_OVERRIDES:
        if os.path.exists(env_bundle):
            logger.info(f"[ssl_helper] Using CA bundle from env: {env_bundle}")
            return env_bundle
        logger.warning(f"[ssl_helper] TWN_WEATHER_CA_BUNDLE path not found: {env_bundle}")

    certifi_bundle = certifi.where()
    if certifi_bundle and os.path.exists(certifi_bundle):
        logger.info(f"[ssl_helper] Using certifi CA bundle: {certifi_bundle}")
        return certifi_bundle

    logger.warning("[ssl_helper] No CA bundle available - using curl default CA store")
    return True


def get_ca_bundle_for_curl() -> str | bool:
    """
    Get the CA bundle to pass as curl_cffi's ``verify`` argument.

    Returns:
        Path to CA bundle file, or True for curl's default
    """
    global _cached_bundle

    with _cache_lock:
        if _cached_bundle is None:
            _cached_bundle = _resolve_ca_bundle()
        return _cached_bundle


def reset_ca_bundle_cache() -> None:
    """Forget the resolved bundle so the next call re-reads the environment."""
    global _cached_bundle

    with _cache_lock:
        _cached_bundle = None
