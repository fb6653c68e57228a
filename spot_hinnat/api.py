"""
Low-level HTTP helper for the price feed.

Handles timeouts, bounded retry, and mapping of transport failures onto
:mod:`spot_hinnat.exceptions`.
"""

from __future__ import annotations

import time
from typing import Any

import requests

from .config import REQUEST_RETRIES, REQUEST_TIMEOUT, RETRY_PAUSE_SECONDS
from .exceptions import FeedFormatError, FeedHTTPError
from .logger import log

# ── Generic request / retry ──────────────────────────────────────────────────


def get_json(
    url: str,
    retries: int = REQUEST_RETRIES,
    timeout: float = REQUEST_TIMEOUT,
    pause: float = RETRY_PAUSE_SECONDS,
) -> Any:
    """GET *url* and decode the JSON body.

    Connection errors, timeouts and 5xx answers are retried up to *retries*
    attempts in total; any other non-success status fails at once.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            resp = requests.get(url, timeout=timeout)
        except (requests.ConnectionError, requests.Timeout) as exc:
            err = FeedHTTPError(f"Network error: {exc}")
        except requests.RequestException as exc:
            raise FeedHTTPError(f"Request failed: {exc}") from exc
        else:
            if resp.ok:
                try:
                    return resp.json()
                except ValueError as exc:
                    raise FeedFormatError(f"Response is not valid JSON: {exc}") from exc
            err = FeedHTTPError(
                f"HTTP error! status: {resp.status_code}", resp.status_code
            )
            if resp.status_code < 500:
                raise err

        if attempt >= retries:
            raise err
        log.warning("GET %s attempt %d/%d failed: %s", url, attempt, retries, err)
        time.sleep(pause)
