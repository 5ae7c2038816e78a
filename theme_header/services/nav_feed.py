"""Remote JSON fetch for the default navigation menu document."""

from __future__ import annotations

import logging
from typing import Any

import requests

from theme_header.config import NAV_FETCH_TIMEOUT

logger = logging.getLogger(__name__)


def fetch_json(url: str, timeout: float | None = None) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Returns None on network errors, non-200 responses or invalid JSON.
    """
    if not url:
        return None

    try:
        resp = requests.get(
            url,
            timeout=timeout or NAV_FETCH_TIMEOUT,
            headers={"Accept": "application/json"},
        )
    except requests.RequestException as e:
        logger.warning("Nav feed fetch failed for %s: %s", url, e)
        return None

    if resp.status_code != 200:
        logger.warning("Nav feed %s returned HTTP %d", url, resp.status_code)
        return None

    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Nav feed %s returned invalid JSON: %s", url, e)
        return None
