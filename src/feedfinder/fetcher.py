"""Retrieve a page over HTTP and hand it to discovery.

This is the only module that touches the network. ``find_feeds`` is the
convenience used by the command line and the API server: YouTube URLs are
answered without fetching anything, every other URL is downloaded once and
scanned.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from . import config
from .errors import FetchError
from .finder import discover_from_url, discover_page
from .models import Feed, PageContext
from .urls import canonicalize

logger = logging.getLogger(__name__)


def fetch_page(url: str, timeout: Optional[float] = None) -> PageContext:
    """Download *url* and return its final URL and raw body.

    The body is kept as bytes so the scanner can apply the page's own charset.
    Raises ``FetchError`` on network errors and 4xx/5xx responses.
    """
    url = canonicalize(url)
    try:
        response = requests.get(
            url,
            timeout=timeout or config.TIMEOUT,
            headers={"User-Agent": config.USER_AGENT},
            allow_redirects=True,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Failed to fetch site %s: %s", url, exc)
        raise FetchError(f"failed to fetch {url}: {exc}") from exc

    if response.url != url:
        logger.debug("Followed redirect %s -> %s", url, response.url)
    return PageContext(base_url=response.url, html=response.content)


def find_feeds(url: str, timeout: Optional[float] = None) -> List[Feed]:
    """Discover feeds for *url*, fetching the page only when the URL is not enough."""
    feed = discover_from_url(url)
    if feed is not None:
        return [feed]
    return discover_page(fetch_page(url, timeout=timeout))
