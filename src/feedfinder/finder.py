"""Feed discovery for a single page.

``discover`` combines every detector in a fixed priority order:

1. YouTube URL shapes. A match is returned on its own and the markup is not
   read at all.
2. Feeds declared with ``<link rel="alternate">``.
3. Anchors that look like feeds.
4. Conventional feed paths of the platform the site is built with.

Every ``href`` is resolved against the page URL; the ones that cannot be
resolved are dropped. Results are deduplicated on their canonical URL, keeping
the first occurrence (and therefore its kind).
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from .detectors import anchor_links, declared_links
from .errors import MalformedUrlError
from .models import Feed, FeedKind, PageContext
from .platforms import platform_feeds
from .scanner import scan
from .urls import canonicalize, resolve
from .youtube import youtube_feed

logger = logging.getLogger(__name__)


def _resolved(base_url: str, candidates: Iterable[tuple[str, FeedKind]]) -> List[Feed]:
    feeds: List[Feed] = []
    for href, kind in candidates:
        try:
            feeds.append(Feed(resolve(base_url, href), kind))
        except MalformedUrlError as exc:
            logger.debug("Dropping candidate %r: %s", href, exc)
    return feeds


def _unique(feeds: Iterable[Feed]) -> List[Feed]:
    seen = set()
    result: List[Feed] = []
    for feed in feeds:
        if feed.url in seen:
            continue
        seen.add(feed.url)
        result.append(feed)
    return result


def discover_from_url(url: str) -> Optional[Feed]:
    """Return the feed implied by *url* alone (YouTube pages), without any HTML.

    Raises ``MalformedUrlError`` if *url* is not an absolute URL.
    """
    return youtube_feed(canonicalize(url))


def discover(base_url: str, html: Union[str, bytes, None]) -> List[Feed]:
    """Return candidate feeds for the page fetched from *base_url*.

    *base_url* must be the page's final URL after redirects; *html* is its
    markup as text or bytes. An empty list means no feed was found. Raises
    ``MalformedUrlError`` only when *base_url* itself is not absolute.
    """
    base_url = canonicalize(base_url)

    feed = youtube_feed(base_url)
    if feed is not None:
        logger.info("Discovered YouTube feed for %s: %s", base_url, feed.url)
        return [feed]

    facts = scan(html)
    declared = _resolved(base_url, declared_links(facts.links))
    anchors = _resolved(base_url, anchor_links(facts.anchors))
    platform = platform_feeds(facts.generator, base_url)
    logger.debug(
        "Candidates for %s: %d declared, %d anchors, %d platform",
        base_url,
        len(declared),
        len(anchors),
        len(platform),
    )

    feeds = _unique(declared + anchors + platform)
    if feeds:
        logger.info("Discovered %d feed(s) for %s", len(feeds), base_url)
    else:
        logger.info("No feed found for %s", base_url)
    return feeds


def discover_page(page: PageContext) -> List[Feed]:
    """``discover`` for a :class:`PageContext`."""
    return discover(page.base_url, page.html)
