"""Markup based feed detectors.

Both detectors return ``(href, kind)`` pairs with the ``href`` exactly as it was
written in the page; resolution against the page URL happens in the aggregator.
"""

from __future__ import annotations

import posixpath
import re
from typing import Iterable, List, Tuple
from urllib.parse import urlsplit

from .models import AnchorTag, FeedKind, LinkTag

Candidate = Tuple[str, FeedKind]

FEED_MIME_TYPES = {
    "application/rss+xml": FeedKind.RSS,
    "application/atom+xml": FeedKind.ATOM,
    "application/json": FeedKind.JSON,
    "application/feed+json": FeedKind.JSON,
}

# Extensions that identify a feed on their own.
_FEED_EXTENSIONS = {".rss": FeedKind.RSS, ".atom": FeedKind.ATOM}
# Extensions that only count when the path also looks feed-like.
_DATA_EXTENSIONS = {".xml": FeedKind.UNKNOWN, ".json": FeedKind.JSON}
_FEED_WORDS = ("feed", "rss", "atom")
_ANCHOR_VOCABULARY = frozenset(("rss", "feed", "atom", "subscribe"))
_WORD = re.compile(r"[a-z]+")


def _mime_kind(type_attr: str):
    mime = type_attr.split(";", 1)[0].strip().lower()
    return FEED_MIME_TYPES.get(mime)


def declared_links(links: Iterable[LinkTag]) -> List[Candidate]:
    """Feeds advertised with ``<link rel="alternate" type="...">``, in document order."""
    found: List[Candidate] = []
    for link in links:
        if link.rel.strip().lower() != "alternate":
            continue
        kind = _mime_kind(link.type)
        if kind is None or not link.href:
            continue
        found.append((link.href, kind))
    return found


def _path_kind(href: str):
    """Return the kind implied by the href's path, or ``None`` if it does not look like a feed."""
    try:
        path = urlsplit(href).path.lower()
    except ValueError:
        return None
    segments = [s for s in path.split("/") if s]
    if not segments:
        return None
    last = segments[-1]
    ext = posixpath.splitext(last)[1]
    if ext in _FEED_EXTENSIONS:
        return _FEED_EXTENSIONS[ext]
    if ext in _DATA_EXTENSIONS and any(w in s for s in segments for w in _FEED_WORDS):
        return _DATA_EXTENSIONS[ext]
    if last in _FEED_WORDS:
        return FeedKind.UNKNOWN
    return None


def _text_matches(text: str) -> bool:
    words = _WORD.findall(text.lower())
    return bool(words) and all(w in _ANCHOR_VOCABULARY for w in words)


def anchor_links(anchors: Iterable[AnchorTag]) -> List[Candidate]:
    """Guess feeds from ``<a>`` hrefs and link text.

    An anchor qualifies when its path ends like a feed (``.rss``, ``.atom``,
    ``/feed``, ``/rss/index.xml``, ``feed.json``...) or when its text is made
    only of words such as "RSS", "Feed", "Atom" or "Subscribe".
    """
    found: List[Candidate] = []
    for anchor in anchors:
        if not anchor.href or anchor.href.strip().startswith("#"):
            continue
        kind = _path_kind(anchor.href)
        if kind is None:
            if not _text_matches(anchor.text):
                continue
            kind = FeedKind.UNKNOWN
        found.append((anchor.href, kind))
    return found
