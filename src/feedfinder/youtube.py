"""Feed URLs for YouTube channels, users and playlists.

YouTube publishes an Atom feed per channel, user and playlist under
``/feeds/videos.xml``. The page URL alone is enough to build it.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import parse_qs, quote, urlsplit

from .models import Feed, FeedKind

YOUTUBE_HOSTS = frozenset(("youtube.com", "www.youtube.com", "m.youtube.com"))
FEED_ENDPOINT = "https://www.youtube.com/feeds/videos.xml"

_CHANNEL = re.compile(r"^/channel/([A-Za-z0-9_-]+)")
_USER = re.compile(r"^/(?:user|c)/([^/?#]+)")
_LIST_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def _feed(param: str, value: str) -> Feed:
    return Feed(f"{FEED_ENDPOINT}?{param}={quote(value, safe='')}", FeedKind.ATOM)


def youtube_feed(url: str) -> Optional[Feed]:
    """Return the feed for a YouTube channel, user or playlist URL, else ``None``."""
    try:
        parts = urlsplit(url.strip())
        host = (parts.hostname or "").lower()
    except ValueError:
        return None
    if host not in YOUTUBE_HOSTS:
        return None

    match = _CHANNEL.match(parts.path)
    if match:
        return _feed("channel_id", match.group(1))

    match = _USER.match(parts.path)
    if match:
        return _feed("user", match.group(1))

    for playlist_id in parse_qs(parts.query).get("list", []):
        if _LIST_ID.match(playlist_id):
            return _feed("playlist_id", playlist_id)
    return None
