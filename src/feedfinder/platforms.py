"""Platform fingerprinting.

Sites built with common blogging software expose feeds at well known paths.
The platform is recognised from ``<meta name="generator">`` or, failing that,
from the host name, and its conventional feed URLs are synthesised against the
site root.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Tuple
from urllib.parse import urlsplit

from .errors import MalformedUrlError
from .models import Feed, FeedKind, GeneratorMeta
from .urls import resolve, site_root

logger = logging.getLogger(__name__)


class Platform(NamedTuple):
    name: str
    generator_token: str
    host_suffixes: Tuple[str, ...]
    feeds: Tuple[Tuple[str, FeedKind], ...]


PLATFORMS: Tuple[Platform, ...] = (
    Platform(
        "WordPress",
        "wordpress",
        (".wordpress.com",),
        (("/feed/", FeedKind.RSS), ("/feed/atom/", FeedKind.ATOM)),
    ),
    Platform("Tumblr", "tumblr", (".tumblr.com",), (("/rss", FeedKind.RSS),)),
    Platform("Hugo", "hugo", (), (("/index.xml", FeedKind.RSS),)),
    Platform("Jekyll", "jekyll", (), (("/feed.xml", FeedKind.ATOM),)),
    Platform("Ghost", "ghost", (".ghost.io",), (("/rss/", FeedKind.RSS),)),
)


def match_generator(content: str) -> List[Platform]:
    content = content.lower()
    return [p for p in PLATFORMS if p.generator_token in content]


def match_host(url: str) -> List[Platform]:
    host = (urlsplit(url).hostname or "").lower()
    matched = []
    for platform in PLATFORMS:
        for suffix in platform.host_suffixes:
            if host.endswith(suffix):
                matched.append(platform)
                break
    return matched


def platform_feeds(generator: Optional[GeneratorMeta], base_url: str) -> List[Feed]:
    """Return conventional feed URLs for the platform *base_url* runs on.

    A generator match takes precedence: host patterns are only consulted when
    the generator is missing or names no known platform.
    """
    platforms = match_generator(generator.content) if generator else []
    if not platforms:
        platforms = match_host(base_url)

    try:
        root = site_root(base_url)
    except MalformedUrlError:
        return []

    feeds: List[Feed] = []
    for platform in platforms:
        logger.debug("Page at %s looks like %s", base_url, platform.name)
        for path, kind in platform.feeds:
            feeds.append(Feed(resolve(root, path), kind))
    return feeds
