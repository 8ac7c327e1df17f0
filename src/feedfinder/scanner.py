"""Single pass extraction of feed-related facts from HTML.

BeautifulSoup's ``html.parser`` backend is used with a ``SoupStrainer`` so that
only ``<link>``, ``<a>`` and ``<meta>`` elements are kept; the rest of the page
is tokenised and discarded. The parser never raises on broken markup, which is
what lets discovery degrade to "whatever could be read" on tag soup.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, SoupStrainer

from .models import AnchorTag, GeneratorMeta, LinkTag, ScanResult

logger = logging.getLogger(__name__)

_INTERESTING_TAGS = ["link", "a", "meta"]


def _attr(tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()


def _make_soup(html: Union[str, bytes]) -> BeautifulSoup:
    return BeautifulSoup(
        html,
        "html.parser",
        parse_only=SoupStrainer(_INTERESTING_TAGS),
        # keep ``rel="alternate"`` as a plain string
        multi_valued_attributes=None,
    )


def scan(html: Union[str, bytes, None]) -> ScanResult:
    """Collect ``<link>``, ``<a>`` and generator ``<meta>`` facts from *html*.

    Accepts text or undecoded bytes. Never raises on content: anything the
    parser cannot make sense of is skipped.
    """
    result = ScanResult()
    if not html:
        return result

    soup = _make_soup(html)
    for tag in soup.find_all(_INTERESTING_TAGS):
        if tag.name == "link":
            rel = _attr(tag, "rel")
            if rel is None:
                continue
            result.links.append(
                LinkTag(rel=rel, type=_attr(tag, "type") or "", href=_attr(tag, "href"))
            )
        elif tag.name == "a":
            result.anchors.append(
                AnchorTag(href=_attr(tag, "href"), text=tag.get_text(" ", strip=True))
            )
        elif tag.name == "meta":
            name = (_attr(tag, "name") or "").lower()
            if name == "generator":
                if result.generator is None:
                    result.generator = GeneratorMeta(content=_attr(tag, "content") or "")
                continue
            rel = _attr(tag, "rel")
            if rel is not None and _attr(tag, "href"):
                # some pages advertise feeds on <meta> instead of <link>
                result.links.append(
                    LinkTag(rel=rel, type=_attr(tag, "type") or "", href=_attr(tag, "href"))
                )

    logger.debug(
        "Scanned %d link tags, %d anchors, generator=%s",
        len(result.links),
        len(result.anchors),
        result.generator.content if result.generator else None,
    )
    return result
