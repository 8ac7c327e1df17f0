from unittest import TestCase

from feedfinder.detectors import anchor_links, declared_links
from feedfinder.models import AnchorTag, FeedKind, LinkTag


class TestDeclaredLinks(TestCase):
    def test_feed_mime_types(self) -> None:
        links = [
            LinkTag("alternate", "application/rss+xml", "/rss.xml"),
            LinkTag("ALTERNATE", "application/atom+xml; charset=utf-8", "/atom.xml"),
            LinkTag("alternate", "application/json", "/feed.json"),
            LinkTag("alternate", "Application/Feed+JSON", "/feed2.json"),
        ]
        self.assertEqual(
            declared_links(links),
            [
                ("/rss.xml", FeedKind.RSS),
                ("/atom.xml", FeedKind.ATOM),
                ("/feed.json", FeedKind.JSON),
                ("/feed2.json", FeedKind.JSON),
            ],
        )

    def test_ignores_other_links(self) -> None:
        links = [
            LinkTag("stylesheet", "text/css", "/site.css"),
            LinkTag("alternate", "text/html", "/fr/"),
            LinkTag("alternate", "application/rss+xml", None),
            LinkTag("alternate", "application/rss+xml", ""),
            LinkTag("canonical", "application/rss+xml", "/x.xml"),
        ]
        self.assertEqual(declared_links(links), [])


class TestAnchorLinks(TestCase):
    def test_feed_like_paths(self) -> None:
        cases = {
            "/feed.rss": FeedKind.RSS,
            "/posts.atom": FeedKind.ATOM,
            "/feed/": FeedKind.UNKNOWN,
            "https://example.com/blog/rss": FeedKind.UNKNOWN,
            "/rss/index.xml": FeedKind.UNKNOWN,
            "/feed.json": FeedKind.JSON,
            "/atom.xml?lang=en": FeedKind.UNKNOWN,
        }
        for href, kind in cases.items():
            with self.subTest(href=href):
                self.assertEqual(anchor_links([AnchorTag(href, "")]), [(href, kind)])

    def test_non_feed_paths(self) -> None:
        for href in ("/data.json", "/sitemap.xml", "/about", "/feedback", "/"):
            with self.subTest(href=href):
                self.assertEqual(anchor_links([AnchorTag(href, "read more")]), [])

    def test_link_text_vocabulary(self) -> None:
        anchors = [
            AnchorTag("/syndicate", "RSS"),
            AnchorTag("/x", "RSS Feed"),
            AnchorTag("/y", "Subscribe"),
            AnchorTag("/newsletter", "Subscribe to our newsletter"),
            AnchorTag(None, "RSS"),
        ]
        self.assertEqual(
            anchor_links(anchors),
            [
                ("/syndicate", FeedKind.UNKNOWN),
                ("/x", FeedKind.UNKNOWN),
                ("/y", FeedKind.UNKNOWN),
            ],
        )

    def test_fragment_only_hrefs_skipped(self) -> None:
        anchors = [AnchorTag("#", "Subscribe"), AnchorTag(" #rss", "RSS")]
        self.assertEqual(anchor_links(anchors), [])

    def test_suffix_kind_wins_over_text(self) -> None:
        self.assertEqual(
            anchor_links([AnchorTag("/all.atom", "RSS")]), [("/all.atom", FeedKind.ATOM)]
        )
