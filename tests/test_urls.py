from unittest import TestCase

from feedfinder.errors import MalformedUrlError, UrlError
from feedfinder.urls import canonicalize, resolve, site_root

BASE = "https://example.com/blog/post"


class TestResolve(TestCase):
    def test_absolute_path(self) -> None:
        self.assertEqual(resolve(BASE, "/rss.xml"), "https://example.com/rss.xml")

    def test_relative_path(self) -> None:
        self.assertEqual(resolve(BASE, "feed.xml"), "https://example.com/blog/feed.xml")

    def test_scheme_relative(self) -> None:
        self.assertEqual(
            resolve(BASE, "//cdn.example.org/f.xml"), "https://cdn.example.org/f.xml"
        )

    def test_dot_segments_removed(self) -> None:
        self.assertEqual(
            resolve("https://example.com/x/y/z", "../a/./b"), "https://example.com/x/a/b"
        )

    def test_query_only_reference(self) -> None:
        self.assertEqual(resolve(BASE, "?feed=rss2"), "https://example.com/blog/post?feed=rss2")

    def test_dot_segments_removed_from_absolute_reference(self) -> None:
        self.assertEqual(
            resolve(BASE, "https://example.com/x/../feed/"), "https://example.com/feed/"
        )
        self.assertEqual(
            resolve(BASE, "https://example.com/a/./b/../c"), "https://example.com/a/c"
        )

    def test_absolute_reference_is_canonicalized(self) -> None:
        self.assertEqual(
            resolve(BASE, "HTTP://Feeds.Example.NET:80/Main"), "http://feeds.example.net/Main"
        )

    def test_non_hierarchical_references_fail(self) -> None:
        for ref in ("mailto:me@example.com", "javascript:void(0)", "", "   "):
            with self.subTest(ref=ref):
                with self.assertRaises(MalformedUrlError):
                    resolve(BASE, ref)

    def test_bad_base_fails(self) -> None:
        with self.assertRaises(MalformedUrlError):
            resolve("not a url", "/feed")


class TestCanonicalize(TestCase):
    def test_lowercases_scheme_and_host(self) -> None:
        self.assertEqual(
            canonicalize("HTTPS://Example.COM/Path?Q=1"), "https://example.com/Path?Q=1"
        )

    def test_default_ports_removed(self) -> None:
        self.assertEqual(canonicalize("http://example.com:80/a"), "http://example.com/a")
        self.assertEqual(canonicalize("https://example.com:443"), "https://example.com/")

    def test_dot_segments_keep_trailing_slash(self) -> None:
        self.assertEqual(canonicalize("https://example.com/a/b/.."), "https://example.com/a/")
        self.assertEqual(canonicalize("https://example.com/a/."), "https://example.com/a/")
        self.assertEqual(canonicalize("https://example.com/../../feed"), "https://example.com/feed")

    def test_other_ports_kept(self) -> None:
        self.assertEqual(canonicalize("https://example.com:8443/a"), "https://example.com:8443/a")
        self.assertEqual(canonicalize("http://example.com:443/a"), "http://example.com:443/a")

    def test_malformed(self) -> None:
        for url in ("not a url", "http://", "/relative/path", "https://example.com:abc/"):
            with self.subTest(url=url):
                with self.assertRaises(MalformedUrlError):
                    canonicalize(url)

    def test_error_hierarchy(self) -> None:
        with self.assertRaises(UrlError) as ctx:
            canonicalize("not a url")
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(ctx.exception.url, "not a url")

    def test_site_root(self) -> None:
        self.assertEqual(site_root("https://Example.com:8080/a/b?c=1"), "https://example.com:8080/")
