"""Exceptions raised by feedfinder.

Discovery itself is best effort: malformed markup and unusable ``href`` values
never raise. The only error a caller of ``discover`` has to handle is a base URL
that is not absolute.
"""

from __future__ import annotations


class FeedFinderError(Exception):
    """Base exception for feed discovery failures."""
    pass


class UrlError(FeedFinderError, ValueError):
    """A URL could not be used for discovery."""
    pass


class MalformedUrlError(UrlError):
    """The URL has no usable scheme/host structure and cannot be resolved."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"malformed URL {url!r}: {reason}")


class FetchError(FeedFinderError):
    """The page could not be retrieved (network or HTTP status failure)."""
    pass
