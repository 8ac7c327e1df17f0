"""Discover RSS, Atom and JSON feeds from a web page's URL and HTML."""

from .errors import FeedFinderError, FetchError, MalformedUrlError, UrlError
from .finder import discover, discover_from_url, discover_page
from .models import Feed, FeedKind, PageContext
from .urls import canonicalize, resolve

__all__ = [
    "Feed",
    "FeedKind",
    "PageContext",
    "FeedFinderError",
    "UrlError",
    "MalformedUrlError",
    "FetchError",
    "discover",
    "discover_page",
    "discover_from_url",
    "canonicalize",
    "resolve",
]

__version__ = "0.1.0"
