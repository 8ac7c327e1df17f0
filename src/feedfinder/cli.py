"""Command line front end.

List the feeds of a page whose HTML is piped on stdin::

    curl -sL https://example.com/ | feedfinder https://example.com/

or let feedfinder download the page itself::

    feedfinder --fetch https://example.com/
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .errors import FeedFinderError
from .fetcher import find_feeds
from .finder import discover
from .models import Feed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feedfinder",
        description="List RSS/Atom/JSON feeds advertised by a web page.",
    )
    parser.add_argument("url", help="final URL of the page (used to resolve relative links)")
    parser.add_argument(
        "--fetch",
        action="store_true",
        help="download the page instead of reading its HTML from stdin",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _print_feeds(url: str, feeds: List[Feed]) -> None:
    if not feeds:
        print(f"No feeds found for {url}.")
        return
    print(f"Possible feeds for {url}:")
    for feed in feeds:
        print(f"* {feed.kind.value} {feed.url}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        if args.fetch:
            feeds = find_feeds(args.url)
        else:
            html = sys.stdin.buffer.read() if hasattr(sys.stdin, "buffer") else sys.stdin.read()
            feeds = discover(args.url, html)
    except FeedFinderError as exc:
        print(f"Unable to find feeds due to error: {exc}")
        return 1

    _print_feeds(args.url, feeds)
    return 0


if __name__ == "__main__":
    sys.exit(main())
