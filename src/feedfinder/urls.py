"""Resolution and canonicalisation of URLs found in markup.

Canonical form lower-cases the scheme and host, drops the scheme's default port
and uses ``/`` for an empty path. The canonical string is the key used to
deduplicate discovered feeds.
"""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit, urlunsplit

from .errors import MalformedUrlError

DEFAULT_PORTS = {"http": 80, "https": 443}

_WHITESPACE = re.compile(r"\s")


def _remove_dot_segments(path: str) -> str:
    segments = path.split("/")
    output = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if len(output) > 1:
                output.pop()
            continue
        output.append(segment)
    if segments[-1] in (".", ".."):
        # keep the trailing slash of "/a/." and "/a/b/.."
        output.append("")
    return "/".join(output)


def canonicalize(url: str) -> str:
    """Return the canonical form of the absolute *url*.

    Raises ``MalformedUrlError`` when *url* lacks a scheme or a host.
    """
    if not isinstance(url, str) or not url.strip():
        raise MalformedUrlError(str(url), "empty URL")
    url = url.strip()
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as exc:
        raise MalformedUrlError(url, str(exc)) from exc

    scheme = parts.scheme.lower()
    host = parts.hostname
    if not scheme or not host:
        raise MalformedUrlError(url)
    if _WHITESPACE.search(parts.netloc):
        raise MalformedUrlError(url, "whitespace in host")

    if ":" in host:
        # IPv6 literal
        host = f"[{host}]"
    netloc = host
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{host}:{port}"
    userinfo, sep, _ = parts.netloc.rpartition("@")
    if sep:
        netloc = f"{userinfo}@{netloc}"

    path = _remove_dot_segments(parts.path) if parts.path.startswith("/") else parts.path
    path = path or "/"
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def resolve(base: str, maybe_relative: str) -> str:
    """Resolve *maybe_relative* against the absolute *base* and canonicalise it.

    *maybe_relative* may be absolute, scheme-relative (``//host/path``),
    absolute-path (``/path``) or relative (``path``). Raises
    ``MalformedUrlError`` if *base* is not absolute or the result has no
    scheme/host (``mailto:`` and ``javascript:`` references, for instance).
    """
    base = canonicalize(base)
    if maybe_relative is None or not maybe_relative.strip():
        raise MalformedUrlError(str(maybe_relative), "empty reference")
    try:
        joined = urljoin(base, maybe_relative.strip())
    except ValueError as exc:
        raise MalformedUrlError(maybe_relative, str(exc)) from exc
    return canonicalize(joined)


def site_root(url: str) -> str:
    """Return ``scheme://host[:port]/`` for *url*."""
    parts = urlsplit(canonicalize(url))
    return urlunsplit((parts.scheme, parts.netloc, "/", "", ""))
