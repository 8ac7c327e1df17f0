"""Value types shared by the scanner, the detectors and the aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class FeedKind(str, Enum):
    RSS = "RSS"
    ATOM = "Atom"
    JSON = "JSON"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Feed:
    """A discovered feed: absolute, canonical ``url`` plus its inferred format."""

    url: str
    kind: FeedKind = FeedKind.UNKNOWN

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "kind": self.kind.value}


@dataclass(frozen=True)
class PageContext:
    """A fetched page: final (post-redirect) URL and its markup.

    ``html`` may be text or raw bytes; bytes are decoded by the scanner.
    """

    base_url: str
    html: Union[str, bytes] = ""


@dataclass(frozen=True)
class LinkTag:
    rel: str
    type: str
    href: Optional[str]


@dataclass(frozen=True)
class AnchorTag:
    href: Optional[str]
    text: str


@dataclass(frozen=True)
class GeneratorMeta:
    content: str


@dataclass
class ScanResult:
    """Facts collected by one pass of the scanner, in document order."""

    links: List[LinkTag] = field(default_factory=list)
    anchors: List[AnchorTag] = field(default_factory=list)
    generator: Optional[GeneratorMeta] = None
