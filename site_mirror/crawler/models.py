# site_mirror/crawler/models.py
"""
Data models for the SiteMirror crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set, Union


class InvalidURLError(ValueError):
    """Raised when the seed URL is not an absolute http(s) URL."""


class FetchError(Exception):
    """A single URL could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(slots=True, frozen=True)
class CrawlTarget:
    """Absolute, canonical URL scheduled for download plus its host."""

    url: str
    host: str


@dataclass(slots=True)
class PageData:
    """Holds the URL and content of a fetched document (text or binary)."""

    url: str
    content: Union[str, bytes]
    content_type: str = ""


@dataclass(slots=True)
class CrawlState:
    """URLs already processed in this run. Pass the same instance again to never re-fetch them."""

    visited: Set[str] = field(default_factory=set)


@dataclass(slots=True)
class SavedDocument:
    url: str
    path: Path


@dataclass(slots=True)
class FailedDocument:
    url: str
    error: str


@dataclass(slots=True)
class MirrorResult:
    """In-memory summary of a crawl; nothing here is written to disk."""

    saved: List[SavedDocument] = field(default_factory=list)
    failed: List[FailedDocument] = field(default_factory=list)
    out_of_scope: List[str] = field(default_factory=list)
    revisits: int = 0

    @property
    def saved_urls(self) -> List[str]:
        return [doc.url for doc in self.saved]
