"""
Data models for the SiteSketch crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(slots=True, frozen=True)
class FetchedPage:
    """A successfully fetched page: extracted title/content plus the raw markup."""

    url: str
    title: str
    content: str
    html: str


@dataclass(slots=True, frozen=True)
class PageResult:
    """Normalized result for one successfully fetched URL."""

    url: str
    title: str
    content: str
    links: Tuple[str, ...] = ()


@dataclass(slots=True)
class BatchResult:
    """What one batch produced: successes, discovered links and per-URL failures."""

    results: Dict[str, PageResult] = field(default_factory=dict)
    discovered: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)


# URL -> PageResult, one entry per URL ever successfully fetched.
CrawlOutput = Dict[str, PageResult]
