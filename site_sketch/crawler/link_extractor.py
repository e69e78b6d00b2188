# site_sketch/crawler/link_extractor.py
"""
Same-origin link discovery for SiteSketch.

Deduplication is deliberately left to the frontier: links come back in
document order with repeats intact.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

# every element carrying an href: <a>, <area>, <link>, ...
LINK_SELECTOR = "[href]"


def host_of(url: str) -> Optional[str]:
    """
    Return the host component of *url*, or None if it has none or does not parse.

    A port that is not a number in 0..65535, or a host containing whitespace,
    counts as a parse failure.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
        parts.port  # raises ValueError for a malformed port
    except ValueError:
        return None
    if not host or any(ch.isspace() for ch in host):
        return None
    return host


def belongs_to_origin(candidate_url: str, origin_host: str) -> bool:
    """
    True iff *candidate_url* parses and its host equals *origin_host* exactly.

    Subdomains, scheme and port are not considered.
    """
    host = host_of(candidate_url)
    return host is not None and host == origin_host


def resolve_href(base_url: str, href: str) -> Optional[str]:
    """Resolve *href* against *base_url*; None when it cannot be turned into an absolute URL."""
    try:
        absolute = urljoin(base_url, href.strip())
    except ValueError:
        return None
    return absolute if host_of(absolute) else None


def extract_links(raw_html: str, base_url: str, origin_host: str) -> List[str]:
    """
    Extract absolute same-origin URLs from every ``href`` in *raw_html*.

    Relative, protocol-relative and fragment-only references are resolved
    against *base_url*. Anything that fails to resolve is skipped.
    """
    soup = BeautifulSoup(raw_html, "html.parser")
    links: List[str] = []
    for tag in soup.select(LINK_SELECTOR):
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        absolute = resolve_href(base_url, href_val)
        if absolute is not None and belongs_to_origin(absolute, origin_host):
            links.append(absolute)
    return links


__all__ = ["belongs_to_origin", "extract_links", "host_of", "resolve_href", "LINK_SELECTOR"]
