# === FILE: site_sketch/parser/html_parser.py ===
"""HTML content normalization for SiteSketch.

Downstream consumers (a prompt for an LLM, a Markdown dump) only need the
structural markup of a page, so extraction is deliberately lossy:

* title: text of the first ``<title>``, or a caller-supplied default
  (the fetched URL) if the document has none.
* body: serialized ``<body>`` element with every ``<script>`` and
  ``<style>`` subtree removed. Documents without a ``<body>`` are
  serialized whole, with the same subtrees removed.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup

__all__: Sequence[str] = ("ExtractedContent", "extract_content", "STRIPPED_TAGS")

STRIPPED_TAGS: tuple[str, ...] = ("script", "style")


@dataclass(slots=True, frozen=True)
class ExtractedContent:
    title: str
    body: str


def extract_content(raw_html: str, default_title: str = "") -> ExtractedContent:
    """Parse *raw_html* and return its title and normalized body markup."""
    soup = BeautifulSoup(raw_html, "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text() if title_tag is not None else default_title

    # html.parser never synthesizes <body>; fragments are stripped and kept whole
    body = soup.find("body")
    root = body if body is not None else soup
    for element in root.find_all(STRIPPED_TAGS):
        element.decompose()
    return ExtractedContent(title=title, body=str(root))
