# File: site_sketch/aggregator.py
"""site_sketch.aggregator: сборка результатов обхода в отчёт для форматтеров."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Mapping, TypedDict
from urllib.parse import urlsplit

from site_sketch.crawler.models import PageResult

HOME_PAGE_LABEL = "/ (Home Page)"
NO_AUTH_HINT = "No specific authentication method detected. Manual analysis required."
BEARER_HINT = "Bearer token authentication likely required. Check API documentation or network requests."
_LOGIN_MARKERS = ("login", "signin", "auth")


class PageInfo(TypedDict):
    """Информация о странице, готовая к выводу."""

    url: str
    path: str
    title: str
    content: str


@dataclass(slots=True)
class CrawlReport:
    """Результат обхода: стартовый URL, страницы (по пути) и подсказка об авторизации."""

    start_url: str
    pages: List[PageInfo] = field(default_factory=list)
    auth_details: str = NO_AUTH_HINT

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def url_path(url: str) -> str:
    """Путь URL ("/" если пустой)."""
    try:
        return urlsplit(url).path or "/"
    except ValueError:
        return url


def page_label(path: str) -> str:
    return HOME_PAGE_LABEL if path == "/" else path


def detect_auth_details(pages: Iterable[PageInfo]) -> str:
    """Ищет признаки авторизации: форму входа или упоминание bearer/authorization."""
    for page in pages:
        content = page["content"].lower()
        path = page["path"].lower()
        if any(marker in path for marker in _LOGIN_MARKERS):
            if "password" in content and "input" in content:
                return (
                    f"Login page detected at {page['path']}. Use BasicAuth or form-based "
                    "authentication. Analyze the form structure for exact selectors."
                )
        if "bearer" in content or "authorization" in content:
            return BEARER_HINT
    return NO_AUTH_HINT


def build_page_sections(pages: Iterable[PageInfo]) -> str:
    """Блоки "- PATH HTML:" с HTML каждой страницы в fenced-блоке."""
    sections = [
        f"- {page_label(page['path'])} HTML:\n```html\n{page['content']}\n```" for page in pages
    ]
    return "\n".join(sections) if sections else "[No pages scraped]"


def aggregate_results(output: Mapping[str, PageResult], start_url: str) -> CrawlReport:
    """Собирает CrawlOutput в CrawlReport; страницы сортируются по пути, затем по URL."""
    pages: List[PageInfo] = [
        {"url": url, "path": url_path(url), "title": page.title, "content": page.content}
        for url, page in output.items()
    ]
    pages.sort(key=lambda p: (p["path"], p["url"]))
    return CrawlReport(start_url=start_url, pages=pages, auth_details=detect_auth_details(pages))
