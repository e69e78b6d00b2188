# site_sketch/crawler/batch.py
"""
Batch runner: concurrent fetch + extract for one slice of the frontier.

Every URL gets its own task; the batch returns only once all of them have
resolved. Tasks never share mutable state, so no locking is needed here.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from site_sketch.crawler.fetcher import Fetcher
from site_sketch.crawler.link_extractor import extract_links
from site_sketch.crawler.models import BatchResult, PageResult
from site_sketch.exceptions import FetchError
from site_sketch.logger import LOGGER_NAME


@dataclass(slots=True, frozen=True)
class PageOutcome:
    """Result of one task: either a page with its links, or an error string."""

    url: str
    page: Optional[PageResult] = None
    error: Optional[str] = None


class BatchRunner:
    """Fans a batch of URLs out to the fetcher and collects the outcomes."""

    def __init__(self, fetcher: Fetcher, origin_host: str, request_delay: float = 0.1) -> None:
        self.fetcher = fetcher
        self.origin_host = origin_host
        self.request_delay = request_delay
        self.logger = logging.getLogger(LOGGER_NAME)

    async def run_batch(self, urls: Sequence[str]) -> BatchResult:
        outcomes = await asyncio.gather(
            *(self._process(url) for url in urls), return_exceptions=True
        )
        batch = BatchResult()
        for url, outcome in zip(urls, outcomes):
            if isinstance(outcome, BaseException):
                # anything _process did not anticipate still only costs this URL
                outcome = PageOutcome(url, error=repr(outcome))
            if outcome.page is None:
                batch.failures[url] = outcome.error or "unknown error"
                self.logger.warning("Error fetching %s: %s", url, batch.failures[url])
                continue
            batch.results.setdefault(url, outcome.page)
            batch.discovered.extend(outcome.page.links)
        return batch

    async def _process(self, url: str) -> PageOutcome:
        # pacing is per task, not per batch
        if self.request_delay > 0:
            await asyncio.sleep(self.request_delay)
        try:
            fetched = await self.fetcher.fetch(url)
        except FetchError as exc:
            return PageOutcome(url, error=str(exc))
        links = extract_links(fetched.html, fetched.url, self.origin_host)
        self.logger.debug("%s: %d same-origin links", url, len(links))
        page = PageResult(url=url, title=fetched.title, content=fetched.content, links=tuple(links))
        return PageOutcome(url, page=page)
