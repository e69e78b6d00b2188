# === FILE: site_sketch/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import Dict, Optional

from aiohttp import ClientSession

from site_sketch.config import CrawlerConfig
from site_sketch.crawler.batch import BatchRunner
from site_sketch.crawler.fetcher import Fetcher, create_session
from site_sketch.crawler.frontier import Frontier
from site_sketch.crawler.link_extractor import host_of
from site_sketch.crawler.models import CrawlOutput
from site_sketch.exceptions import InvalidStartUrl
from site_sketch.logger import LOGGER_NAME

__all__ = ("AsyncCrawler", "origin_host_of")


def origin_host_of(start_url: Optional[str]) -> str:
    """Return the host the crawl is confined to, or raise InvalidStartUrl."""
    if not start_url:
        raise InvalidStartUrl(start_url, "no start URL given")
    host = host_of(start_url)
    if not host:
        raise InvalidStartUrl(start_url)
    return host


class AsyncCrawler:
    """Пакетный асинхронный краулер, ограниченный одним хостом."""

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        # validated up front: nothing touches the network for a bad start URL
        self.origin_host = origin_host_of(config.start_url)
        self.start_url: str = config.start_url  # type: ignore[assignment]
        self.session = session
        self._owns_session = session is None
        self.logger = logging.getLogger(LOGGER_NAME)
        self.failures: Dict[str, str] = {}
        self.batches = 0
        self.frontier: Optional[Frontier] = None

    async def __aenter__(self) -> AsyncCrawler:
        if self.session is None:
            self.session = create_session(self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlOutput:
        if not self.session:
            raise RuntimeError("Session not initialized")
        cfg = self.config
        self.logger.info("Старт обхода: %s (host %s)", self.start_url, self.origin_host)
        started = time.monotonic()

        frontier = self.frontier = Frontier(self.start_url, cfg.max_pages, cfg.max_queue_size)
        runner = BatchRunner(Fetcher(self.session), self.origin_host, cfg.request_delay)
        output: CrawlOutput = {}

        while frontier.has_work():
            batch = frontier.drain(cfg.batch_size)
            if not batch:
                break
            self.batches += 1
            self.logger.info(
                "Processing batch of %d URLs... (Total visited: %d)", len(batch), len(frontier.visited)
            )

            result = await runner.run_batch(batch)

            for url, page in result.results.items():
                output.setdefault(url, page)
            self.failures.update(result.failures)

            added = frontier.enqueue(result.discovered)
            dropped = frontier.truncate()
            self.logger.debug("Queued %d new URLs, dropped %d over the cap, %d pending", added, dropped, len(frontier))

        duration = time.monotonic() - started
        self.logger.info(
            "Завершено: %d страниц за %.2f с (%d пакетов, %d ошибок)",
            len(output), duration, self.batches, len(self.failures),
        )
        return output
