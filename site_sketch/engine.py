# File: site_sketch/engine.py
"""site_sketch.engine: запуск обхода, агрегация и форматирование результата."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional, Union

from site_sketch.aggregator import CrawlReport, aggregate_results
from site_sketch.config import CrawlerConfig, with_overrides
from site_sketch.crawler.crawler import AsyncCrawler
from site_sketch.crawler.models import CrawlOutput
from site_sketch.logger import logger
from site_sketch.report import get_formatter

__all__ = ["Engine", "crawl", "start_crawl"]


async def start_crawl(cfg: CrawlerConfig) -> CrawlOutput:
    """
    Запускает асинхронный краулер в контексте и возвращает CrawlOutput.

    InvalidStartUrl возникает до открытия HTTP-сессии.
    """
    crawler = AsyncCrawler(cfg)
    async with crawler:
        return await crawler.crawl()


async def crawl(
    start_url: str, batch_size: int = 10, max_pages: int = 50, **overrides: Any
) -> CrawlOutput:
    """Обход с параметрами по умолчанию; прочие поля CrawlerConfig передаются через overrides."""
    cfg = with_overrides(
        CrawlerConfig(), start_url=start_url, batch_size=batch_size, max_pages=max_pages, **overrides
    )
    return await start_crawl(cfg)


class Engine:
    """Фасад для CLI и тестов: обход, агрегация и рендер итогового документа."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config

    def run(self) -> CrawlReport:
        """Синхронно выполняет обход и возвращает агрегированный отчёт."""
        logger.info("Starting crawl…")
        try:
            output = asyncio.run(start_crawl(self.config))
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise
        return aggregate_results(output, self.config.start_url or "")

    def render(self, report: CrawlReport, template_dir: Union[str, Path, None] = None) -> str:
        """Рендерит отчёт форматтером из config.output_format."""
        return get_formatter(self.config.output_format, template_dir).render(report)

    def execute(self, template_dir: Optional[Union[str, Path]] = None) -> str:
        return self.render(self.run(), template_dir)
