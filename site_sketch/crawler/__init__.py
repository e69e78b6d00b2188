"""Crawl engine: fetcher, link extraction, batch fan-out and frontier control."""
from site_sketch.crawler.crawler import AsyncCrawler
from site_sketch.crawler.models import CrawlOutput, PageResult

__all__ = ["AsyncCrawler", "CrawlOutput", "PageResult"]
