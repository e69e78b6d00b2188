# site_sketch/crawler/fetcher.py
"""
Fetcher module: a single HTTP GET per call, with timeout and status validation.

No retries: a failed fetch simply means no result for that URL.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_sketch.config import CrawlerConfig
from site_sketch.crawler.models import FetchedPage
from site_sketch.exceptions import HttpStatusError, TransportError
from site_sketch.parser.html_parser import extract_content


def create_session(config: CrawlerConfig) -> ClientSession:
    """Build the shared session: fixed User-Agent and overall per-request timeout."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Fetches one URL and runs content extraction on the response."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchedPage:
        """
        GET *url* and return its extracted title/content plus raw markup.

        Raises HttpStatusError for non-2xx answers (body left unread) and
        TransportError for DNS/connection/timeout/invalid-URL failures.
        """
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    raise HttpStatusError(url, resp.status)
                html = await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise TransportError(url, "request timed out") from exc
        except (ClientError, ValueError) as exc:
            raise TransportError(url, str(exc) or type(exc).__name__) from exc

        extracted = extract_content(html, default_title=url)
        return FetchedPage(url=url, title=extracted.title, content=extracted.body, html=html)
