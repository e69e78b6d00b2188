# site_sketch/crawler/frontier.py
"""
Frontier state for one crawl: FIFO queue of pending URLs plus the visited set.

All mutation happens from the single controlling coroutine between batches.
URLs are compared as raw strings; no canonicalization is applied.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Set


class Frontier:
    """Pending queue + visited set with the page and queue-size bounds."""

    def __init__(self, start_url: str, max_pages: int, max_queue_size: int = 1000) -> None:
        self.max_pages = max_pages
        self.max_queue_size = max_queue_size
        self.visited: Set[str] = set()
        self._queue: Deque[str] = deque([start_url])
        self._queued: Set[str] = {start_url}

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def pending(self) -> List[str]:
        return list(self._queue)

    @property
    def budget(self) -> int:
        """How many more URLs may still be visited."""
        return max(0, self.max_pages - len(self.visited))

    def has_work(self) -> bool:
        return bool(self._queue) and self.budget > 0

    def drain(self, batch_size: int) -> List[str]:
        """
        Pop up to *batch_size* unvisited URLs from the front, never exceeding
        the page budget. Already-visited entries are dropped without using a
        slot. Drained URLs are marked visited before they are returned.
        """
        limit = min(batch_size, self.budget)
        batch: List[str] = []
        while self._queue and len(batch) < limit:
            url = self._queue.popleft()
            self._queued.discard(url)
            if url in self.visited:
                continue
            self.visited.add(url)
            batch.append(url)
        return batch

    def enqueue(self, urls: Iterable[str]) -> int:
        """Append URLs that are neither visited nor queued yet; return how many were added."""
        added = 0
        for url in urls:
            if url in self.visited or url in self._queued:
                continue
            self._queue.append(url)
            self._queued.add(url)
            added += 1
        return added

    def truncate(self) -> int:
        """Drop entries from the back until the queue fits; return how many were dropped."""
        dropped = 0
        while len(self._queue) > self.max_queue_size:
            self._queued.discard(self._queue.pop())
            dropped += 1
        return dropped
