"""Custom exceptions for SiteSketch."""
from __future__ import annotations


class SiteSketchError(Exception):
    """Base class for all SiteSketch errors."""


class InvalidStartUrl(SiteSketchError):
    """Raised when the crawl start URL cannot be parsed or has no host."""

    def __init__(self, url: object, reason: str = "is not an absolute URL with a host"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid start URL {url!r}: {reason}")


class FetchError(SiteSketchError):
    """A single page could not be fetched. Never fatal for the crawl."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(message)


class HttpStatusError(FetchError):
    """Server answered with a status outside the 2xx range."""

    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"HTTP error: {status}")


class TransportError(FetchError):
    """DNS, connection, timeout or malformed-URL failure."""

    def __init__(self, url: str, message: str):
        super().__init__(url, f"transport error: {message}")


class OutputWriteError(SiteSketchError):
    """Raised when the rendered document cannot be written to its sink."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing to file {path}: {reason}")
