"""
Exception hierarchy for rss-transmission.

Library errors (lxml, requests, transmission-rpc, pydantic) are wrapped
into these types at the service boundary so callers only need to know
about one family of exceptions.
"""


class RssTransmissionError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(RssTransmissionError):
    """Configuration file is missing, unreadable or invalid."""


class ParseError(RssTransmissionError):
    """Feed content could not be tokenized as XML."""


class FetchError(RssTransmissionError):
    """Feed could not be downloaded."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to download RSS feed {url}: {message}")


class SubmitError(RssTransmissionError):
    """Download daemon rejected or never received a new torrent."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to add torrent {url}: {message}")
