"""
Feed Fetcher Service

Downloads raw feed content over HTTP(S). The body is returned as bytes
so the XML declaration, not the HTTP headers, decides the encoding.
"""

from typing import Optional
import logging

import requests

from rss_transmission.exceptions import FetchError

logger = logging.getLogger(__name__)


class FeedFetcher:
    """
    Service for downloading RSS/XML feeds.

    Usage:
        fetcher = FeedFetcher(timeout=30)
        content = fetcher.fetch("https://example.org/feed.xml")
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "rss-transmission/0.1.0",
        session: Optional[requests.Session] = None
    ):
        """
        Initialize fetcher.

        Args:
            timeout: Connect/read timeout in seconds
            user_agent: User-Agent header for feed requests
            session: Optional pre-configured session (mainly for tests)
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': user_agent})

    def fetch(self, url: str) -> bytes:
        """
        GET a feed and return its body.

        Args:
            url: Feed URL

        Returns:
            Response body as bytes

        Raises:
            FetchError: On transport failure or HTTP status >= 400
        """
        logger.debug(f"Fetching feed {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        logger.debug(f"Fetched {url}: {len(response.content)} bytes")

        return response.content

    def close(self) -> None:
        self.session.close()
