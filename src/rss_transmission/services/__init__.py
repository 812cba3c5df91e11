"""
Collaborator services used by the feed pipeline.

- FeedFetcher: HTTP download of feed content
- TransmissionService: torrent submission over Transmission RPC
"""

from rss_transmission.services.feed_fetcher import FeedFetcher
from rss_transmission.services.transmission import TransmissionService

__all__ = [
    'FeedFetcher',
    'TransmissionService'
]
