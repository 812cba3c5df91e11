"""
rss-transmission: feed-driven torrent submission for Transmission.

Main package exports for user-facing API.
"""

from rss_transmission.api import FeedPipeline
from rss_transmission.config import AppConfig, load_config
from rss_transmission.models import ParserRule, FeedResult, RunSummary
from rss_transmission.parsers import extract_urls
from rss_transmission.exceptions import (
    RssTransmissionError,
    ConfigError,
    ParseError,
    FetchError,
    SubmitError
)

__version__ = '0.1.0'

__all__ = [
    'FeedPipeline',
    'AppConfig',
    'load_config',
    'ParserRule',
    'FeedResult',
    'RunSummary',
    'extract_urls',
    'RssTransmissionError',
    'ConfigError',
    'ParseError',
    'FetchError',
    'SubmitError',
]
