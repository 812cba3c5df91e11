"""
High-level API for rss-transmission.

- FeedPipeline: fetch feeds, extract links and submit them to Transmission
"""

from rss_transmission.api.pipeline import FeedPipeline

__all__ = ['FeedPipeline']
