"""
Pydantic models and result records.

This module contains the immutable extraction rule and the records the
pipeline returns for monitoring.
"""

from rss_transmission.models.rule import ParserRule
from rss_transmission.models.results import FeedResult, RunSummary

__all__ = [
    'ParserRule',
    'FeedResult',
    'RunSummary',
]
