"""
XML parsing modules for feed link extraction.

- scanner: lazy event stream (open / close / empty / end-of-document)
- path_matcher: exact root-to-element tag path comparison
- attribute_extractor: attribute lookup on matched elements
- extractor: the driver combining the three
"""

from .scanner import (
    scan,
    ElementOpen,
    ElementClose,
    ElementEmpty,
    EndOfDocument
)
from .path_matcher import is_match
from .attribute_extractor import extract
from .extractor import extract_urls

__all__ = [
    # Scanning
    'scan',
    'ElementOpen',
    'ElementClose',
    'ElementEmpty',
    'EndOfDocument',
    # Matching
    'is_match',
    'extract',
    'extract_urls',
]
