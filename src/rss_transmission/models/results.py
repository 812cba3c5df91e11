"""
Result records returned by the feed pipeline.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FeedResult:
    """Outcome of processing a single configured feed."""
    url: str
    parser: str
    status: str  # 'success', 'failed'
    links: List[str] = field(default_factory=list)
    submitted: int = 0
    failed_links: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class RunSummary:
    """
    Aggregate outcome of one pipeline run.

    Individual feed and submission failures are recorded here rather
    than raised, so one broken feed never hides the others.
    """
    feeds: List[FeedResult] = field(default_factory=list)

    @property
    def feeds_failed(self) -> int:
        return sum(1 for f in self.feeds if f.status == 'failed')

    @property
    def links(self) -> int:
        return sum(len(f.links) for f in self.feeds)

    @property
    def submitted(self) -> int:
        return sum(f.submitted for f in self.feeds)

    @property
    def submit_failed(self) -> int:
        return sum(len(f.failed_links) for f in self.feeds)

    @property
    def ok(self) -> bool:
        """True when every feed was processed and every link was accepted."""
        return self.feeds_failed == 0 and self.submit_failed == 0

    def to_dict(self) -> dict:
        return {
            'feeds': len(self.feeds),
            'feeds_failed': self.feeds_failed,
            'links': self.links,
            'submitted': self.submitted,
            'submit_failed': self.submit_failed,
        }
