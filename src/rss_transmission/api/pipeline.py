"""
High-level pipeline orchestrator for feed-driven torrent submission.

FeedPipeline coordinates the complete workflow for every configured feed:
- Resolve the feed's parser rule
- Download the feed (via FeedFetcher)
- Extract download links (via extract_urls)
- Submit each link (via TransmissionService)

Design Philosophy:
- Explicit configuration (AppConfig passed in, no global state)
- Resilient processing (continues after individual feed or link failures)
- Statistics-based monitoring (returns a RunSummary)
"""

from typing import Optional
import logging

from rss_transmission.config import AppConfig, FeedConfig
from rss_transmission.exceptions import FetchError, ParseError, SubmitError
from rss_transmission.models.results import FeedResult, RunSummary
from rss_transmission.parsers.extractor import extract_urls
from rss_transmission.services.feed_fetcher import FeedFetcher
from rss_transmission.services.transmission import TransmissionService

logger = logging.getLogger(__name__)


class FeedPipeline:
    """
    Sequential feed processor.

    Feeds are handled one by one in configuration order, and links within
    a feed are submitted one by one in document order.

    Usage:
        config = load_config("config/app.yaml")
        with FeedPipeline(config) as pipeline:
            summary = pipeline.run()
        print(summary.to_dict())
    """

    def __init__(
        self,
        config: AppConfig,
        fetcher: Optional[FeedFetcher] = None,
        submitter: Optional[TransmissionService] = None
    ):
        """
        Initialize pipeline.

        Args:
            config: Validated application configuration
            fetcher: Feed download collaborator (default: FeedFetcher)
            submitter: Torrent submission collaborator (default: TransmissionService)
        """
        self.config = config
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or FeedFetcher(
            timeout=config.fetch_timeout,
            user_agent=config.user_agent
        )
        self.submitter = submitter or TransmissionService(
            config.transmission_rpc,
            timeout=config.rpc_timeout
        )

    def run(self) -> RunSummary:
        """
        Process every configured feed.

        Returns:
            RunSummary with one FeedResult per feed
        """
        summary = RunSummary()

        logger.info(f"Processing {len(self.config.rss)} feed(s)")

        for feed in self.config.rss:
            summary.feeds.append(self.process_feed(feed))

        stats = summary.to_dict()
        logger.info(
            f"Run complete: {stats['feeds']} feed(s), {stats['feeds_failed']} failed, "
            f"{stats['links']} link(s), {stats['submitted']} added, "
            f"{stats['submit_failed']} rejected"
        )

        return summary

    def close(self) -> None:
        """Release the HTTP session if this pipeline created the fetcher."""
        if self._owns_fetcher:
            self.fetcher.close()

    def __enter__(self) -> "FeedPipeline":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def process_feed(self, feed: FeedConfig) -> FeedResult:
        """
        Fetch one feed, extract its links and submit them.

        Failures are logged and recorded on the result; they never
        propagate.
        """
        result = FeedResult(url=feed.url, parser=feed.parser, status='success')

        try:
            rule = self.config.rule_for(feed)
            content = self.fetcher.fetch(feed.url)
            result.links = extract_urls(content, rule)
        except KeyError as e:
            result.status = 'failed'
            result.error = str(e)
            logger.error(f"Skipping feed {feed.url}: {e}")
            return result
        except FetchError as e:
            result.status = 'failed'
            result.error = str(e)
            logger.error(f"Skipping feed {feed.url} (parser '{feed.parser}'): {e}")
            return result
        except ParseError as e:
            result.status = 'failed'
            result.error = str(e)
            logger.error(
                f"Failed to parse feed {feed.url} with parser '{feed.parser}': {e}"
            )
            return result
        except Exception as e:
            result.status = 'failed'
            result.error = f"{type(e).__name__}: {e}"
            logger.error(
                f"Unexpected error processing feed {feed.url} "
                f"(parser '{feed.parser}'): {e}",
                exc_info=True
            )
            return result

        logger.info(
            f"Feed {feed.url} (parser '{feed.parser}'): {len(result.links)} link(s)"
        )

        self._submit_all(result)

        return result

    def _submit_all(self, result: FeedResult) -> None:
        """Submit links in order, continuing past individual failures."""
        for url in result.links:
            logger.info(f"Adding torrent: {url}")
            try:
                self.submitter.submit(url)
            except SubmitError as e:
                result.failed_links.append(url)
                logger.error(str(e))
                continue
            except Exception as e:
                result.failed_links.append(url)
                logger.error(
                    f"Unexpected error adding torrent {url} from feed {result.url} "
                    f"(parser '{result.parser}'): {e}",
                    exc_info=True
                )
                continue
            result.submitted += 1
