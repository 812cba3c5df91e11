"""
rss-transmission command-line entry point.

Usage:
  rss-transmission [-c PATH]

Loads the YAML configuration (default: config/app.yaml), fetches every
configured feed and adds the extracted links to Transmission. Meant to be
run from cron or a systemd timer.

Exit status is 0 once the configuration loads, even if individual feeds
or links fail (those are logged); 1 if the configuration cannot be loaded.
"""

from typing import List, Optional
import argparse
import logging
import os

from rss_transmission import __version__
from rss_transmission.api.pipeline import FeedPipeline
from rss_transmission.config import DEFAULT_CONFIG_PATH, load_config
from rss_transmission.exceptions import ConfigError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rss-transmission',
        description='Add torrents found in RSS feeds to a Transmission daemon.'
    )
    parser.add_argument(
        '-c', '--config',
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to the app configuration file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def setup_logging() -> None:
    level = os.getenv('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    pipeline = FeedPipeline(config)
    try:
        summary = pipeline.run()
    finally:
        pipeline.close()

    if not summary.ok:
        logger.warning(
            f"Finished with failures: {summary.feeds_failed} feed(s) failed, "
            f"{summary.submit_failed} link(s) rejected"
        )
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
