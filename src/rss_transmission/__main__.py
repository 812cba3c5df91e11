import sys

from rss_transmission.cli import main

sys.exit(main())
