"""
Transmission Service

Submits download links to a Transmission daemon through its JSON-RPC
interface using the transmission-rpc client library.
"""

from typing import Optional
import logging

from transmission_rpc import Client
from transmission_rpc.error import TransmissionError

from rss_transmission.config import TransmissionConfig
from rss_transmission.exceptions import SubmitError

logger = logging.getLogger(__name__)


class TransmissionService:
    """
    Service for adding torrents to a Transmission daemon.

    The RPC client is created on first use: transmission-rpc performs a
    session handshake when constructed, and a run whose feeds yield no
    links should not need a reachable daemon.

    Usage:
        service = TransmissionService(config.transmission_rpc)
        service.submit("https://example.org/file.torrent")
    """

    def __init__(self, config: TransmissionConfig, timeout: float = 30.0):
        """
        Args:
            config: Daemon endpoint and credentials
            timeout: RPC request timeout in seconds
        """
        self.config = config
        self.timeout = timeout
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        """Lazily connected transmission-rpc client."""
        if self._client is None:
            logger.debug(f"Connecting to Transmission at {self.config.endpoint_url}")
            self._client = Client(
                protocol='http',
                host=self.config.host,
                port=self.config.port,
                path=f"/{self.config.path}",
                username=self.config.username or None,
                password=self.config.password or None,
                timeout=self.timeout
            )
        return self._client

    def submit(self, url: str) -> None:
        """
        Add one torrent by URL or magnet link.

        Args:
            url: Link extracted from a feed

        Raises:
            SubmitError: If the daemon is unreachable or rejects the torrent,
                         or the client refuses the link (e.g. file:// URLs)
        """
        try:
            torrent = self.client.add_torrent(url)
        except (TransmissionError, ValueError) as e:
            raise SubmitError(url, str(e)) from e

        logger.debug(f"Transmission accepted {url} as torrent id {torrent.id}")
