# pubsub_service/workers/dns_probe_worker.py
"""
Startup DNS probe for the Pub/Sub endpoint.
"""

import logging
import socket
import threading
from typing import Callable, List, Optional

from pubsub_service.core.interfaces import IWorker

logger = logging.getLogger(__name__)

Resolver = Callable[..., list]


class DnsProbeWorker(IWorker):
    """
    Resolves the Pub/Sub hostname once in a detached thread and logs the result.
    A failed lookup is ignored on purpose: the probe is diagnostic only and
    never affects application health.
    """

    def __init__(self, host: str, resolver: Optional[Resolver] = None):
        self.host = host
        self._resolver = resolver or socket.getaddrinfo
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        self._thread = threading.Thread(
            target=self.probe, name="dns-probe", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        # Detached; nothing to stop.
        pass

    def probe(self) -> Optional[List[str]]:
        try:
            infos = self._resolver(self.host, None)
        except OSError:
            return None

        addresses = sorted({info[4][0] for info in infos})
        logger.info(f"Resolved {self.host}: {addresses}")
        return addresses


def create_dns_probe_worker(host: str) -> DnsProbeWorker:
    """Factory function for creating the DNS probe worker"""
    return DnsProbeWorker(host)
