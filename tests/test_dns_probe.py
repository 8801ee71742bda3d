"""Tests for the startup DNS probe."""

import logging
import socket

from pubsub_service.workers.dns_probe_worker import DnsProbeWorker


def _addrinfo(*addresses):
    return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", (addr, 0)) for addr in addresses]


def test_probe_logs_resolved_addresses(caplog):
    calls = []

    def resolver(host, port):
        calls.append(host)
        return _addrinfo("142.250.1.95", "142.250.1.95", "142.250.0.95")

    worker = DnsProbeWorker("pubsub.googleapis.com", resolver=resolver)

    with caplog.at_level(logging.INFO, logger="pubsub_service.workers.dns_probe_worker"):
        addresses = worker.probe()

    assert calls == ["pubsub.googleapis.com"]
    assert addresses == ["142.250.0.95", "142.250.1.95"]
    assert "Resolved pubsub.googleapis.com" in caplog.text


def test_probe_failure_is_silent(caplog):
    def resolver(host, port):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    worker = DnsProbeWorker("pubsub.googleapis.com", resolver=resolver)

    with caplog.at_level(logging.DEBUG):
        assert worker.probe() is None

    assert caplog.records == []


def test_start_runs_probe_in_daemon_thread():
    resolved = []
    worker = DnsProbeWorker("example.invalid", resolver=lambda h, p: resolved.append(h) or [])

    worker.start()
    worker._thread.join(timeout=1)

    assert worker._thread.daemon
    assert resolved == ["example.invalid"]
    worker.stop()
