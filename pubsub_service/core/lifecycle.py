# pubsub_service/core/lifecycle.py
"""
Application lifecycle management following SOLID principles.
"""

import logging
import signal
import threading
from typing import List, Optional

from pubsub_service.core.interfaces import IService, IWorker
from pubsub_service.exceptions import LifecycleError

logger = logging.getLogger(__name__)


class ApplicationLifecycle:
    """
    Application lifecycle manager following Single Responsibility Principle.
    Services start in registration order and are cleaned up in reverse order.
    """

    def __init__(self):
        self.services: List[IService] = []
        self.workers: List[IWorker] = []
        self.is_running = False
        self.failure: Optional[BaseException] = None
        self.shutdown_event = threading.Event()
        self._started: List[IService] = []
        self._lock = threading.Lock()

    def register_service(self, service: IService) -> None:
        """Register a service for lifecycle management"""
        self.services.append(service)
        logger.debug(f"Registered service: {service.__class__.__name__}")

    def register_worker(self, worker: IWorker) -> None:
        """Register a worker for lifecycle management"""
        self.workers.append(worker)
        logger.debug(f"Registered worker: {worker.__class__.__name__}")

    def install_signal_handlers(self) -> None:
        """Route SIGINT/SIGTERM to a graceful shutdown"""
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

    def initialize(self) -> None:
        """Initialize all registered services, in order"""
        logger.info("🔄 Initializing application components...")
        self.is_running = True

        for service in self.services:
            try:
                service.initialize()
            except Exception as e:
                logger.error(
                    f"❌ Failed to initialize service {service.__class__.__name__}: {e}"
                )
                self._rollback()
                self.is_running = False
                raise
            self._started.append(service)
            logger.debug(f"✅ Initialized service: {service.__class__.__name__}")

        logger.info("✅ All components initialized successfully")

    def start_workers(self) -> None:
        """Start all registered workers"""
        logger.info("🚀 Starting background workers...")

        for worker in self.workers:
            try:
                worker.start()
                logger.debug(f"✅ Started worker: {worker.__class__.__name__}")
            except Exception as e:
                logger.error(
                    f"❌ Failed to start worker {worker.__class__.__name__}: {e}"
                )
                # Continue with other workers

    def request_shutdown(self) -> None:
        self.shutdown_event.set()

    def fail(self, error: BaseException) -> None:
        """Record a fatal error raised outside the main thread"""
        with self._lock:
            if self.failure is None:
                self.failure = error
        self.request_shutdown()

    def wait_for_shutdown(self, poll_interval: float = 1.0) -> None:
        """Block until shutdown is requested, then shut down"""
        try:
            while not self.shutdown_event.wait(timeout=poll_interval):
                pass
        except KeyboardInterrupt:
            logger.info("🛑 Received shutdown signal")
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """Graceful shutdown of all components"""
        with self._lock:
            if not self.is_running:
                return
            self.is_running = False

        logger.info("🛑 Initiating graceful shutdown...")
        self.shutdown_event.set()

        self._stop_workers()
        failures = self._cleanup_services()

        if failures:
            raise LifecycleError(failures)

        logger.info("✅ Graceful shutdown completed")

    def _stop_workers(self) -> None:
        for worker in self.workers:
            try:
                worker.stop()
                logger.debug(f"✅ Stopped worker: {worker.__class__.__name__}")
            except Exception as e:
                logger.error(f"❌ Error stopping worker {worker.__class__.__name__}: {e}")

    def _cleanup_services(self) -> List[Exception]:
        logger.info("🧹 Cleaning up services...")
        failures: List[Exception] = []

        while self._started:
            service = self._started.pop()  # Reverse order for cleanup
            try:
                service.cleanup()
                logger.debug(f"✅ Cleaned up service: {service.__class__.__name__}")
            except Exception as e:
                logger.error(
                    f"❌ Error cleaning up service {service.__class__.__name__}: {e}"
                )
                failures.append(e)

        return failures

    def _rollback(self) -> None:
        """Undo a partial startup"""
        for e in self._cleanup_services():
            logger.warning(f"Ignoring cleanup error after failed startup: {e}")

    def _signal_handler(self, signum, frame):
        logger.info(f"🔔 Received signal {signum}")
        self.request_shutdown()
