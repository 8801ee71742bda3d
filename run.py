# run.py
"""
Main application entry point with explicit dependency wiring.
"""

import logging
import sys
from threading import Thread
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from pubsub_service import create_app
from pubsub_service.config import Config
from pubsub_service.core.health_checker import HealthChecker
from pubsub_service.core.interfaces import IService
from pubsub_service.core.lifecycle import ApplicationLifecycle
from pubsub_service.core.logging_service import LoggingService
from pubsub_service.services.pubsub import PubSubClientService
from pubsub_service.services.pubsub.client import Connector
from pubsub_service.workers.dns_probe_worker import create_dns_probe_worker

logger = logging.getLogger("pubsub_service.app")


class FlaskServerService(IService):
    """
    Flask server wrapped as a service for lifecycle management.
    The listener thread starts only when every earlier service has started.
    """

    def __init__(self, app: Flask, config: Config, lifecycle: ApplicationLifecycle):
        self.app = app
        self.config = config
        self.lifecycle = lifecycle
        self.server_thread: Optional[Thread] = None

    def initialize(self) -> None:
        """Start the listener thread"""
        self.server_thread = Thread(target=self.run, name="http-server", daemon=True)
        self.server_thread.start()

    def run(self) -> None:
        try:
            self.start_server()
        except (Exception, SystemExit) as e:
            # werkzeug exits via sys.exit(1) when it cannot bind
            logger.critical(f"💥 HTTP listener failed: {e!r}")
            self.lifecycle.fail(e)

    def start_server(self) -> None:
        host, port = self.config.SERVER_HOST, self.config.SERVER_PORT

        if self.config.is_production():
            logger.info(f"🚀 Starting server in production mode on {host}:{port}")
            from waitress import serve

            serve(self.app, host=host, port=port)
        else:
            logger.info(f"🚀 Starting server in {self.config.ENV} mode on {host}:{port}")
            self.app.run(host=host, port=port, debug=False, use_reloader=False)

    def cleanup(self) -> None:
        # Daemon thread; ends with the process.
        pass


class ApplicationBootstrapper:
    """
    Application bootstrapper following Single Responsibility Principle.
    Only responsible for constructing components and registering them in order.
    """

    def __init__(self, config: Optional[Config] = None, connector: Optional[Connector] = None):
        self.config = config or Config()
        self.connector = connector
        self.lifecycle = ApplicationLifecycle()
        self.pubsub_service: Optional[PubSubClientService] = None
        self.flask_app: Optional[Flask] = None

    def bootstrap(self) -> ApplicationLifecycle:
        """Bootstrap the application with all dependencies"""
        logging_service = LoggingService(self.config)

        # 1. Pub/Sub client owner (first to start, last to stop)
        self.pubsub_service = PubSubClientService(
            self.config.pubsub_params(), connector=self.connector
        )
        self.lifecycle.register_service(self.pubsub_service)

        # 2. Flask app
        health_checker = HealthChecker(self.pubsub_service, self.config.HEALTH_TOPIC_ID)
        self.flask_app = create_app(self.config, health_checker, logging_service)

        # 3. Startup probe
        self.lifecycle.register_worker(
            create_dns_probe_worker(self.config.DNS_PROBE_HOST)
        )

        # 4. HTTP listener
        self.lifecycle.register_service(self._create_server(self.flask_app))

        return self.lifecycle

    def _create_server(self, flask_app: Flask) -> IService:
        return FlaskServerService(flask_app, self.config, self.lifecycle)


def run(bootstrapper: ApplicationBootstrapper) -> int:
    """Run the application until shutdown; returns the process exit code"""
    try:
        lifecycle = bootstrapper.bootstrap()
        lifecycle.initialize()
    except Exception as e:
        logger.critical(f"💥 Application startup failed: {e}")
        return 1

    lifecycle.install_signal_handlers()
    lifecycle.start_workers()
    logger.info("🎉 Application started successfully")

    try:
        lifecycle.wait_for_shutdown()
    except Exception as e:
        logger.critical(f"💥 Application shutdown failed: {e}")
        return 1

    if lifecycle.failure is not None:
        return 1
    return 0


def main() -> None:
    """Main entry point"""
    load_dotenv()
    sys.exit(run(ApplicationBootstrapper()))


if __name__ == "__main__":
    main()
