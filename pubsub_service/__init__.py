# pubsub_service/__init__.py
"""
Flask application factory with explicitly passed dependencies.
"""

from typing import Optional

from flask import Flask

from .config import Config
from .core.health_checker import HealthChecker
from .core.interfaces import IConfigProvider, IHealthChecker
from .core.logging_service import LoggingService
from .routes import create_core_blueprint
from .services.pubsub import PubSubClientService
from .cli.topic_commands import topic_cli


class FlaskAppFactory:
    """
    Flask application factory.
    Follows Single Responsibility Principle - only creates Flask apps.
    """

    def __init__(
        self,
        config: IConfigProvider,
        health_checker: IHealthChecker,
        logging_service: Optional[LoggingService] = None,
    ):
        self.config = config
        self.health_checker = health_checker
        self.logging_service = logging_service

    def create_app(self) -> Flask:
        """Create and configure Flask application"""
        app = Flask(__name__)

        self._configure_flask(app)

        if self.logging_service is not None:
            self.logging_service.configure(app)

        self._register_blueprints(app)
        self._register_cli_commands(app)

        return app

    def _configure_flask(self, app: Flask) -> None:
        app.config["ENV_NAME"] = self.config.get("ENV")
        app.config["DEBUG"] = False
        app.extensions["pubsub_service"] = {"config": self.config}

    def _register_blueprints(self, app: Flask) -> None:
        app.register_blueprint(create_core_blueprint(self.health_checker))

    def _register_cli_commands(self, app: Flask) -> None:
        app.cli.add_command(topic_cli)


def create_app(
    config: Optional[Config] = None,
    health_checker: Optional[IHealthChecker] = None,
    logging_service: Optional[LoggingService] = None,
) -> Flask:
    """
    Main application factory function.

    With no arguments (e.g. `flask --app pubsub_service topic check`) it
    builds its own configuration and an unstarted Pub/Sub client owner,
    so `/health` reports 500 until a lifecycle starts the client.
    """
    config = config or Config()
    if health_checker is None:
        client_service = PubSubClientService(config.pubsub_params())
        health_checker = HealthChecker(client_service, config.HEALTH_TOPIC_ID)

    return FlaskAppFactory(config, health_checker, logging_service).create_app()
