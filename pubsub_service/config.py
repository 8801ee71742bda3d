# pubsub_service/config.py
"""
Configuration provider implementing SOLID principles.
Separated from logging configuration for Single Responsibility.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .core.interfaces import IConfigProvider

DEFAULT_HEALTH_TOPIC = "support-test"
DEFAULT_EMAIL_TOPIC = "email"


@dataclass(frozen=True)
class PubSubParams:
    """Connection parameters for the Pub/Sub client"""

    project_id: str
    credentials_path: str


def load_pubsub_params(environ: Optional[Mapping[str, str]] = None) -> PubSubParams:
    """Read Pub/Sub parameters from the environment, verbatim."""
    env = os.environ if environ is None else environ
    return PubSubParams(
        project_id=env.get("PROJECT_ID", ""),
        credentials_path=env.get("GOOGLE_APPLICATION_CREDENTIALS", ""),
    )


class Config(IConfigProvider):
    """
    Configuration provider following Single Responsibility Principle.
    Only handles configuration loading.
    """

    SERVER_HOST = "0.0.0.0"
    SERVER_PORT = 8080
    DNS_PROBE_HOST = "pubsub.googleapis.com"

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        # Environment
        self.ENV: str = env.get("APP_ENV", "production").lower()

        # Logging
        self.LOG_LEVEL: str = env.get("LOG_LEVEL", "INFO").upper()
        self.LOG_DIR: str = env.get("LOG_DIR", "")

        # Pub/Sub
        params = load_pubsub_params(env)
        self.PROJECT_ID: str = params.project_id
        self.GOOGLE_APPLICATION_CREDENTIALS: str = params.credentials_path
        self.HEALTH_TOPIC_ID: str = env.get("PUBSUB_HEALTH_TOPIC", DEFAULT_HEALTH_TOPIC)
        self.EMAIL_TOPIC_ID: str = env.get("PUBSUB_EMAIL_TOPIC", DEFAULT_EMAIL_TOPIC)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return getattr(self, key, default)

    def get_required(self, key: str) -> Any:
        """Get required configuration value"""
        value = self.get(key)
        if value is None:
            raise EnvironmentError(f"Required configuration '{key}' not found")
        return value

    def has(self, key: str) -> bool:
        """Check if configuration key exists"""
        return hasattr(self, key) and getattr(self, key) is not None

    def pubsub_params(self) -> PubSubParams:
        return PubSubParams(
            project_id=self.PROJECT_ID,
            credentials_path=self.GOOGLE_APPLICATION_CREDENTIALS,
        )

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENV == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENV == "production"
