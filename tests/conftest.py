"""Shared fixtures: in-memory Pub/Sub fakes and a wired Flask app."""

from typing import Dict, Optional

import pytest

from pubsub_service import create_app
from pubsub_service.config import Config
from pubsub_service.core.health_checker import HealthChecker
from pubsub_service.services.pubsub import PubSubClientService

TEST_ENV = {
    "PROJECT_ID": "test-project",
    "GOOGLE_APPLICATION_CREDENTIALS": "/secrets/key.json",
    "APP_ENV": "test",
}


class FakeTopic:
    def __init__(self, client: "FakePubSubClient", topic_id: str):
        self._client = client
        self.topic_id = topic_id
        self.path = f"projects/{client.project_id}/topics/{topic_id}"

    def exists(self, timeout: Optional[float] = None) -> bool:
        return self._client.topic_exists(self.topic_id, timeout=timeout)


class FakePubSubClient:
    """Records calls; topics listed in `topics` exist, everything else does not."""

    def __init__(self, project_id: str = "test-project", topics=(), error: Exception = None):
        self.project_id = project_id
        self.topics = set(topics)
        self.error = error
        self.exists_calls: Dict[str, int] = {}
        self.close_calls = 0
        self.close_error: Optional[Exception] = None

    def topic(self, topic_id: str) -> FakeTopic:
        return FakeTopic(self, topic_id)

    def topic_exists(self, topic_id: str, timeout: Optional[float] = None) -> bool:
        self.exists_calls[topic_id] = self.exists_calls.get(topic_id, 0) + 1
        if self.error is not None:
            raise self.error
        return topic_id in self.topics

    def close(self) -> None:
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def config() -> Config:
    return Config(environ=TEST_ENV)


@pytest.fixture
def fake_client() -> FakePubSubClient:
    return FakePubSubClient(topics={"support-test"})


@pytest.fixture
def client_service(config, fake_client) -> PubSubClientService:
    service = PubSubClientService(config.pubsub_params(), connector=lambda params: fake_client)
    service.initialize()
    return service


@pytest.fixture
def app(config, client_service):
    health_checker = HealthChecker(client_service, config.HEALTH_TOPIC_ID)
    app = create_app(config, health_checker)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def http(app):
    return app.test_client()
