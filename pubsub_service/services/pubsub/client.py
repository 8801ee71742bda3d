# pubsub_service/services/pubsub/client.py
"""
Pub/Sub client and its lifecycle-managed owner.
"""

import logging
from typing import Any, Callable, Optional

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import pubsub_v1
from google.oauth2 import service_account

from pubsub_service.config import PubSubParams
from pubsub_service.core.interfaces import IPubSubClient, IService
from pubsub_service.exceptions import ClientNotStartedError, PubSubConnectionError

logger = logging.getLogger(__name__)


class Topic:
    """Named handle into a client's topic namespace. Borrowed, never cached."""

    def __init__(self, client: "PubSubClient", topic_id: str, path: str):
        self._client = client
        self.topic_id = topic_id
        self.path = path

    def exists(self, timeout: Optional[float] = None) -> bool:
        return self._client.topic_exists(self.topic_id, timeout=timeout)

    def __repr__(self) -> str:
        return f"Topic({self.path!r})"


class PubSubClient(IPubSubClient):
    """Thin wrapper over the Pub/Sub publisher API bound to one project."""

    def __init__(self, publisher: Any, project_id: str):
        self._publisher = publisher
        self.project_id = project_id

    @classmethod
    def connect(cls, params: PubSubParams) -> "PubSubClient":
        """Create a client, authenticating with the credentials file when one is set"""
        try:
            credentials = None
            if params.credentials_path:
                credentials = service_account.Credentials.from_service_account_file(
                    params.credentials_path
                )
            publisher = pubsub_v1.PublisherClient(credentials=credentials)
        except (auth_exceptions.GoogleAuthError, OSError, ValueError) as e:
            raise PubSubConnectionError(str(e)) from e

        return cls(publisher, params.project_id)

    def topic_path(self, topic_id: str) -> str:
        return self._publisher.topic_path(self.project_id, topic_id)

    def topic(self, topic_id: str) -> Topic:
        return Topic(self, topic_id, self.topic_path(topic_id))

    def topic_exists(self, topic_id: str, timeout: Optional[float] = None) -> bool:
        """Live existence check. API errors other than NotFound propagate."""
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            self._publisher.get_topic(request={"topic": self.topic_path(topic_id)}, **kwargs)
        except google_exceptions.NotFound:
            return False
        return True

    def close(self) -> None:
        """Flush pending batches, then close the gRPC transport"""
        try:
            self._publisher.stop()
        finally:
            self._publisher.transport.close()


Connector = Callable[[PubSubParams], IPubSubClient]


class PubSubClientService(IService):
    """
    Owns the Pub/Sub client across the application's start/stop lifecycle.
    Consumers read the client through `client`, which refuses access
    until a successful start.
    """

    def __init__(self, params: PubSubParams, connector: Optional[Connector] = None):
        self.params = params
        self._connector = connector or PubSubClient.connect
        self._client: Optional[IPubSubClient] = None

    @property
    def is_started(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> IPubSubClient:
        if self._client is None:
            raise ClientNotStartedError()
        return self._client

    def initialize(self) -> None:
        """Connect to Pub/Sub. A single attempt; failure is fatal to startup."""
        logger.info("Connecting to PubSub...")
        try:
            client = self._connector(self.params)
        except Exception as e:
            logger.error(f"Failed to connect to PubSub: {e}")
            raise

        self._client = client
        logger.info("Successfully connected to PubSub.")

    def cleanup(self) -> None:
        """Close the connection, propagating any close error"""
        if self._client is None:
            return

        logger.info("Closing PubSub connection...")
        client, self._client = self._client, None
        client.close()
