# pubsub_service/exceptions.py
"""
Application errors.
"""

from typing import List


class PubSubServiceError(Exception):
    """Base error for the service"""

    pass


class PubSubConnectionError(PubSubServiceError):
    """Connection to Pub/Sub could not be established"""

    pass


class ClientNotStartedError(PubSubServiceError):
    """Pub/Sub client used before start or after stop"""

    def __init__(self, message: str = "PubSub client is not started"):
        super().__init__(message)


class TopicNotFoundError(PubSubServiceError):
    """Topic does not exist server-side"""

    def __init__(self, topic_id: str):
        self.topic_id = topic_id
        super().__init__("PubSub topic doesn't exist")


class LifecycleError(PubSubServiceError):
    """One or more components failed during shutdown"""

    def __init__(self, failures: List[Exception]):
        self.failures = list(failures)
        details = "; ".join(str(f) for f in self.failures)
        super().__init__(f"{len(self.failures)} component(s) failed: {details}")
