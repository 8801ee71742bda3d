# pubsub_service/core/health_checker.py

"""
Health checker implementation following SOLID principles.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pubsub_service.core.interfaces import IHealthChecker

logger = logging.getLogger(__name__)

HEALTHY_MESSAGE = "PubSub connection is healthy. Topic exists."
TOPIC_MISSING_MESSAGE = "Topic does not exist"
CHECK_FAILED_PREFIX = "Failed to check topic existence: "


@dataclass(frozen=True)
class HealthReport:
    status_code: int
    message: str

    @property
    def healthy(self) -> bool:
        return self.status_code == 200


class HealthChecker(IHealthChecker):
    """
    Checks Pub/Sub health by looking up a canary topic.
    Every call is a live remote check; nothing is cached.
    """

    def __init__(self, client_service, topic_id: str, timeout: Optional[float] = None):
        self.client_service = client_service
        self.topic_id = topic_id
        self.timeout = timeout

    def check(self) -> HealthReport:
        try:
            topic = self.client_service.client.topic(self.topic_id)
            exists = topic.exists(timeout=self.timeout)
        except Exception as e:
            logger.error(f"Health check for topic '{self.topic_id}' failed: {e}")
            return HealthReport(500, CHECK_FAILED_PREFIX + str(e))

        if not exists:
            logger.warning(f"Health check topic '{self.topic_id}' does not exist")
            return HealthReport(404, TOPIC_MISSING_MESSAGE)

        return HealthReport(200, HEALTHY_MESSAGE)
