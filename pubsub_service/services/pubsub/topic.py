# pubsub_service/services/pubsub/topic.py
"""
Topic accessor: verifies a topic exists and wraps it in a publisher.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pubsub_service.core.interfaces import IPubSubClient, ITopic
from pubsub_service.exceptions import TopicNotFoundError

EMAIL_LOGGER_NAME = "pubsub_service.email"


@dataclass(frozen=True)
class Publisher:
    logger: logging.Logger
    topic: ITopic


@dataclass(frozen=True)
class EmailTopic:
    publisher: Publisher


def new_email_topic(
    client: IPubSubClient, topic_id: str, timeout: Optional[float] = None
) -> EmailTopic:
    """
    Look up `topic_id` and confirm it exists server-side.

    Errors from the existence check propagate unchanged; a missing topic
    raises TopicNotFoundError. Neither is retried.
    """
    topic = client.topic(topic_id)
    if not topic.exists(timeout=timeout):
        raise TopicNotFoundError(topic_id)

    return EmailTopic(
        publisher=Publisher(logger=logging.getLogger(EMAIL_LOGGER_NAME), topic=topic)
    )
