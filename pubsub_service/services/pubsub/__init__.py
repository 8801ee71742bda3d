"""
Google Cloud Pub/Sub client, lifecycle owner and topic accessor.
"""

from .client import PubSubClient, PubSubClientService, Topic
from .topic import EmailTopic, Publisher, new_email_topic

__all__ = [
    "PubSubClient",
    "PubSubClientService",
    "Topic",
    "EmailTopic",
    "Publisher",
    "new_email_topic",
]
