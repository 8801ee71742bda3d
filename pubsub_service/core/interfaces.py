# pubsub_service/core/interfaces.py
"""
Interfaces following Interface Segregation Principle (ISP).
Each interface has a single, focused responsibility.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol
import logging


# Core service interfaces
class IConfigProvider(Protocol):
    """Interface for configuration providers"""

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        ...

    def get_required(self, key: str) -> Any:
        """Get required configuration value"""
        ...


class ILogger(Protocol):
    """Interface for logging services"""

    def get_logger(self, name: str) -> logging.Logger:
        """Get logger by name"""
        ...


class IHealthChecker(Protocol):
    """Interface for health checking"""

    def check(self) -> Any:
        """Check if service is healthy"""
        ...


# Messaging interfaces
class ITopic(Protocol):
    """Interface for a named topic handle"""

    topic_id: str
    path: str

    def exists(self, timeout: Optional[float] = None) -> bool:
        """Check topic existence server-side"""
        ...


class IPubSubClient(Protocol):
    """Interface for publish/subscribe clients"""

    def topic(self, topic_id: str) -> ITopic:
        """Get a handle to a topic"""
        ...

    def topic_exists(self, topic_id: str, timeout: Optional[float] = None) -> bool:
        """Check whether a topic exists"""
        ...

    def close(self) -> None:
        """Close the connection"""
        ...


# Worker interfaces
class IWorker(ABC):
    """Base interface for workers"""

    @abstractmethod
    def start(self) -> None:
        """Start the worker"""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the worker"""
        pass


# Service lifecycle interfaces
class IService(ABC):
    """Base interface for services"""

    @abstractmethod
    def initialize(self) -> None:
        """Initialize the service"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup service resources"""
        pass
