# pubsub_service/core/__init__.py
"""
Core module for application lifecycle management.
"""

from .interfaces import IWorker, IService
from .lifecycle import ApplicationLifecycle

__all__ = ["IWorker", "IService", "ApplicationLifecycle"]
