"""
Application routes.
"""
from .core_routes import create_core_blueprint

__all__ = [
    "create_core_blueprint",
]
