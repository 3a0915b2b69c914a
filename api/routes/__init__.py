"""API routes package"""

from . import health, lessons, principles

__all__ = ["health", "lessons", "principles"]
