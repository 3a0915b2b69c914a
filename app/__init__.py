"""
App package - Application configuration and core utilities.
Contains settings and the exceptions shared by lessons, services and routes.
"""

from app.config import settings
from app.exceptions import (
    AppError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    UnsupportedOperationError,
)

__all__ = [
    "settings",
    "AppError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "UnsupportedOperationError",
]
