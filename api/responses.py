"""
Standardized API response models.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    lesson_count: int = Field(..., description="Lessons available in the catalog")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Check timestamp",
    )
