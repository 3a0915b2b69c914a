"""Health check routes"""

from fastapi import APIRouter, Depends

from api.dependencies import get_lesson_repository
from api.responses import HealthResponse
from app.config import settings
from repositories import LessonRepository

router = APIRouter(tags=["Health"])


@router.get("/health-check", response_model=HealthResponse)
def health_check(repo: LessonRepository = Depends(get_lesson_repository)):
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        lesson_count=repo.count(),
    )
