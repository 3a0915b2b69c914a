"""Principle routes"""

from fastapi import APIRouter, Depends
from typing import List

from api.dependencies import get_lesson_repository
from domain.schemas.lesson_schemas import PrincipleResponse
from repositories import LessonRepository
from services.lesson_service import LessonService

router = APIRouter(prefix="/principles", tags=["Principles"])


@router.get("", response_model=List[PrincipleResponse])
def list_principles(repo: LessonRepository = Depends(get_lesson_repository)):
    """Return every principle with its definition and number of lessons."""
    return LessonService.list_principles(repo)
