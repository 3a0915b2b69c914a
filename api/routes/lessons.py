"""Lesson catalog routes"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from api.dependencies import get_lesson_repository
from domain.enums import Principle
from domain.mappers import LessonMapper
from domain.schemas.lesson_schemas import (
    LessonDemoResponse,
    LessonResponse,
    LessonSummary,
)
from repositories import LessonRepository
from services.lesson_service import LessonService

router = APIRouter(prefix="/lessons", tags=["Lessons"])


@router.get("", response_model=List[LessonSummary])
def list_lessons(
    principle: Optional[Principle] = Query(None, description="Only lessons for this principle"),
    repo: LessonRepository = Depends(get_lesson_repository),
):
    """List lessons, optionally filtered by principle."""
    lessons = LessonService.list_lessons(repo, principle)
    return [LessonMapper.to_summary(lesson) for lesson in lessons]


@router.get("/{slug}", response_model=LessonResponse)
def get_lesson(slug: str, repo: LessonRepository = Depends(get_lesson_repository)):
    """Get a lesson with its explanation and the classes on each side."""
    lesson = LessonService.get_lesson(repo, slug)
    return LessonMapper.to_response(lesson)


@router.post("/{slug}/demo", response_model=LessonDemoResponse)
def run_lesson_demo(slug: str, repo: LessonRepository = Depends(get_lesson_repository)):
    """Run the problematic and better versions and report what happened."""
    lesson = LessonService.get_lesson(repo, slug)
    transcript = LessonService.run_demo(lesson)
    return LessonMapper.to_demo_response(lesson, transcript)
