"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.lesson_schemas import (
    DemoTranscript,
    Lesson,
    PrincipleResponse,
    LessonSummary,
    LessonResponse,
    LessonDemoResponse,
)

__all__ = [
    "DemoTranscript",
    "Lesson",
    "PrincipleResponse",
    "LessonSummary",
    "LessonResponse",
    "LessonDemoResponse",
]
