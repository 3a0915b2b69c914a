"""
Lesson domain mappers.
Handles transformation between catalog lessons and API DTOs.
"""

from domain.schemas.lesson_schemas import (
    DemoTranscript,
    Lesson,
    LessonDemoResponse,
    LessonResponse,
    LessonSummary,
)


class LessonMapper:
    """Mapper for lesson-related transformations."""

    @staticmethod
    def to_summary(lesson: Lesson) -> LessonSummary:
        return LessonSummary(slug=lesson.slug, principle=lesson.principle, title=lesson.title)

    @staticmethod
    def to_response(lesson: Lesson) -> LessonResponse:
        """
        Convert a Lesson to LessonResponse DTO.

        Classes are reported by name since the objects themselves do not
        serialise.

        Args:
            lesson: Lesson from the catalog

        Returns:
            LessonResponse DTO with the prose and class names
        """
        return LessonResponse(
            slug=lesson.slug,
            principle=lesson.principle,
            title=lesson.title,
            problem=lesson.problem,
            remedy=lesson.remedy,
            problematic_classes=[cls.__name__ for cls in lesson.problematic_classes],
            better_classes=[cls.__name__ for cls in lesson.better_classes],
        )

    @staticmethod
    def to_demo_response(lesson: Lesson, transcript: DemoTranscript) -> LessonDemoResponse:
        return LessonDemoResponse(
            slug=lesson.slug,
            principle=lesson.principle,
            problematic=transcript.problematic,
            better=transcript.better,
        )
