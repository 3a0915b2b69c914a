from typing import List, Optional
import logging

from domain.enums import Principle
from domain.schemas.lesson_schemas import DemoTranscript, Lesson, PrincipleResponse
from repositories import LessonRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("solid.catalog")


class LessonService:
    """Business logic for browsing lessons and running their demonstrations"""

    @staticmethod
    def list_principles(repo: LessonRepository) -> List[PrincipleResponse]:
        """Return every principle with its definition and lesson count"""
        return [
            PrincipleResponse(
                principle=principle,
                title=principle.display_name,
                definition=principle.definition,
                lesson_count=len(repo.get_by_principle(principle)),
            )
            for principle in Principle
        ]

    @staticmethod
    def list_lessons(
        repo: LessonRepository, principle: Optional[Principle] = None
    ) -> List[Lesson]:
        """Return all lessons, or only those illustrating one principle"""
        if principle is None:
            lessons = repo.get_all(limit=repo.count())
        else:
            lessons = repo.get_by_principle(principle)
        logger.info(
            f"lessons_listed principle={principle.value if principle else 'all'} count={len(lessons)}"
        )
        return lessons

    @staticmethod
    def get_lesson(repo: LessonRepository, slug: str) -> Lesson:
        """Retrieve a lesson by slug"""
        lesson = repo.get_by_id(slug)
        if lesson is None:
            logger.warning(f"lesson_not_found slug={slug}")
            raise NotFoundError(f"Lesson {slug} not found", code="LESSON_NOT_FOUND")
        return lesson

    @staticmethod
    def run_demo(lesson: Lesson) -> DemoTranscript:
        """Run both renditions of a lesson and return what was observed"""
        try:
            transcript = lesson.demo()
        except Exception as e:
            logger.error(f"lesson_demo_failed slug={lesson.slug} error={str(e)}")
            raise
        logger.info(
            f"lesson_demo_run slug={lesson.slug} "
            f"problematic_steps={len(transcript.problematic)} "
            f"better_steps={len(transcript.better)}"
        )
        return transcript
