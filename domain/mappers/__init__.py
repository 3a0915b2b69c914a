"""
Domain mappers package.
Handles transformation between catalog objects and DTOs (Data Transfer Objects).
"""

from domain.mappers.lesson_mapper import LessonMapper

__all__ = ["LessonMapper"]
