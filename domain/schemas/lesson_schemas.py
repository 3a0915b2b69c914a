from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Callable, List, Type

from domain.enums import Principle


class DemoTranscript(BaseModel):
    """Observations collected while running both renditions of a lesson"""

    problematic: List[str] = Field(default_factory=list)
    better: List[str] = Field(default_factory=list)


class Lesson(BaseModel):
    """A before/after example together with the prose that explains it"""

    slug: str = Field(..., min_length=1, description="Unique lesson identifier")
    principle: Principle
    title: str
    problem: str = Field(..., description="Why the problematic version hurts")
    remedy: str = Field(..., description="Why the better version helps")
    problematic_classes: List[Type[Any]]
    better_classes: List[Type[Any]]
    demo: Callable[[], DemoTranscript] = Field(exclude=True)

    model_config = ConfigDict(frozen=True)


class PrincipleResponse(BaseModel):
    """Schema for a principle and how many lessons illustrate it"""

    principle: Principle
    title: str
    definition: str
    lesson_count: int


class LessonSummary(BaseModel):
    """Schema for lesson list entries"""

    slug: str
    principle: Principle
    title: str


class LessonResponse(LessonSummary):
    """Schema for a full lesson"""

    problem: str
    remedy: str
    problematic_classes: List[str]
    better_classes: List[str]


class LessonDemoResponse(BaseModel):
    """Schema for a demonstration run"""

    slug: str
    principle: Principle
    problematic: List[str]
    better: List[str]
