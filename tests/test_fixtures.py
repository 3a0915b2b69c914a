"""
Shared test fixtures and utilities for the lessons test suite.

This module contains the API test client and helper factories that are reused
across multiple test files to keep them consistent.
"""

import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from main import app
from api.dependencies import get_lesson_repository
from repositories import LessonRepository

client = TestClient(app)


# Realistic people used across the SRP tests
REALISTIC_USERS = {
    "default": {"name": "Sarah Martinez", "email_prefix": "sarah.martinez"},
    "engineer": {"name": "Michael Chen", "email_prefix": "michael.chen"},
    "manager": {"name": "Emma Johnson", "email_prefix": "emma.johnson"},
}


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid collisions"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def make_user(user_cls, profile_type: str = "default", **overrides):
    """
    Create a user of the given SRP User class with realistic data.

    Args:
        user_cls: ``lessons.srp.problematic.User`` or ``lessons.srp.better.User``
        profile_type: Key into REALISTIC_USERS
        **overrides: Field values to use instead of the defaults

    Returns:
        A validated user instance
    """
    profile = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    fields = {"name": profile["name"], "email": unique_email(profile["email_prefix"])}
    fields.update(overrides)
    return user_cls(**fields)


def make_items(item_cls):
    """Two realistic order lines: 2 notebooks at 3.50 and 4 pens at 1.25"""
    return [
        item_cls(name="Notebook", price=Decimal("3.50"), quantity=2),
        item_cls(name="Pen", price=Decimal("1.25"), quantity=4),
    ]


@pytest.fixture
def lesson_repo() -> LessonRepository:
    """A fresh catalog for tests that want to add or remove lessons"""
    return LessonRepository(get_lesson_repository().get_all(limit=1000))
