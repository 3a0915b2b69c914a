"""
Configuration tests for the pydantic-settings based Settings class.
"""

import pytest
from pydantic import ValidationError

from app.config import Environment, Settings


def test_defaults():
    s = Settings(_env_file=None)

    assert s.app_name == "SolidPrinciples"
    assert s.environment == Environment.DEVELOPMENT
    assert s.is_development()
    assert s.log_file_path == "solid-lessons.log"


def test_environment_from_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "Production")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings(_env_file=None)

    assert s.is_production()
    assert not s.is_testing()
    assert s.log_level == "debug"


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
