"""
API endpoint tests using the FastAPI TestClient.

Covers health, principles, lesson listing/lookup and demo runs, plus the
error envelope returned for unknown lessons and invalid filters, and how the
app is built for production and for a route prefix.
"""

from decimal import Decimal

from fastapi.testclient import TestClient

from main import app, create_app
from app.config import Settings
from app.exceptions import ConflictError
from api.dependencies import get_lesson_repository
from repositories import LessonRepository
from services.lesson_service import LessonService
from test_fixtures import client


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "SolidPrinciples"
    assert body["lesson_count"] == 15


def test_responses_carry_request_headers():
    r = client.get("/health-check")
    assert r.headers.get("X-Request-ID")
    assert float(r.headers["X-Process-Time"]) >= 0


def test_list_principles():
    r = client.get("/principles")
    assert r.status_code == 200
    body = r.json()
    assert [p["principle"] for p in body] == ["lsp", "srp", "ocp"]
    assert body[1]["title"] == "Single Responsibility Principle"
    assert "one reason to change" in body[1]["definition"]


def test_list_lessons_and_filter():
    r = client.get("/lessons")
    assert r.status_code == 200
    assert len(r.json()) == 15

    r2 = client.get("/lessons", params={"principle": "ocp"})
    assert r2.status_code == 200
    assert {l["principle"] for l in r2.json()} == {"ocp"}
    assert r2.json()[0] == {
        "slug": "ocp-area-calculator",
        "principle": "ocp",
        "title": "Shape Area Calculator",
    }


def test_list_lessons_invalid_principle():
    r = client.get("/lessons", params={"principle": "dip"})
    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"


def test_get_lesson():
    r = client.get("/lessons/lsp-birds")
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Bird Flight"
    assert body["problematic_classes"] == ["Bird", "Duck", "Ostrich"]
    assert body["better_classes"] == ["Bird", "FlyingBird", "Duck", "Ostrich"]
    assert "demo" not in body


def test_get_unknown_lesson_returns_404():
    r = client.get("/lessons/nope")
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "LESSON_NOT_FOUND"
    assert body["error"]["message"] == "Lesson nope not found"


def test_run_demo():
    r = client.post("/lessons/lsp-user-authentication/demo")
    assert r.status_code == 200
    body = r.json()
    assert body["slug"] == "lsp-user-authentication"
    assert body["problematic"] == [
        "User.check_access() returned True",
        "GuestUser.check_access() raised UnauthorizedError: Guest users don't have access",
    ]
    assert body["better"] == [
        "RegularUser.check_access() returned True",
        "GuestUser.check_access() returned False",
    ]


def test_run_demo_for_unknown_lesson():
    r = client.post("/lessons/nope/demo")
    assert r.status_code == 404


def test_routes_use_overridden_repository():
    lessons = [l for l in get_lesson_repository().get_all(limit=100) if l.slug == "srp-reports"]
    app.dependency_overrides[get_lesson_repository] = lambda: LessonRepository(lessons)
    try:
        r = client.get("/lessons")
        assert [l["slug"] for l in r.json()] == ["srp-reports"]
    finally:
        app.dependency_overrides.clear()


def test_unexpected_error_returns_500(monkeypatch):
    def explode(lesson):
        raise RuntimeError("demo crashed")

    monkeypatch.setattr(LessonService, "run_demo", explode)
    local_client = TestClient(app, raise_server_exceptions=False)

    r = local_client.post("/lessons/lsp-shapes/demo")
    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


def test_app_error_envelope_uses_code_and_details(monkeypatch):
    def conflict(lesson):
        raise ConflictError(
            "Demo already running", details={"fee": Decimal("1.50")}, code="DEMO_BUSY"
        )

    monkeypatch.setattr(LessonService, "run_demo", conflict)

    r = client.post("/lessons/lsp-shapes/demo")
    assert r.status_code == 409
    assert r.json()["error"] == {
        "code": "DEMO_BUSY",
        "message": "Demo already running",
        "details": {"fee": 1.5},
    }


def test_app_error_without_code_uses_class_name(monkeypatch):
    def conflict(lesson):
        raise ConflictError("Demo already running")

    monkeypatch.setattr(LessonService, "run_demo", conflict)

    r = client.post("/lessons/lsp-shapes/demo")
    assert r.status_code == 409
    assert r.json()["error"] == {"code": "CONFLICTERROR", "message": "Demo already running"}


def test_docs_served_outside_production():
    dev_client = TestClient(create_app(Settings(_env_file=None, environment="development")))

    assert dev_client.get("/docs").status_code == 200
    assert dev_client.get("/openapi.json").status_code == 200


def test_docs_disabled_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    prod_client = TestClient(create_app(Settings(_env_file=None)))

    assert prod_client.get("/docs").status_code == 404
    assert prod_client.get("/redoc").status_code == 404
    assert prod_client.get("/openapi.json").status_code == 404
    assert prod_client.get("/health-check").status_code == 200


def test_routes_mounted_under_api_prefix(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "/api")
    monkeypatch.setenv("ENVIRONMENT", "development")
    prefixed_client = TestClient(create_app(Settings(_env_file=None)))

    r = prefixed_client.get("/api/lessons")
    assert r.status_code == 200
    assert len(r.json()) == 15
    assert prefixed_client.get("/api/lessons/lsp-shapes").status_code == 200
    assert prefixed_client.get("/api/docs").status_code == 200
    assert prefixed_client.get("/lessons").status_code == 404
    assert prefixed_client.get("/docs").status_code == 404
