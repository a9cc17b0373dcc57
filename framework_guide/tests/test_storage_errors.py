from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from framework_guide.app import app
from framework_guide.persistence.store import (
    clear_prompts,
    clear_recommendations,
    list_prompts,
    recommendation_statistics,
)

client = TestClient(app)

REQS = {"performance": True, "scalability": False, "easeOfUse": False, "ecosystem": False}

_GET_SESSION = "framework_guide.persistence.store.db_manager.get_session"


def _db_down():
    return patch(
        _GET_SESSION,
        side_effect=OperationalError("SELECT 1", {}, Exception("database is locked")),
    )


def _assert_storage_failure(resp, message):
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == message
    assert "database is locked" in body["details"]


def test_save_recommendation_wraps_driver_error():
    clear_recommendations()
    with _db_down():
        resp = client.post("/api/recommendations", json={
            "projectType": "api",
            "requirements": REQS,
            "recommendedFramework": "api.fastify",
        })
    _assert_storage_failure(resp, "Failed to save recommendation")
    assert recommendation_statistics()["total"] == 0


def test_stats_wraps_driver_error():
    with _db_down():
        resp = client.get("/api/recommendations/stats")
    _assert_storage_failure(resp, "Failed to fetch statistics")


def test_save_prompt_wraps_driver_error():
    clear_prompts()
    with _db_down():
        resp = client.post("/api/prompts", json={
            "projectName": "Ledger",
            "projectType": "api",
            "description": "a bookkeeping service",
            "requirements": REQS,
            "prompt": "I'm building Ledger",
            "recommendation": "Fastify is recommended for your API project.",
        })
    _assert_storage_failure(resp, "Failed to save prompt")
    assert list_prompts() == []


def test_prompt_history_wraps_driver_error():
    with _db_down():
        resp = client.get("/api/prompts")
    _assert_storage_failure(resp, "Failed to fetch prompt history")
