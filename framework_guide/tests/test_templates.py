from __future__ import annotations

from fastapi.testclient import TestClient

from framework_guide.app import app
from framework_guide.templates.library import (
    PROJECT_TEMPLATES,
    find_templates_by_type,
    get_boilerplate,
)

client = TestClient(app)


def test_find_by_type():
    names = [t.name for t in find_templates_by_type("api")]
    assert names == ["REST API Service"]


def test_find_by_type_no_match_is_empty():
    assert find_templates_by_type("desktop") == ()


def test_get_boilerplate():
    assert get_boilerplate("CLI Tool").startswith("Create a CLI tool that:\n")


def test_get_boilerplate_absent():
    assert get_boilerplate("Nope") is None


def test_presets():
    presets = {t.name: t.requirements for t in PROJECT_TEMPLATES}
    assert all(presets["REST API Service"].to_record().values())
    assert presets["CLI Tool"].to_record() == {
        "performance": True,
        "scalability": False,
        "easeOfUse": True,
        "ecosystem": False,
    }


def test_templates_endpoint_filters():
    resp = client.get("/api/templates", params={"projectType": "web"})
    assert resp.status_code == 200
    body = resp.json()
    assert [t["name"] for t in body] == ["SPA Dashboard"]
    assert body[0]["requirements"]["easeOfUse"] is True
    assert body[0]["projectType"] == "web"


def test_templates_endpoint_lists_all():
    resp = client.get("/api/templates")
    assert len(resp.json()) == len(PROJECT_TEMPLATES)


def test_boilerplate_endpoint():
    resp = client.get("/api/templates/Mobile App/boilerplate")
    assert resp.status_code == 200
    assert resp.json()["boilerplate"].startswith("Create a mobile app with:")


def test_boilerplate_endpoint_unknown():
    resp = client.get("/api/templates/Nope/boilerplate")
    assert resp.status_code == 404
