from __future__ import annotations

from fastapi.testclient import TestClient

from framework_guide.app import app

client = TestClient(app)


def _evaluate(**overrides):
    payload = {
        "projectName": "Tracker",
        "description": "an internal issue tracker for the team",
        "projectType": "api",
        "requirements": {"performance": True},
    }
    payload.update(overrides)
    return client.post("/api/evaluate", json=payload)


def test_evaluate_api_performance():
    resp = _evaluate()
    assert resp.status_code == 200
    body = resp.json()
    assert body["framework"] == "api.fastify"
    assert body["frameworkName"] == "Fastify"
    assert body["recommendation"].startswith("Fastify")
    assert "- performance\n" in body["prompt"]


def test_evaluate_with_template():
    resp = _evaluate(template="REST API Service")
    assert "Template specific requirements:\nCreate a REST API" in resp.json()["prompt"]


def test_evaluate_rejects_short_description():
    resp = _evaluate(description="too short")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


def test_evaluate_rejects_unknown_project_type():
    assert _evaluate(projectType="desktop").status_code == 400


def test_evaluate_rejects_empty_name():
    assert _evaluate(projectName="").status_code == 400


def test_frameworks_endpoint():
    resp = client.get("/api/frameworks", params={"projectType": "web"})
    assert resp.status_code == 200
    body = resp.json()
    assert [fw["id"] for fw in body] == ["web.react", "web.vue", "web.next"]
    assert body[1]["strengths"] == ["easeOfUse", "ecosystem"]
    assert body[0]["features"]["stateManagement"] == {"kind": "text", "value": "External libraries"}
    assert body[0]["features"]["SSR"] == {"kind": "flag", "value": False}


def test_frameworks_endpoint_type_without_entries():
    resp = client.get("/api/frameworks", params={"projectType": "mobile"})
    assert resp.json() == []


def test_compare_endpoint():
    resp = client.get(
        "/api/frameworks/compare",
        params={"projectType": "api", "keys": ["express", "fastify"]},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["frameworks"] == ["express", "fastify"]
    validation = next(r for r in body["rows"] if r["feature"] == "validation")
    assert validation["values"] == {
        "express": {"kind": "flag", "value": False},
        "fastify": {"kind": "flag", "value": True},
    }


def test_compare_unknown_framework():
    resp = client.get(
        "/api/frameworks/compare",
        params={"projectType": "web", "keys": ["react", "angular"]},
    )
    assert resp.status_code == 404


def test_strengths_in_canonical_order():
    body = client.get("/api/frameworks", params={"projectType": "web"}).json()
    react = next(fw for fw in body if fw["key"] == "react")
    assert react["strengths"] == ["performance", "ecosystem"]


def test_compare_deduplicates_keys():
    resp = client.get(
        "/api/frameworks/compare",
        params={"projectType": "web", "keys": ["react", "vue", "react"]},
    )
    body = resp.json()
    assert body["frameworks"] == ["react", "vue"]
    assert all(list(row["values"]) == ["react", "vue"] for row in body["rows"])


def test_evaluate_rejects_blank_name():
    assert _evaluate(projectName="   ").status_code == 400
