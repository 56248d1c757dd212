"""Tests for the FastAPI service mode."""

from __future__ import annotations

from fastapi.testclient import TestClient

from assetaudit.orchestrator import Orchestrator
from assetaudit.service import create_app
from tests._fixtures.project_builder import ProjectBuilder


def _client() -> TestClient:
    return TestClient(create_app(Orchestrator))


def test_health_endpoint() -> None:
    response = _client().get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_report_endpoint_returns_document(project_builder: ProjectBuilder) -> None:
    project_builder.manifest("assets/images/*")
    project_builder.asset("assets/images/a.png", 4)

    response = _client().post("/report", json={"path": str(project_builder.path())})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert data["report_path"].endswith("unused_assets.json")
    assert data["report"]["unused_assets_count"] == 1
    assert data["report"]["unused_assets"][0]["formattedSize"] == "4 B"


def test_report_endpoint_short_circuit(project_builder: ProjectBuilder) -> None:
    project_builder.manifest()

    response = _client().post("/report", json={"path": str(project_builder.path())})

    data = response.json()
    assert data["status"] == "no_declarations"
    assert data["report"] is None
    assert data["report_path"] is None
