"""Tests for the HTTP endpoints."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from ddr_report.api.deps import get_app_settings
from ddr_report.core.config import Settings
from ddr_report.main import app


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    return Settings(app_name="Test Renderer", export_dir=tmp_path, max_markdown_chars=200)


@pytest.fixture
def client(app_settings: Settings) -> Iterator[TestClient]:
    app.dependency_overrides[get_app_settings] = lambda: app_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "Test Renderer"}


def test_render(client: TestClient) -> None:
    response = client.post("/api/render", json={"markdown": "# Title\n\n- a\n- b"})

    assert response.status_code == 200
    body = response.json()
    assert body["html"] == "<h1>Title</h1>\n<ul>\n<li>a</li>\n<li>b</li>\n</ul>"
    assert body["block_count"] == 3
    assert body["characters"] == len("# Title\n\n- a\n- b")


def test_render_empty_markdown(client: TestClient) -> None:
    response = client.post("/api/render", json={"markdown": ""})

    assert response.status_code == 200
    assert response.json()["html"] == ""


def test_render_rejects_oversized_report(client: TestClient) -> None:
    response = client.post("/api/render", json={"markdown": "x" * 201})

    assert response.status_code == 413


def test_render_file(client: TestClient) -> None:
    response = client.post(
        "/api/render/file",
        files={"file": ("report.md", b"| H |\n| low |\n", "text/markdown")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "report.md"
    assert '<span class="severity-badge severity-low">low</span>' in body["html"]


def test_render_file_rejects_upload_over_byte_limit(client: TestClient) -> None:
    response = client.post(
        "/api/render/file",
        files={"file": ("report.md", b"x" * 801, "text/markdown")},
    )

    assert response.status_code == 413


def test_render_file_rejects_report_over_character_limit(client: TestClient) -> None:
    response = client.post(
        "/api/render/file",
        files={"file": ("report.md", b"x" * 300, "text/markdown")},
    )

    assert response.status_code == 413


def test_render_file_counts_characters_not_bytes(client: TestClient) -> None:
    text = "ё" * 150
    response = client.post(
        "/api/render/file",
        files={"file": ("report.md", text.encode("utf-8"), "text/markdown")},
    )

    assert response.status_code == 200
    assert response.json()["characters"] == 150


def test_render_file_falls_back_to_cp1251(client: TestClient) -> None:
    response = client.post(
        "/api/render/file",
        files={"file": ("report.txt", "Отчёт".encode("cp1251"), "text/plain")},
    )

    assert response.status_code == 200
    assert response.json()["html"] == "<p>Отчёт</p>"


def test_render_file_rejects_unsupported_suffix(client: TestClient) -> None:
    response = client.post(
        "/api/render/file",
        files={"file": ("report.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 415


def test_render_file_rejects_empty_upload(client: TestClient) -> None:
    response = client.post(
        "/api/render/file",
        files={"file": ("report.md", b"  \n", "text/markdown")},
    )

    assert response.status_code == 400


def test_export_html(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/api/export", json={"markdown": "# R\n", "format": "html"})

    assert response.status_code == 200
    body = response.json()
    assert body["file_name"].startswith("DDR_Report_")
    assert body["file_name"].endswith(".html")
    assert body["media_type"] == "text/html; charset=utf-8"
    assert "<h1>R</h1>" in base64.b64decode(body["file_base64"]).decode("utf-8")
    assert (tmp_path / body["file_name"]).exists()


def test_export_markdown_by_default(client: TestClient) -> None:
    response = client.post("/api/export", json={"markdown": "- a\n"})

    assert response.status_code == 200
    body = response.json()
    assert body["file_name"].endswith(".md")
    assert base64.b64decode(body["file_base64"]) == b"- a\n"


def test_export_empty_report(client: TestClient) -> None:
    response = client.post("/api/export", json={"markdown": "   "})

    assert response.status_code == 400


def test_export_unknown_format(client: TestClient) -> None:
    response = client.post("/api/export", json={"markdown": "# R", "format": "pdf"})

    assert response.status_code == 422
