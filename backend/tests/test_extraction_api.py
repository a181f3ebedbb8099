import io

import pytest
from fastapi.testclient import TestClient

from docingest.api.deps import get_completion_service, get_orchestrator
from docingest.core.config import settings
from docingest.extraction.orchestrator import ExtractionOrchestrator
from docingest.main import app

from tests.conftest import CLEAN_PROSE, HEAVY_ARTIFACTS, MODEL_REPLY


@pytest.fixture
def client(fake_llm):
    app.dependency_overrides[get_orchestrator] = lambda: ExtractionOrchestrator(fake_llm)
    app.dependency_overrides[get_completion_service] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_request_id_is_echoed(client):
    resp = client.get("/api/", headers={"x-request-id": "req-123"})
    assert resp.headers["x-request-id"] == "req-123"


def test_llm_health_without_service(client):
    assert client.get("/api/llm/health").json() == {"ok": False, "error": "language model unavailable"}


def test_analyze_clean_prose(client, fake_llm):
    resp = client.post("/api/extraction/analyze", json={"content": CLEAN_PROSE})
    assert resp.status_code == 200, resp.text

    body = resp.json()
    assert body["extraction_method"] == "structured"
    assert body["confidence"] == 95
    assert body["is_usable"] is True
    assert body["metadata"]["quality"] == "high"
    assert body["metadata"]["notes"][0] == "Extraction method: structured"
    assert body["preview"] == CLEAN_PROSE
    assert fake_llm.calls == []


def test_analyze_with_ocr_option(client):
    resp = client.post(
        "/api/extraction/analyze",
        json={"content": HEAVY_ARTIFACTS, "options": {"enable_ocr": True}, "document_id": "doc-1"},
    )
    body = resp.json()
    assert body["extraction_method"] == "ocr_enhanced"
    assert body["text"] == MODEL_REPLY
    assert body["metadata"]["is_scanned"] is True


def test_analyze_empty_content_returns_failed_result(client):
    resp = client.post("/api/extraction/analyze", json={"content": ""})
    assert resp.status_code == 200
    body = resp.json()
    assert body["extraction_method"] == "failed"
    assert body["confidence"] == 0
    assert body["is_usable"] is False


def test_analyze_rejects_invalid_options(client):
    resp = client.post("/api/extraction/analyze", json={"content": "x", "options": {"max_pages": 0}})
    assert resp.status_code == 422


def test_preview_is_truncated(client):
    resp = client.post("/api/extraction/analyze", json={"content": CLEAN_PROSE * 5})
    preview = resp.json()["preview"]
    assert len(preview) == 303
    assert preview.endswith("...")


def test_analyze_file(client):
    files = {"file": ("notes.txt", io.BytesIO(CLEAN_PROSE.encode()), "text/plain")}
    resp = client.post("/api/extraction/analyze-file", files=files, data={"enable_ocr": "true"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["extraction_method"] == "structured"


def test_analyze_file_replaces_undecodable_bytes(client):
    raw = b"endstream BT ET " * 10 + b"\xff\xfe garbage"
    files = {"file": ("scan.pdf", io.BytesIO(raw), "application/pdf")}
    resp = client.post("/api/extraction/analyze-file", files=files)
    assert resp.status_code == 200, resp.text
    assert "Filtered 2 binary characters" in resp.json()["metadata"]["notes"]


def test_analyze_file_rejects_unsupported_type(client):
    files = {"file": ("photo.png", io.BytesIO(b"\x89PNG"), "image/png")}
    resp = client.post("/api/extraction/analyze-file", files=files)
    assert resp.status_code == 415
    assert resp.json()["error"]["code"] == "INVALID_FILE_TYPE"


def test_analyze_file_rejects_empty_upload(client):
    files = {"file": ("empty.txt", io.BytesIO(b""), "text/plain")}
    resp = client.post("/api/extraction/analyze-file", files=files)
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "EMPTY_CONTENT"


def test_analyze_file_enforces_size_limit(client, monkeypatch):
    monkeypatch.setattr(settings, "EXTRACTION_MAX_UPLOAD_BYTES", 10)
    files = {"file": ("big.txt", io.BytesIO(b"x" * 11), "text/plain")}
    resp = client.post("/api/extraction/analyze-file", files=files)
    assert resp.status_code == 413
    assert resp.json()["error"]["code"] == "FILE_TOO_LARGE"
