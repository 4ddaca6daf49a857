"""Tests for the Flask analysis service"""

import io

import pytest

import app as service
from errors import RateLimitError, QuotaError, UpstreamError
from schemas import AnalysisResult


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create test client"""
    monkeypatch.setitem(service.app.config, "UPLOAD_FOLDER", str(tmp_path))
    service.app.config["TESTING"] = True
    return service.app.test_client()


def test_ping(client):
    """Test health check endpoint"""
    response = client.get("/ping")
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert "timestamp" in data
    assert "version" in data


def test_preflight_allows_cross_origin(client):
    """Test that OPTIONS preflight is an empty 200 with CORS headers"""
    response = client.options("/analyze-document", headers={
        "Origin": "https://app.example.com",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "content-type",
    })
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] in ("*", "https://app.example.com")


def test_analyze_success(client, monkeypatch, lease_text, analysis_payload):
    calls = []

    def fake_analyze(content, file_name=None, language="en"):
        calls.append((content, file_name, language))
        return AnalysisResult.model_validate(analysis_payload)

    monkeypatch.setattr(service, "analyze_document", fake_analyze)

    response = client.post("/analyze-document", json={"content": lease_text, "fileName": "lease.txt", "language": "te"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["summary"] == analysis_payload["summary"]
    assert data["documentType"] == "lease agreement"
    assert len(data["keyPoints"]) == 3
    assert len(data["clauses"]) == 4
    assert "error" not in data
    assert calls == [(lease_text, "lease.txt", "te")]


def test_analyze_rejects_short_content(client):
    """Test the 400 body for content under the minimum length"""
    response = client.post("/analyze-document", json={"content": "hello"})

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "No or insufficient document content provided.",
        "summary": "Provide a longer document to analyze.",
        "keyPoints": [],
        "clauses": [],
    }


def test_analyze_rejects_missing_body(client):
    response = client.post("/analyze-document", data="not json", content_type="text/plain")
    assert response.status_code == 400
    assert response.get_json()["keyPoints"] == []


@pytest.mark.parametrize("error, status, fragment", [
    (RateLimitError(), 429, "try again shortly"),
    (QuotaError(), 402, "add credits"),
    (UpstreamError(details="upstream said no"), 500, "AI gateway error"),
])
def test_analyze_error_statuses(client, monkeypatch, lease_text, error, status, fragment):
    def failing_analyze(*args, **kwargs):
        raise error

    monkeypatch.setattr(service, "analyze_document", failing_analyze)

    response = client.post("/analyze-document", json={"content": lease_text})

    assert response.status_code == status
    data = response.get_json()
    assert fragment in data["error"]
    assert data["summary"] == ""
    assert data["keyPoints"] == []
    assert data["clauses"] == []


def test_analyze_unexpected_failure(client, monkeypatch, lease_text):
    def broken_analyze(*args, **kwargs):
        raise KeyError("boom")

    monkeypatch.setattr(service, "analyze_document", broken_analyze)

    response = client.post("/analyze-document", json={"content": lease_text})

    assert response.status_code == 500
    data = response.get_json()
    assert data["summary"] == "Analysis failed due to technical issues. Please try again."
    assert data["clauses"] == []


def test_extract_text_upload(client, tmp_path):
    """Test text extraction from an uploaded file, with cleanup"""
    body = b"1. PAYMENT\nRent is due monthly."
    response = client.post(
        "/extract",
        data={"file": (io.BytesIO(body), "lease.txt")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    assert response.get_json() == {"text": body.decode(), "fileName": "lease.txt"}
    assert list(tmp_path.iterdir()) == []


def test_extract_pdf_upload(client, make_pdf):
    path = make_pdf(["Page one", "Page two"], name="upload-source.pdf")

    with open(path, "rb") as handle:
        response = client.post(
            "/extract",
            data={"file": (handle, "contract.pdf")},
            content_type="multipart/form-data",
        )

    assert response.status_code == 200
    assert response.get_json()["text"] == "Page one\n\nPage two"


def test_extract_rejects_unsupported_type(client):
    response = client.post(
        "/extract",
        data={"file": (io.BytesIO(b"PK"), "contract.docx")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 400
    assert "Unsupported file type" in response.get_json()["error"]


def test_extract_reports_corrupt_pdf(client):
    response = client.post(
        "/extract",
        data={"file": (io.BytesIO(b"garbage"), "broken.pdf")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 422


def test_extract_enforces_upload_limit(client, monkeypatch):
    monkeypatch.setitem(service.app.config, "MAX_CONTENT_LENGTH", 64)

    response = client.post(
        "/extract",
        data={"file": (io.BytesIO(b"x" * 1024), "big.txt")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 413
    assert "too large" in response.get_json()["error"]


def test_report_download(client, analysis_payload):
    response = client.post("/report", json={"result": analysis_payload, "fileName": "lease.txt"})

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    disposition = response.headers["Content-Disposition"]
    assert disposition.startswith("attachment; filename=lawsimple-analysis-")
    assert disposition.endswith(".txt")
    assert "Document: lease.txt" in response.get_data(as_text=True)


def test_report_requires_result(client):
    response = client.post("/report", json={})
    assert response.status_code == 400


def test_render_split_view(client, lease_text, analysis_payload):
    response = client.post("/render", json={"result": analysis_payload, "content": lease_text})

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert '<span class="highlight-favorable">may</span>' in html


def test_render_rejects_unknown_theme(client, lease_text, analysis_payload):
    response = client.post("/render", json={"result": analysis_payload, "content": lease_text, "theme": "neon"})
    assert response.status_code == 400


def test_extract_non_ascii_file_name(client, tmp_path):
    """Test that a name secure_filename cannot keep still extracts by its extension"""
    body = "किराया हर महीने देय है।".encode("utf-8")
    response = client.post(
        "/extract",
        data={"file": (io.BytesIO(body), "अनुबंध.txt")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    assert response.get_json() == {"text": body.decode("utf-8"), "fileName": "अनुबंध.txt"}
    assert list(tmp_path.iterdir()) == []


def test_extract_unexpected_failure(client, monkeypatch, tmp_path):
    """Test that a non-domain error still answers in the result shape"""
    def broken_extract(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(service, "extract_text", broken_extract)

    response = client.post(
        "/extract",
        data={"file": (io.BytesIO(b"Rent is due monthly."), "lease.txt")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 500
    data = response.get_json()
    assert data["summary"] == "Analysis failed due to technical issues. Please try again."
    assert "disk full" in data["error"]
    assert list(tmp_path.iterdir()) == []
