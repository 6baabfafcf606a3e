"""
End-to-end tests for reading the resume and generating the PDF.
"""
import io

import pytest
from fastapi.testclient import TestClient

from resume_service.errors import RenderFailure
from resume_service.main import create_app
from resume_service.renderer import PdfRenderer

from .conftest import FAKE_PDF, register_and_login


def test_generate_pdf_end_to_end(client, renderer):
    headers = register_and_login(client, "a@x.com", "pw")
    resp = client.post("/api/experience", json={"job_title": "Engineer", "company": "Acme", "end_date": None},
                       headers=headers)
    assert resp.status_code == 201

    resp = client.get("/api/resume/generate", headers=headers)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert int(resp.headers["content-length"]) == len(resp.content) == len(FAKE_PDF)
    assert "resume.pdf" in resp.headers["content-disposition"]

    html = renderer.rendered_html[-1]
    assert "Engineer at Acme" in html
    assert "Present" in html


def test_generate_pdf_with_no_sections(client, renderer, alice):
    resp = client.get("/api/resume/generate", headers=alice)
    assert resp.status_code == 200
    html = renderer.rendered_html[-1]
    assert "undefined" not in html
    assert "None" not in html


def test_render_failure_returns_no_pdf(client, app, alice):
    class BrokenRenderer(PdfRenderer):
        def render_sync(self, html):
            raise RenderFailure()

    app.state.renderer = BrokenRenderer()
    resp = client.get("/api/resume/generate", headers=alice)
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json()["error"] == "render_failed"


def test_get_resume_returns_all_sections_without_hash(client, alice):
    client.post("/api/details", json={"full_name": "Alice", "portfolio_url": "https://alice.dev"}, headers=alice)
    client.post("/api/education", json={"school": "MIT", "degree": "BSc", "end_date": "2020"}, headers=alice)
    client.post("/api/skill", json={"skill_name": "Python"}, headers=alice)
    client.post("/api/project", json={"project_name": "CLI", "description": "A tool"}, headers=alice)

    resp = client.get("/api/resume", headers=alice)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["email"] == "alice@example.com"
    assert "password_hash" not in data
    assert data["personal_details"]["full_name"] == "Alice"
    assert data["education"][0]["degree"] == "BSc"
    assert data["skills"][0]["skill_name"] == "Python"
    assert data["projects"][0]["project_name"] == "CLI"
    assert data["experiences"] == []


def test_token_for_deleted_user_is_data_integrity(client, app, settings):
    from resume_service.auth import create_access_token

    token = create_access_token({"sub": "999", "user_id": 999, "email": "ghost@x.com"}, settings)
    resp = client.get("/api/resume", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 500
    assert resp.json()["error"] == "data_integrity"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "resume"}


def _weasyprint_available():
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


@pytest.mark.skipif(not _weasyprint_available(), reason="WeasyPrint native libraries not installed")
def test_generate_real_pdf_from_template(settings):
    pdfplumber = pytest.importorskip("pdfplumber")
    app = create_app(settings)
    with TestClient(app) as client:
        headers = register_and_login(client, "a@x.com", "pw")
        client.post("/api/experience", json={"job_title": "Engineer", "company": "Acme", "end_date": None},
                    headers=headers)

        resp = client.get("/api/resume/generate", headers=headers)

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert int(resp.headers["content-length"]) == len(resp.content) > 0
    assert resp.content.startswith(b"%PDF")

    with pdfplumber.open(io.BytesIO(resp.content)) as pdf:
        page = pdf.pages[0]
        # A4 is 595 x 842 points
        assert round(page.width) == 595
        assert round(page.height) == 842
        text = "\n".join(p.extract_text() or "" for p in pdf.pages)
    assert "Engineer at Acme" in text
    assert "Present" in text
    assert "a@x.com" in text
