"""
Shared fixtures: an application backed by in-memory SQLite and a renderer
that records the HTML it receives instead of launching WeasyPrint.
"""
import pytest
from fastapi.testclient import TestClient

from resume_service.config import Settings
from resume_service.main import create_app
from resume_service.renderer import PdfRenderer, RenderedDocument

FAKE_PDF = b"%PDF-1.7\n% resume test document\n%%EOF\n"


class RecordingRenderer(PdfRenderer):
    def __init__(self):
        super().__init__(timeout=5)
        self.rendered_html = []

    def render_sync(self, html: str) -> RenderedDocument:
        self.rendered_html.append(html)
        return RenderedDocument(content=FAKE_PDF)


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        LOG_LEVEL="WARNING",
        _env_file=None,
    )


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def app(settings, renderer):
    return create_app(settings, renderer=renderer)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register_and_login(client, email, password="pw"):
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def alice(client):
    return register_and_login(client, "alice@example.com")


@pytest.fixture
def bob(client):
    return register_and_login(client, "bob@example.com")
