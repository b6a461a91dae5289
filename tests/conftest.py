"""
Shared test fixtures — test client with a fake OCR service and an isolated
upload directory.
"""

import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from drawquote.config import settings
from drawquote.main import app
from drawquote.ocr import get_ocr_client


class FakeOCR:
    """Stands in for Google Vision. Returns canned text or raises."""

    def __init__(self):
        self.text = ""
        self.error = None
        self.paths = []

    def detect_text(self, image_path) -> str:
        self.paths.append(Path(image_path))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_ocr():
    return FakeOCR()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def client(fake_ocr, upload_dir):
    """FastAPI test client with OCR replaced by FakeOCR."""
    app.dependency_overrides[get_ocr_client] = lambda: fake_ocr
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def png_upload():
    """Multipart file tuple for a tiny PNG — content is never decoded."""
    def _make(name="drawing.png", content_type="image/png", data=b"\x89PNG\r\n\x1a\nfake"):
        return {"file": (name, io.BytesIO(data), content_type)}
    return _make
