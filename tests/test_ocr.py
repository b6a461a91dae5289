"""
Google Vision client tests. All HTTP is mocked — no API key required.
"""

import json
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from drawquote.errors import OCRError, ProcessingError
from drawquote.ocr import VisionOCRClient, get_ocr_client


def _client():
    return VisionOCRClient(api_key="test-key", endpoint="https://vision.test/v1/images:annotate", timeout=5)


def _mock_urlopen(body: dict):
    mock = MagicMock()
    mock.return_value.__enter__.return_value.read.return_value = json.dumps(body).encode("utf-8")
    return mock


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "drawing.png"
    path.write_bytes(b"\x89PNGfake")
    return path


def test_returns_full_text(image):
    body = {"responses": [{"fullTextAnnotation": {"text": "50mm 20mm\nGewinde M8"}}]}
    with patch("drawquote.ocr.urllib.request.urlopen", _mock_urlopen(body)) as urlopen:
        text = _client().detect_text(image)

    assert text == "50mm 20mm\nGewinde M8"
    req = urlopen.call_args[0][0]
    assert req.full_url == "https://vision.test/v1/images:annotate?key=test-key"
    payload = json.loads(req.data)
    assert payload["requests"][0]["features"] == [{"type": "TEXT_DETECTION"}]
    assert payload["requests"][0]["image"]["content"]
    assert urlopen.call_args[1]["timeout"] == 5


def test_image_without_text_returns_empty(image):
    with patch("drawquote.ocr.urllib.request.urlopen", _mock_urlopen({"responses": [{}]})):
        assert _client().detect_text(image) == ""


def test_empty_response_list_returns_empty(image):
    with patch("drawquote.ocr.urllib.request.urlopen", _mock_urlopen({})):
        assert _client().detect_text(image) == ""


def test_vision_error_raises(image):
    body = {"responses": [{"error": {"code": 3, "message": "Bad image data."}}]}
    with patch("drawquote.ocr.urllib.request.urlopen", _mock_urlopen(body)):
        with pytest.raises(OCRError, match="Bad image data"):
            _client().detect_text(image)


def test_network_failure_raises(image):
    failing = MagicMock(side_effect=urllib.error.URLError("connection refused"))
    with patch("drawquote.ocr.urllib.request.urlopen", failing):
        with pytest.raises(OCRError):
            _client().detect_text(image)


def test_missing_api_key_raises(image):
    client = VisionOCRClient(api_key="", endpoint="https://vision.test")
    with patch("drawquote.ocr.urllib.request.urlopen") as urlopen:
        with pytest.raises(OCRError):
            client.detect_text(image)
    urlopen.assert_not_called()


def test_ocr_error_is_processing_error():
    assert issubclass(OCRError, ProcessingError)


def test_dependency_uses_settings():
    client = get_ocr_client()
    assert isinstance(client, VisionOCRClient)
    assert client.endpoint.endswith("images:annotate")
