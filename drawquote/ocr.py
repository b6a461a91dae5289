"""
OCR collaborator — Google Cloud Vision text detection over REST.

The engine only ever sees the returned text. Unlike the rest of the
pipeline, OCR failures are not papered over with empty text: a drawing we
could not read must not be quoted as a default 100x50x10 block.
"""

import base64
import json
import logging
import urllib.error
import urllib.request
from pathlib import Path

from .config import settings
from .errors import OCRError

logger = logging.getLogger(__name__)


class VisionOCRClient:
    """Blocking client, call it from a worker thread inside async routes."""

    def __init__(self, api_key: str, endpoint: str, timeout: float = 60.0):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout

    def detect_text(self, image_path) -> str:
        """
        Full recognised text for one image, "" if the image has no text.

        Raises OCRError when the service is not configured, unreachable, or
        reports an error for the image.
        """
        if not self.api_key:
            raise OCRError("GOOGLE_VISION_API_KEY is not configured")

        image_bytes = Path(image_path).read_bytes()
        payload = json.dumps({
            "requests": [{
                "image": {"content": base64.b64encode(image_bytes).decode("utf-8")},
                "features": [{"type": "TEXT_DETECTION"}],
            }]
        }).encode("utf-8")

        req = urllib.request.Request(
            f"{self.endpoint}?key={self.api_key}",
            data=payload,
            headers={"Content-Type": "application/json"},
            method="POST",
        )

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                result = json.loads(response.read())
        except (urllib.error.URLError, TimeoutError, ValueError) as e:
            raise OCRError(f"Vision request failed: {e}") from e

        text = self._parse_response(result)
        logger.info(f"OCR recognised {len(text)} characters")
        return text

    @staticmethod
    def _parse_response(result: dict) -> str:
        responses = result.get("responses") or [{}]
        first = responses[0]
        if first.get("error"):
            raise OCRError(f"Vision error: {first['error'].get('message', 'unknown')}")
        return (first.get("fullTextAnnotation") or {}).get("text", "")


def get_ocr_client() -> VisionOCRClient:
    """FastAPI dependency, overridden in tests."""
    return VisionOCRClient(
        api_key=settings.GOOGLE_VISION_API_KEY,
        endpoint=settings.GOOGLE_VISION_ENDPOINT,
        timeout=settings.OCR_TIMEOUT_SECONDS,
    )
