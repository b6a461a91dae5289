"""
Drawing analysis endpoint.

POST /pdf/analyze — upload one photographed drawing, get a quote back.
Stores the image under UPLOAD_DIR for the OCR call and removes it after the
response has been sent.
"""

import logging
import math
import re
import uuid
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..config import settings
from ..cost_estimator import CostEstimator, CostParameters
from ..errors import ProcessingError
from ..materials import MaterialCatalog
from ..ocr import VisionOCRClient, get_ocr_client
from ..schemas import EstimationRequest, QuoteResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pdf", tags=["analyze"])

FAILURE_DETAIL = "Analyse fehlgeschlagen."
LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")
MAX_QUANTITY = 1_000_000

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "heic", "gif", "bmp", "tif", "tiff"}


def get_estimator() -> CostEstimator:
    return CostEstimator(
        catalog=MaterialCatalog.default(),
        params=CostParameters.from_settings(settings),
    )


def parse_quantity(raw: Optional[str]) -> int:
    """
    Leading integer of the form value ("3 Stk" -> 3).
    Missing, non-numeric or < 1 -> 1. Anything above MAX_QUANTITY is clamped.
    """
    match = LEADING_INT.match(raw or "")
    if not match:
        return 1
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if sign == "-" or not digits:
        return 1
    if len(digits) > len(str(MAX_QUANTITY)):
        return MAX_QUANTITY
    return min(int(digits), MAX_QUANTITY)


def _get_extension(filename: str) -> str:
    """Extension for the stored copy. Only known image types are kept."""
    if not filename or "." not in filename:
        return "img"
    ext = filename.rsplit(".", 1)[-1].lower()
    return ext if ext in ALLOWED_EXTENSIONS else "img"


def _check_finite(result) -> None:
    if isinstance(result, QuoteResult):
        values = result.model_dump(exclude={"material", "text_excerpt"}).values()
        if not all(math.isfinite(v) for v in values):
            raise ProcessingError("Quote values out of range")


def _save_upload(file_bytes: bytes, filename: str) -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    file_path = upload_dir / f"{uuid.uuid4().hex[:12]}.{_get_extension(filename)}"
    with open(file_path, "wb") as f:
        f.write(file_bytes)
    return file_path


def remove_upload(file_path: Path) -> None:
    """Best-effort cleanup. Runs after the response, failures only logged."""
    try:
        file_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove upload {file_path}: {e}")


@router.post("/analyze")
async def analyze_drawing(
    background_tasks: BackgroundTasks,
    file: UploadFile = File(...),
    stueckzahl: Optional[str] = Form(None),
    material: Optional[str] = Form(None),
    ocr: VisionOCRClient = Depends(get_ocr_client),
    estimator: CostEstimator = Depends(get_estimator),
):
    """
    Quote a part from a photo of its drawing.

    - Rejects anything that isn't image/* (400)
    - Rejects empty files and files over MAX_FILE_SIZE_MB (400)
    - Returns {"manuell": true} when micron tolerances are called out
    - Any failure after that is a generic 500, details go to the log only
    """
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Nur Bilddateien erlaubt.")

    file_bytes = await file.read()

    if len(file_bytes) == 0:
        raise HTTPException(status_code=400, detail="Leere Datei.")

    max_bytes = settings.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(file_bytes) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"Datei zu groß ({len(file_bytes) / 1024 / 1024:.1f}MB). Maximum {settings.MAX_FILE_SIZE_MB}MB.",
        )

    try:
        file_path = _save_upload(file_bytes, file.filename or "")
        background_tasks.add_task(remove_upload, file_path)

        text = await run_in_threadpool(ocr.detect_text, file_path)
        request = EstimationRequest(
            raw_text=text or "",
            quantity=parse_quantity(stueckzahl),
            material_key=(material or "").strip().lower() or settings.DEFAULT_MATERIAL,
        )
        result = estimator.estimate(request)
        _check_finite(result)
        return result.model_dump(by_alias=True)
    except Exception:
        logger.exception(f"Analysis of '{file.filename}' failed")
        return JSONResponse(status_code=500, content={"detail": FAILURE_DETAIL}, background=background_tasks)
