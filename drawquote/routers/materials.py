from fastapi import APIRouter
from typing import List

from .. import schemas
from ..materials import MaterialCatalog

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("/", response_model=List[schemas.MaterialEntry])
def list_materials():
    """Materials the estimator prices. Anything else is quoted as aluminium."""
    return MaterialCatalog.default().entries()
