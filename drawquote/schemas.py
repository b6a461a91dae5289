from pydantic import BaseModel, Field
from typing import Dict, Union


class MaterialEntry(BaseModel):
    name: str
    price_per_kg: float = Field(ge=0)
    density_g_cm3: float = Field(gt=0)

    class Config:
        frozen = True


class DimensionTriple(BaseModel):
    """Bounding-box dimensions in mm, always length >= width >= thickness."""
    length_mm: float = Field(ge=0)
    width_mm: float = Field(ge=0)
    thickness_mm: float = Field(ge=0)

    class Config:
        frozen = True


# feature name -> number of lines mentioning it
FeatureCounts = Dict[str, int]


class EstimationRequest(BaseModel):
    raw_text: str = ""
    quantity: int = Field(1, ge=1)
    material_key: str = "aluminium"

    class Config:
        frozen = True


class ManualReview(BaseModel):
    """Terminal outcome: the drawing calls out micron tolerances, quote it by hand."""
    manual: bool = Field(True, serialization_alias="manuell")

    class Config:
        frozen = True


class QuoteResult(BaseModel):
    # Serialized field names are the public (German) wire contract.
    price: float = Field(serialization_alias="preis")
    length: float = Field(serialization_alias="laenge")
    width: float = Field(serialization_alias="breite")
    thickness: float = Field(serialization_alias="dicke")
    runtime_minutes: float = Field(serialization_alias="laufzeit_min")
    material_cost: float = Field(serialization_alias="materialkosten")
    raw_weight_kg: float = Field(serialization_alias="rohgewicht")
    material: str
    text_excerpt: str = Field(serialization_alias="text")

    class Config:
        frozen = True


EstimationResult = Union[ManualReview, QuoteResult]
