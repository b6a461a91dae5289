"""
Cost Estimator — turns drawing text into a priced quote.

Pure math — no I/O. Raw-material weight from the bounding box, machining
time from part length plus feature hints, then setup + programming spread
over the batch, times margin.

Input: EstimationRequest (OCR text, quantity, material key)
Output: QuoteResult, or ManualReview when micron tolerances are called out
"""

import logging

from pydantic import BaseModel, Field

from .config import Settings
from .dimension_extractor import DimensionExtractor
from .feature_scanner import FeatureScanner
from .materials import MaterialCatalog, normalize_key
from .schemas import EstimationRequest, EstimationResult, ManualReview, QuoteResult
from .tolerance_guard import has_micron_tolerance

logger = logging.getLogger(__name__)


class CostParameters(BaseModel):
    """Shop rates and allowances. Business assumptions, not physics."""
    setup_cost: float = 60.0
    programming_cost: float = 30.0
    machine_rate_per_hour: float = 35.0
    profit_markup: float = Field(1.15, ge=1.0)
    base_runtime_min: float = 2.0          # setup allowance on the machine
    runtime_min_per_100mm: float = 1.0
    feature_runtime_min: float = 0.5       # per line mentioning a feature
    excerpt_length: int = Field(300, ge=0)

    class Config:
        frozen = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "CostParameters":
        return cls(
            setup_cost=settings.SETUP_COST,
            programming_cost=settings.PROGRAMMING_COST,
            machine_rate_per_hour=settings.MACHINE_RATE_PER_HOUR,
            profit_markup=settings.PROFIT_MARKUP,
            base_runtime_min=settings.BASE_RUNTIME_MIN,
            runtime_min_per_100mm=settings.RUNTIME_MIN_PER_100MM,
            feature_runtime_min=settings.FEATURE_RUNTIME_MIN,
            excerpt_length=settings.TEXT_EXCERPT_LENGTH,
        )


class CostEstimator:
    """
    Stateless: one instance can serve every request.
    Catalog and parameters are injected so pricing can vary without code changes.
    """

    def __init__(
        self,
        catalog: MaterialCatalog = None,
        params: CostParameters = None,
        extractor: DimensionExtractor = None,
        scanner: FeatureScanner = None,
    ):
        self.catalog = catalog or MaterialCatalog.default()
        self.params = params or CostParameters()
        self.extractor = extractor or DimensionExtractor()
        self.scanner = scanner or FeatureScanner()

    def estimate(self, request: EstimationRequest) -> EstimationResult:
        material = self.catalog.lookup(request.material_key)
        text = request.raw_text

        if has_micron_tolerance(text):
            logger.info("Micron tolerance found, quote needs manual review")
            return ManualReview()

        dims = self.extractor.extract(text)
        features = self.scanner.scan(text)

        raw_weight_kg = self.raw_weight_kg(
            dims.length_mm, dims.width_mm, dims.thickness_mm, material.density_g_cm3
        )
        material_cost = raw_weight_kg * material.price_per_kg
        runtime_min = self.runtime_minutes(dims.length_mm, sum(features.values()))
        machining_cost = self.machining_cost(runtime_min)
        price = self.unit_price(material_cost, machining_cost, request.quantity)

        logger.debug(
            f"Quote {normalize_key(request.material_key)} x{request.quantity}: "
            f"{dims.length_mm}x{dims.width_mm}x{dims.thickness_mm} mm, "
            f"{runtime_min} min, {price:.2f}"
        )

        return QuoteResult(
            price=price,
            length=dims.length_mm,
            width=dims.width_mm,
            thickness=dims.thickness_mm,
            runtime_minutes=runtime_min,
            material_cost=material_cost,
            raw_weight_kg=raw_weight_kg,
            material=normalize_key(request.material_key),
            text_excerpt=text[:self.params.excerpt_length],
        )

    def raw_weight_kg(self, length_mm: float, width_mm: float,
                      thickness_mm: float, density_g_cm3: float) -> float:
        """Bounding-box blank weight. Ignores whatever machining removes."""
        volume_cm3 = (length_mm / 10) * (width_mm / 10) * (thickness_mm / 10)
        return volume_cm3 * density_g_cm3 / 1000

    def runtime_minutes(self, length_mm: float, feature_lines: int) -> float:
        p = self.params
        runtime = length_mm / 100 * p.runtime_min_per_100mm + p.base_runtime_min
        return runtime + feature_lines * p.feature_runtime_min

    def machining_cost(self, runtime_min: float) -> float:
        return (runtime_min / 60) * self.params.machine_rate_per_hour

    def unit_price(self, material_cost: float, machining_cost: float, quantity: int) -> float:
        """Per-piece price: one-off costs spread over the batch, plus margin."""
        p = self.params
        one_off = (p.setup_cost + p.programming_cost) / quantity
        return (one_off + material_cost + machining_cost) * p.profit_markup
