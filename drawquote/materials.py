"""
Material catalog — price per kg and density for the metals we quote.

Unknown materials are not an error: they are priced as aluminium.
"""

from typing import Dict, Iterable, List, Optional

from .schemas import MaterialEntry

FALLBACK_MATERIAL = "aluminium"

# Prices (EUR/kg) are raw bar-stock prices. Densities in g/cm³.
DEFAULT_MATERIALS = {
    "aluminium": {"price_per_kg": 7.0, "density_g_cm3": 2.7},
    "edelstahl": {"price_per_kg": 6.5, "density_g_cm3": 7.9},
    "stahl": {"price_per_kg": 1.5, "density_g_cm3": 7.85},
    "messing": {"price_per_kg": 8.0, "density_g_cm3": 8.5},
    "kupfer": {"price_per_kg": 10.0, "density_g_cm3": 8.96},
}


def normalize_key(key: Optional[str]) -> str:
    return (key or "").strip().lower()


class MaterialCatalog:
    """
    Fixed lookup table of MaterialEntry records, keyed by lower-cased name.

    The fallback entry must be part of the catalog; lookups for any other
    key that is not present return it.
    """

    def __init__(self, entries: Iterable[MaterialEntry], fallback: str = FALLBACK_MATERIAL):
        self._entries: Dict[str, MaterialEntry] = {
            normalize_key(entry.name): entry for entry in entries
        }
        fallback_key = normalize_key(fallback)
        if fallback_key not in self._entries:
            raise ValueError(f"Fallback material '{fallback}' is not in the catalog")
        self._fallback = self._entries[fallback_key]

    @classmethod
    def default(cls) -> "MaterialCatalog":
        return cls(
            MaterialEntry(name=name, **data) for name, data in DEFAULT_MATERIALS.items()
        )

    @property
    def fallback(self) -> MaterialEntry:
        return self._fallback

    def lookup(self, key: Optional[str]) -> MaterialEntry:
        """Case-insensitive lookup. Never raises; unknown keys get the fallback."""
        return self._entries.get(normalize_key(key), self._fallback)

    def entries(self) -> List[MaterialEntry]:
        return list(self._entries.values())

    def __contains__(self, key: str) -> bool:
        return normalize_key(key) in self._entries
