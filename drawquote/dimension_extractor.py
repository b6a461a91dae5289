"""
Dimension extraction from OCR text.

OCR output has no reliable layout, so we can't tell which number on a
drawing is the length and which is the thickness. Instead every "<n> mm"
value is collected and ranked by size: largest is length, next is width,
next is thickness. This is a heuristic and will be wrong for drawings
whose callouts don't follow that order.
"""

import re
from typing import List

from .schemas import DimensionTriple

MM_PATTERN = re.compile(r"\d+(?:\.\d+)?\s?mm", re.IGNORECASE | re.ASCII)
NON_NUMERIC = re.compile(r"[^\d.]", re.ASCII)

DEFAULT_LENGTH_MM = 100.0
DEFAULT_WIDTH_MM = 50.0
DEFAULT_THICKNESS_MM = 10.0


class DimensionExtractor:
    """Ranks millimetre values found in drawing text into a DimensionTriple."""

    DEFAULTS = (DEFAULT_LENGTH_MM, DEFAULT_WIDTH_MM, DEFAULT_THICKNESS_MM)

    def find_values(self, text: str) -> List[float]:
        """All mm values in the text, largest first."""
        values = [
            float(NON_NUMERIC.sub("", match.group(0)))
            for match in MM_PATTERN.finditer(text or "")
        ]
        values.sort(reverse=True)
        return values

    def extract(self, text: str) -> DimensionTriple:
        """
        Top three mm values as length, width, thickness.

        Missing slots (and zero readings, which are never a real stock size)
        take the defaults 100 / 50 / 10. The filled triple is sorted again so
        a lone small reading can't end up "longer" than a default.
        """
        values = self.find_values(text)
        filled = []
        for i, default in enumerate(self.DEFAULTS):
            value = values[i] if i < len(values) else 0.0
            filled.append(value or default)
        filled.sort(reverse=True)
        return DimensionTriple(
            length_mm=filled[0],
            width_mm=filled[1],
            thickness_mm=filled[2],
        )
