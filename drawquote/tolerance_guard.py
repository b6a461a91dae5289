"""
Micron tolerance detection.

A callout like "±5µm" means precision grinding or lapping that the
length-and-features pricing model cannot estimate. When one is found the
quote goes to manual review instead. OCR often reads µ as "u", so both are
accepted; erring towards manual review is fine.
"""

import re

# number, optional space, micro sign / greek mu / ascii u, optional space, m
MICRON_PATTERN = re.compile(r"\d+\s?[µμu]\s?m", re.IGNORECASE)


def has_micron_tolerance(text: str) -> bool:
    return MICRON_PATTERN.search(text or "") is not None
