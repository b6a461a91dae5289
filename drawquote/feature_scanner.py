"""
Manufacturing feature hints — counts drawing lines that mention threads,
bores, grooves, pockets or milling.

Keywords are the German terms printed on the drawings. Matching is a plain
substring test on the lower-cased line, so "innengewinde" counts as a
thread and "minuten" counts as a groove ("nut"). Changing that to word
matching changes the runtime estimate.
"""

from typing import List, Mapping

from .schemas import FeatureCounts

FEATURE_KEYWORDS = {
    "thread": "gewinde",
    "bore": "bohrung",
    "groove": "nut",
    "pocket": "tasche",
    "milling": "fräsung",
}


def split_lines(text: str) -> List[str]:
    """Lower-cased lines, split on any line boundary (\\n, \\r\\n, \\f, \\u2028, ...)."""
    return [line.lower() for line in (text or "").splitlines()]


class FeatureScanner:

    def __init__(self, vocabulary: Mapping[str, str] = FEATURE_KEYWORDS):
        self.vocabulary = dict(vocabulary)

    def scan(self, text: str, vocabulary: Mapping[str, str] = None) -> FeatureCounts:
        """
        Number of lines containing each keyword (not total occurrences).

        Every feature in the vocabulary appears in the result, 0 if unmatched.
        """
        vocabulary = self.vocabulary if vocabulary is None else vocabulary
        lines = split_lines(text)
        return {
            feature: sum(1 for line in lines if keyword.lower() in line)
            for feature, keyword in vocabulary.items()
        }
