"""
Failure taxonomy for the analyze pipeline.

Bad uploads are rejected with HTTPException(400) before anything here runs,
and manual review is a result, not an error. Everything below ends up as a
generic 500 at the route.
"""


class ProcessingError(Exception):
    """Drawing could not be turned into a quote."""


class OCRError(ProcessingError):
    """The OCR service was unreachable, unconfigured, or returned an error."""
