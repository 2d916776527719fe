"""Analysis entry points shared by the API, CLI and web UI."""

from __future__ import annotations

import logging

from skillens.models.analysis import AnalysisResult
from skillens.parsers.resume_parser import ExtractionError, extract_text
from skillens.scoring.engine import analyze

logger = logging.getLogger(__name__)

FILE_ERROR_MESSAGE = (
    "An error occurred while processing the file. "
    "Please try a different file format."
)
FILE_ERROR_RESULT = AnalysisResult(score=0, suggestions=[FILE_ERROR_MESSAGE])


def analyze_text(text: str | None) -> AnalysisResult:
    """Score pasted resume text."""
    result = analyze(text)
    logger.debug("Text analysis score: %d", result.score)
    return result


def analyze_document(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
    *,
    max_bytes: int | None = None,
) -> AnalysisResult:
    """Extract text from an uploaded document and score it.

    Oversized or unreadable documents yield ``FILE_ERROR_RESULT`` instead of
    an exception; the underlying error is only logged.
    """
    if max_bytes is not None and len(data) > max_bytes:
        logger.warning(
            "Rejected %s: %d bytes exceeds limit of %d",
            filename or "upload", len(data), max_bytes,
        )
        return FILE_ERROR_RESULT

    try:
        text = extract_text(data, filename=filename, content_type=content_type)
    except ExtractionError:
        logger.warning("Text extraction failed for %s", filename or "upload", exc_info=True)
        return FILE_ERROR_RESULT

    return analyze(text)
