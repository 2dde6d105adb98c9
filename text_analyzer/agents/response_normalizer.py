"""
response_normalizer.py

Turns the model's raw reply into a validated `AnalysisResult`.

A leading ```json (or ```) fence, a trailing ``` fence and surrounding
whitespace are tolerated and stripped, each side on its own. Everything else
must match the schema exactly; any failure is reported to the caller with one
stable message while the detail goes to the log.
"""

import json
import re

from pydantic import ValidationError

from text_analyzer.models.analysis_result import AnalysisResult
from text_analyzer.models.errors import ClassifiedError, ErrorKind
from text_analyzer.utils.logger import get_logger
from text_analyzer.utils.metrics import metrics_tracker

logger = get_logger()

INVALID_FORMAT_MESSAGE = "Invalid response format from AI service"

_OPENING_FENCE = re.compile(r"\A\s*```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```\s*\Z")


def strip_code_fence(content: str) -> str:
    """Removes a leading and a trailing code fence independently, then trims whitespace."""
    cleaned = _OPENING_FENCE.sub("", content, count=1)
    cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def normalize_response(content: str) -> AnalysisResult:
    """
    Parses and validates the raw model reply.

    Args:
        content (str): Raw text returned by the completion provider.

    Returns:
        AnalysisResult: The validated result, keywords stringified.

    Raises:
        ClassifiedError: Kind UPSTREAM_MALFORMED if the text is not JSON or the
            JSON does not match the schema.
    """
    cleaned = strip_code_fence(content)
    try:
        parsed = json.loads(cleaned)
        return AnalysisResult.model_validate(parsed)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to parse AI response: {content!r}. Error: {e}")
        metrics_tracker.increment_errors()
        raise ClassifiedError(ErrorKind.UPSTREAM_MALFORMED, INVALID_FORMAT_MESSAGE) from e
