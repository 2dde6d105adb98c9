"""
input_validator.py

Validates the raw request body before any call to the completion provider.

The body must be an object with a string `text` of 10 to 10,000 characters
that is not whitespace only. Every violated rule is reported, each prefixed
with the path of the offending field, in a single `Validation` error.
"""

from typing import Any, List

from pydantic import ValidationError

from text_analyzer.api.schemas import AnalysisRequest
from text_analyzer.models.errors import ClassifiedError, ErrorKind

MIN_TEXT_LENGTH = 10
MAX_TEXT_LENGTH = 10000

TOO_SHORT_MESSAGE = "Text must be at least 10 characters long"
TOO_LONG_MESSAGE = "Text must not exceed 10,000 characters"
BLANK_MESSAGE = "Text cannot be empty or whitespace only"


def _format_issue(path: str, message: str) -> str:
    return f"{path}: {message}" if path else message


def _shape_issues(error: ValidationError) -> List[str]:
    return [
        _format_issue(".".join(str(part) for part in issue["loc"]), issue["msg"])
        for issue in error.errors()
    ]


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so an emoji outside the BMP counts as two."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def _text_issues(text: str) -> List[str]:
    issues = []
    # Length bounds apply to the raw text; only the blank check trims.
    length = text_length(text)
    if length < MIN_TEXT_LENGTH:
        issues.append(_format_issue("text", TOO_SHORT_MESSAGE))
    if length > MAX_TEXT_LENGTH:
        issues.append(_format_issue("text", TOO_LONG_MESSAGE))
    if not text.strip():
        issues.append(_format_issue("text", BLANK_MESSAGE))
    return issues


def validation_error(issues: List[str]) -> ClassifiedError:
    return ClassifiedError(ErrorKind.VALIDATION, f"Validation error: {', '.join(issues)}")


def validate_analysis_request(raw_body: Any) -> AnalysisRequest:
    """
    Validates an untyped request body into an `AnalysisRequest`.

    Args:
        raw_body (Any): Decoded JSON body, expected to look like `{"text": "..."}`.

    Returns:
        AnalysisRequest: The request with `text` unchanged.

    Raises:
        ClassifiedError: Kind `VALIDATION`, message listing every violation
            joined with ", ".
    """
    try:
        request = AnalysisRequest.model_validate(raw_body)
    except ValidationError as e:
        raise validation_error(_shape_issues(e)) from e

    issues = _text_issues(request.text)
    if issues:
        raise validation_error(issues)
    return request
