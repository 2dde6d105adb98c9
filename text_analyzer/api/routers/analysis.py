"""
text_analyzer/api/routers/analysis.py

API router for analyzing free-form text.
"""

import json
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, Request, status

from text_analyzer.agents.agent_factory import AgentFactory
from text_analyzer.agents.prompt_builder import PromptBuilder
from text_analyzer.models.analysis_result import AnalysisResult
from text_analyzer.services.analysis_service import AnalysisService
from text_analyzer.services.input_validator import validation_error
from text_analyzer.utils.logger import get_logger

router = APIRouter(prefix="/api/analyze", tags=["Analysis"])

logger = get_logger()


# --- Dependency Functions ---
@lru_cache(maxsize=1)
def get_analysis_service() -> AnalysisService:
    """Builds the shared AnalysisService once, on first use."""
    return AnalysisService(
        agent=AgentFactory.create_agent(),
        prompt_builder=PromptBuilder(),
    )


async def read_json_body(request: Request) -> Any:
    """Decodes the request body; malformed JSON is a validation failure."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Rejected request with invalid JSON body: {e}")
        raise validation_error(["Invalid JSON in request body"]) from e


@router.post(
    "",
    response_model=AnalysisResult,
    status_code=status.HTTP_200_OK,
    summary="Analyze Text",
)
async def analyze_text(
    body: Any = Depends(read_json_body),
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Summarizes the submitted text, labels its sentiment and extracts three keywords.

    - Validates `text` (10 to 10,000 characters, not whitespace only).
    - Makes one call to the completion provider.
    - Returns the normalized result without a wrapper.

    Raises:
        ClassifiedError: Rendered by the error handlers as 400 (validation)
            or 500 (configuration and upstream failures).
    """
    return await service.analyze(body)
