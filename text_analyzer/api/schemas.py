"""
text_analyzer/api/schemas.py

Defines Pydantic models used for API request validation and response serialization.
"""

from typing import Optional

from pydantic import BaseModel, StrictStr


class AnalysisRequest(BaseModel):
    """Request body for POST /api/analyze."""
    text: StrictStr


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""
    error: str
    timestamp: str
    # Only populated in the development environment
    stack: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
