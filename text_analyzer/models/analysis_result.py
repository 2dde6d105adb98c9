"""
analysis_result.py

Defines the Pydantic model for the normalized output of a text analysis:
a summary, a sentiment label and exactly three keywords.
"""

import json
from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


def keyword_text(item: Any) -> str:
    """Spells a non-string keyword the way it appears in JSON (1.0 as "1")."""
    if isinstance(item, str):
        return item
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return json.dumps(item, ensure_ascii=False)


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class AnalysisResult(BaseModel):
    """
    The validated analysis of a single text.

    Instances are immutable once built. Extra keys present in the model's raw
    reply are dropped rather than echoed back to the caller.

    Attributes:
        summary (str): A short, non-empty summary of the text.
        sentiment (Sentiment): One of positive, negative or neutral.
        keywords (Tuple[str, str, str]): Exactly three keywords, in the order
            the model returned them.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    summary: StrictStr = Field(..., min_length=1, description="Concise summary of the text")
    sentiment: Sentiment = Field(..., description="Overall sentiment of the text")
    keywords: Tuple[str, str, str] = Field(
        ..., description="Exactly three keywords extracted from the text"
    )

    @field_validator("keywords", mode="before")
    @classmethod
    def stringify_keywords(cls, value: Any) -> Any:
        # Models sometimes return numbers or literals as keywords; keep them, as text.
        if isinstance(value, list):
            return [keyword_text(item) for item in value]
        return value
