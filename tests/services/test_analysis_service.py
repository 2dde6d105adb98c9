"""
tests/services/test_analysis_service.py

Tests the validate -> prompt -> complete -> normalize pipeline in
`AnalysisService` with a stubbed completion capability.
"""

import json

import pytest

from text_analyzer.models.analysis_result import Sentiment
from text_analyzer.models.errors import ClassifiedError, ErrorKind
from text_analyzer.services.analysis_service import AnalysisService


@pytest.mark.asyncio
async def test_successful_analysis_returns_normalized_result(
    analysis_service, stub_agent, sample_text, sample_reply
):
    result = await analysis_service.analyze({"text": sample_text})

    assert result.model_dump(mode="json") == sample_reply
    assert result.sentiment is Sentiment.POSITIVE
    assert len(stub_agent.prompts) == 1
    assert f'"{sample_text}"' in stub_agent.prompts[0]


@pytest.mark.asyncio
async def test_validation_failure_never_reaches_agent(analysis_service, stub_agent):
    with pytest.raises(ClassifiedError) as exc_info:
        await analysis_service.analyze({"text": "Short"})

    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert "Text must be at least 10 characters long" in exc_info.value.message
    assert stub_agent.prompts == []


@pytest.mark.asyncio
async def test_agent_error_propagates_unchanged(make_agent, prompt_builder, sample_text):
    upstream_error = ClassifiedError(ErrorKind.UPSTREAM_429, "OpenAI API quota exceeded")
    agent = make_agent(error=upstream_error)
    service = AnalysisService(agent=agent, prompt_builder=prompt_builder)

    with pytest.raises(ClassifiedError) as exc_info:
        await service.analyze({"text": sample_text})

    assert exc_info.value is upstream_error
    assert len(agent.prompts) == 1


@pytest.mark.asyncio
async def test_fenced_reply_is_normalized(make_agent, prompt_builder, sample_text):
    reply = {"summary": "x", "sentiment": "neutral", "keywords": ["a", "b", "c"]}
    agent = make_agent(reply=f"```json\n{json.dumps(reply)}\n```")
    service = AnalysisService(agent=agent, prompt_builder=prompt_builder)

    result = await service.analyze({"text": sample_text})

    assert result.model_dump(mode="json") == reply


@pytest.mark.asyncio
async def test_unparseable_reply_is_malformed(make_agent, prompt_builder, sample_text):
    agent = make_agent(reply="I think the text is positive.")
    service = AnalysisService(agent=agent, prompt_builder=prompt_builder)

    with pytest.raises(ClassifiedError) as exc_info:
        await service.analyze({"text": sample_text})

    assert exc_info.value.kind is ErrorKind.UPSTREAM_MALFORMED
    assert exc_info.value.message == "Invalid response format from AI service"
