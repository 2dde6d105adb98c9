import json
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from text_analyzer.agents.agent_factory import AgentFactory
from text_analyzer.agents.base_agent import BaseLLMAgent
from text_analyzer.agents.prompt_builder import PromptBuilder
from text_analyzer.api.routers.analysis import get_analysis_service
from text_analyzer.main import app
from text_analyzer.services.analysis_service import AnalysisService
from text_analyzer.utils.metrics import metrics_tracker

SAMPLE_TEXT = "This is a sample text for testing the API endpoint functionality."

SAMPLE_REPLY = {
    "summary": "This is a test summary of the provided text.",
    "sentiment": "positive",
    "keywords": ["test", "summary", "analysis"],
}


class StubAgent(BaseLLMAgent):
    """
    In-memory completion capability.

    Returns `reply` for every prompt, or raises `error` if one is set.
    Records every prompt it receives.
    """

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    def get_provider_name(self) -> str:
        return "stub"

    def get_model_name(self) -> str:
        return "stub-model"


@pytest.fixture
def stub_agent():
    """A StubAgent answering with a well-formed analysis."""
    return StubAgent(reply=json.dumps(SAMPLE_REPLY))


@pytest.fixture
def prompt_builder():
    return PromptBuilder()


@pytest.fixture
def analysis_service(stub_agent, prompt_builder):
    return AnalysisService(agent=stub_agent, prompt_builder=prompt_builder)


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Keeps the agent cache, metrics and dependency overrides isolated per test."""
    AgentFactory.reset()
    metrics_tracker.reset()
    yield
    app.dependency_overrides.clear()
    AgentFactory.reset()
    metrics_tracker.reset()


@pytest.fixture(scope="function")
def client(analysis_service):
    """
    TestClient whose analysis endpoint uses `analysis_service`, so no test
    ever reaches the real provider.
    """
    app.dependency_overrides[get_analysis_service] = lambda: analysis_service
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_agent():
    """Factory fixture: `make_agent(reply=..., error=...)` builds a StubAgent."""
    return StubAgent


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_reply():
    return dict(SAMPLE_REPLY)
