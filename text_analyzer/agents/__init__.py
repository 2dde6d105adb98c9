"""
Agent module exports.

Provides the completion capability, its OpenAI implementation, the factory
that selects a provider from configuration, and the prompt/response helpers
that sit on either side of the model call.
"""

from .base_agent import BaseLLMAgent
from .openai_agent import OpenAIAgent, classify_provider_error
from .agent_factory import AgentFactory
from .prompt_builder import PromptBuilder
from .response_normalizer import normalize_response

__all__ = [
    "BaseLLMAgent",
    "OpenAIAgent",
    "classify_provider_error",
    "AgentFactory",
    "PromptBuilder",
    "normalize_response",
]
