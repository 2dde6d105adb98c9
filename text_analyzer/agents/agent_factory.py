"""
agent_factory.py

Factory for creating LLM agent instances based on configuration.

Keeps one instance per provider so the underlying HTTP client is reused
across requests. The provider is chosen by `config["llm"]["provider"]`;
new providers can be added with `register_provider()`.
"""

from typing import Any, Dict, Optional

from text_analyzer.config import config
from text_analyzer.utils.logger import get_logger
from .base_agent import BaseLLMAgent

logger = get_logger()


class AgentFactory:
    """
    Creates and caches LLM agents.

    Usage:
        agent = AgentFactory.create_agent()            # provider from config
        agent = AgentFactory.create_agent("openai")    # explicit provider

        AgentFactory.register_provider("custom", CustomAgent)
    """

    _providers: Dict[str, type] = {}
    _instances: Dict[str, BaseLLMAgent] = {}

    @classmethod
    def _initialize_providers(cls):
        if not cls._providers:
            from .openai_agent import OpenAIAgent

            cls._providers = {"openai": OpenAIAgent}

    @classmethod
    def create_agent(
        cls,
        provider: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> BaseLLMAgent:
        """
        Create or retrieve the agent for `provider`.

        Args:
            provider: Provider name. Defaults to `config["llm"]["provider"]`.
            settings: Provider settings passed to the agent's constructor.
                Defaults to the config section named after the provider.

        Returns:
            BaseLLMAgent: The cached instance for that provider.

        Raises:
            ValueError: If the provider is not registered.
        """
        cls._initialize_providers()

        if provider is None:
            provider = config.get("llm", {}).get("provider", "openai")
        provider = provider.lower()

        if provider not in cls._providers:
            available = list(cls._providers.keys())
            raise ValueError(
                f"Unknown LLM provider: '{provider}'. "
                f"Available providers: {available}"
            )

        if provider in cls._instances:
            logger.debug(f"Returning existing {provider} agent instance")
            return cls._instances[provider]

        if settings is None:
            settings = config.get(provider, {})

        logger.info(f"Creating new {provider} agent instance")
        agent = cls._providers[provider](settings)
        cls._instances[provider] = agent
        logger.info(
            f"Successfully created {provider} agent (model: {agent.get_model_name()})"
        )
        return agent

    @classmethod
    def register_provider(cls, name: str, agent_class: type):
        """
        Register a provider class.

        Raises:
            TypeError: If `agent_class` does not inherit from BaseLLMAgent.
        """
        cls._initialize_providers()

        if not issubclass(agent_class, BaseLLMAgent):
            raise TypeError(
                f"Agent class must inherit from BaseLLMAgent, got {agent_class}"
            )

        cls._providers[name.lower()] = agent_class
        logger.info(f"Registered new LLM provider: {name}")

    @classmethod
    def get_available_providers(cls) -> list:
        cls._initialize_providers()
        return list(cls._providers.keys())

    @classmethod
    def reset(cls):
        """Clear cached instances (used by tests)."""
        cls._instances = {}
        logger.debug("Reset all agent instances")
