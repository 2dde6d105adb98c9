"""
base_agent.py

Abstract base class defining the completion capability used by the analysis
service. Any provider client can be substituted behind this interface.
"""

from abc import ABC, abstractmethod


class BaseLLMAgent(ABC):
    """
    Abstract base class for LLM agents.

    Contract for implementations:
    - `complete` makes exactly one outbound call per invocation; no retries.
    - Provider failures are raised as `ClassifiedError` with a stable,
      provider-detail-free message.
    - The raw text of the reply is returned as-is; parsing it is the caller's job.
    """

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Send a single-message prompt to the model and return its raw text reply.

        Args:
            prompt: The instruction prompt.

        Returns:
            str: Content of the first choice.

        Raises:
            ClassifiedError: On missing configuration, provider failure, or an
                empty reply.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the provider name for logging (e.g. 'openai')."""

    @abstractmethod
    def get_model_name(self) -> str:
        """Return the configured model name."""
