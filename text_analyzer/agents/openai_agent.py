"""
openai_agent.py

OpenAI implementation of the completion capability.

Sends one chat completion request per call with fixed model parameters and
returns the raw text of the first choice. Provider failures are mapped to
stable `ClassifiedError` categories:

    1. 429 / quota / billing         -> UPSTREAM_429
    2. 401 / unauthorized / bad key  -> UPSTREAM_AUTH
    3. 403 / forbidden               -> UPSTREAM_FORBIDDEN
    4. 500 / 502 / 503               -> UPSTREAM_UNAVAILABLE
    5. anything else                 -> UPSTREAM_GENERIC

The HTTP status of a typed `openai.APIStatusError` is checked first; the
lower-cased error message is matched by substring as a fallback, first match
wins. No retries are made: the client is built with `max_retries=0`.

Usage:
    from text_analyzer.config import config
    agent = OpenAIAgent(config["openai"])
    content = await agent.complete("Prompt instructing JSON output.")
"""

from typing import Any, Dict, Optional, Tuple

from openai import APIStatusError, AsyncOpenAI

from text_analyzer.models.errors import ClassifiedError, ErrorKind
from text_analyzer.utils.logger import get_logger
from text_analyzer.utils.metrics import metrics_tracker
from .base_agent import BaseLLMAgent

logger = get_logger()

MISSING_KEY_MESSAGE = "OpenAI API key not configured"
EMPTY_RESPONSE_MESSAGE = "No response from OpenAI API"

# (kind, user-facing message, status codes, message substrings), checked in order
_CLASSIFICATION_RULES: Tuple[Tuple[ErrorKind, str, Tuple[int, ...], Tuple[str, ...]], ...] = (
    (
        ErrorKind.UPSTREAM_429,
        "OpenAI API quota exceeded",
        (429,),
        ("429", "quota", "billing"),
    ),
    (
        ErrorKind.UPSTREAM_AUTH,
        "Invalid OpenAI API key",
        (401,),
        ("401", "unauthorized", "invalid api key"),
    ),
    (
        ErrorKind.UPSTREAM_FORBIDDEN,
        "OpenAI API access forbidden.",
        (403,),
        ("403", "forbidden"),
    ),
    (
        ErrorKind.UPSTREAM_UNAVAILABLE,
        "OpenAI API service temporarily unavailable. Please try again later",
        (500, 502, 503),
        ("500", "502", "503"),
    ),
)
GENERIC_FAILURE_MESSAGE = "Failed to analyze text with AI service."


def classify_provider_error(error: Exception) -> ClassifiedError:
    """
    Maps a provider or transport failure to a `ClassifiedError`.

    Args:
        error: The exception raised by the OpenAI client (or any transport).

    Returns:
        ClassifiedError: The first matching category, or UPSTREAM_GENERIC.
    """
    status_code: Optional[int] = getattr(error, "status_code", None)
    if isinstance(error, APIStatusError) and status_code is not None:
        for kind, message, codes, _ in _CLASSIFICATION_RULES:
            if status_code in codes:
                return ClassifiedError(kind, message)

    error_message = str(error).lower()
    for kind, message, _, needles in _CLASSIFICATION_RULES:
        if any(needle in error_message for needle in needles):
            return ClassifiedError(kind, message)

    return ClassifiedError(ErrorKind.UPSTREAM_GENERIC, GENERIC_FAILURE_MESSAGE)


class OpenAIAgent(BaseLLMAgent):
    """
    Completion client backed by the OpenAI chat completions API.

    Settings are passed in explicitly at construction rather than read from
    the global config, so tests can build agents with any values.

    Attributes:
        api_key (str): Credential; may be empty, in which case every call fails
            with a CONFIGURATION error before touching the network.
        model (str): Model identifier.
        max_tokens (int): Cap on output tokens.
        temperature (float): Sampling temperature.
        client (AsyncOpenAI | None): Underlying client, only built when a key is set.
    """

    def __init__(self, openai_config: Dict[str, Any]):
        self.api_key: str = openai_config.get("api_key") or ""
        self.model: str = openai_config.get("model_name", "gpt-3.5-turbo")
        self.max_tokens: int = openai_config.get("max_tokens", 1000)
        self.temperature: float = openai_config.get("temperature", 0.3)

        self.client: Optional[AsyncOpenAI] = None
        if self.api_key:
            self.client = AsyncOpenAI(api_key=self.api_key, max_retries=0)
        else:
            logger.warning("OpenAI API key is not set; analysis requests will fail.")

    async def complete(self, prompt: str) -> str:
        """
        Calls the chat completions API once with `prompt` as the only user message.

        Args:
            prompt (str): The instruction prompt.

        Returns:
            str: Raw content of the first choice.

        Raises:
            ClassifiedError: CONFIGURATION if no key is set, UPSTREAM_MALFORMED
                if the reply has no content, or the category chosen by
                `classify_provider_error` for a failed call.
        """
        if not self.api_key or self.client is None:
            raise ClassifiedError(ErrorKind.CONFIGURATION, MISSING_KEY_MESSAGE)

        logger.debug(f"Calling OpenAI chat completions API (model={self.model})")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"OpenAI API error: {type(e).__name__}: {e}")
            metrics_tracker.increment_errors()
            raise classify_provider_error(e) from e

        content = None
        if response.choices:
            message = response.choices[0].message
            content = message.content if message is not None else None
        if not content:
            logger.error("OpenAI API returned no content in the first choice.")
            metrics_tracker.increment_errors()
            raise ClassifiedError(ErrorKind.UPSTREAM_MALFORMED, EMPTY_RESPONSE_MESSAGE)

        metrics_tracker.increment_api_calls()
        usage = getattr(response, "usage", None)
        total_tokens = getattr(usage, "total_tokens", None) if usage else None
        if total_tokens is not None:
            metrics_tracker.add_tokens(total_tokens)
            logger.debug(
                f"API Call Successful. Total Tokens: {total_tokens} "
                f"(Prompt: {getattr(usage, 'prompt_tokens', 'N/A')}, "
                f"Completion: {getattr(usage, 'completion_tokens', 'N/A')})"
            )
        else:
            logger.debug("API Call Successful. Token usage not reported.")

        return content

    def get_provider_name(self) -> str:
        return "openai"

    def get_model_name(self) -> str:
        return self.model
