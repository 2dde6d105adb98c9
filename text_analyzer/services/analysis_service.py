# text_analyzer/services/analysis_service.py
from typing import Any

from text_analyzer.agents.base_agent import BaseLLMAgent
from text_analyzer.agents.prompt_builder import PromptBuilder
from text_analyzer.agents.response_normalizer import normalize_response
from text_analyzer.models.analysis_result import AnalysisResult
from text_analyzer.services.input_validator import validate_analysis_request
from text_analyzer.utils.logger import get_logger

logger = get_logger()


class AnalysisService:
    def __init__(self, agent: BaseLLMAgent, prompt_builder: PromptBuilder):
        """
        Initializes the AnalysisService with its injected collaborators.

        Args:
            agent (BaseLLMAgent): Completion capability used for the single upstream call.
            prompt_builder (PromptBuilder): Renders validated text into the instruction prompt.
        """
        self.agent = agent
        self.prompt_builder = prompt_builder
        logger.info(
            f"AnalysisService initialized with {agent.get_provider_name()} agent "
            f"(model: {agent.get_model_name()})."
        )

    async def analyze(self, raw_body: Any) -> AnalysisResult:
        """
        Runs validate -> build prompt -> complete -> normalize for one request.

        Any `ClassifiedError` raised by a stage stops the pipeline and
        propagates unchanged. Validation failures never reach the agent.
        """
        request = validate_analysis_request(raw_body)
        logger.debug(f"Analyzing text of {len(request.text)} characters.")

        prompt = self.prompt_builder.build(request.text)
        content = await self.agent.complete(prompt)
        result = normalize_response(content)

        logger.info(f"Analysis complete (sentiment={result.sentiment.value}).")
        return result
