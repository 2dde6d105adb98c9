"""
prompt_builder.py

Renders validated text into the fixed instruction prompt sent to the model.

The template is loaded once from the prompts YAML file (see
`config["paths"]["prompts_file"]`) and filled with `str.format`, so the same
text always produces the same prompt.
"""

from typing import Any, Dict, Optional

from text_analyzer.config import DEFAULT_PROMPTS_FILE, config
from text_analyzer.utils.helpers import load_yaml
from text_analyzer.utils.logger import get_logger

logger = get_logger()

PROMPT_KEY = "text_analysis"


class PromptBuilder:
    """
    Builds the analysis prompt from a template.

    Attributes:
        template (str): Instruction text containing a single `{text}` placeholder.
    """

    def __init__(self, prompts_file: Optional[str] = None):
        prompts_file = prompts_file or config.get("paths", {}).get(
            "prompts_file", DEFAULT_PROMPTS_FILE
        )
        prompts: Dict[str, Any] = load_yaml(prompts_file)
        self.template: str = prompts[PROMPT_KEY]["prompt"]
        logger.info(f"PromptBuilder initialized with prompts from: {prompts_file}")

    def build(self, text: str) -> str:
        """
        Embeds `text` verbatim, in quotes, into the instruction template.

        The prompt asks for a JSON object with `summary`, `sentiment`
        (positive/negative/neutral) and exactly three `keywords`, and for JSON
        only, without prose or code fences.
        """
        return self.template.format(text=text)
