"""
config.py

Configuration management for the text analysis service.

Settings are read once from `config.yaml` at the project root, `${ENV_VAR}`
placeholders are replaced with values from the process environment, and the
result is validated with Pydantic before being exposed through a singleton.

Usage Example:

1. Import the config dict:
   from text_analyzer.config import config

2. Access a configuration value:
   api_key = config["openai"]["api_key"]
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

_ENV_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
_PACKAGE_DIR = Path(__file__).parent
DEFAULT_PROMPTS_FILE = str(_PACKAGE_DIR / "prompts" / "analysis_prompts.yaml")


class OpenAIConfig(BaseModel):
    api_key: Optional[str] = ""
    model_name: str = "gpt-3.5-turbo"
    max_tokens: int = Field(default=1000, gt=0)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)


class LLMConfig(BaseModel):
    provider: str = "openai"


class ApiConfig(BaseModel):
    # "development" adds stack traces to error bodies
    environment: str = ""


class PathsConfig(BaseModel):
    logs_dir: str = "./logs"
    prompts_file: str = DEFAULT_PROMPTS_FILE


class LoggingConfig(BaseModel):
    level: str = "DEBUG"


class ConfigModel(BaseModel):
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def expand_env_vars(data: Any) -> Any:
    """
    Recursively replaces `${NAME}` placeholders in string values.

    Unset variables are replaced with an empty string.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    if isinstance(data, str):
        return _ENV_PLACEHOLDER.sub(lambda m: os.getenv(m.group(1), ""), data)
    return data


class Config:
    """
    Loads and holds the application configuration.

    Used as a singleton through the module-level `config` dict. The YAML file
    is optional; every setting has a default in `ConfigModel`.

    Attributes:
        config (dict): The loaded, expanded and validated settings.
    """

    _instance = None
    _config: Optional[Dict[str, Any]] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._config = cls._instance._load_config()
        return cls._instance

    @staticmethod
    def config_path() -> Path:
        return _PACKAGE_DIR.parent / "config.yaml"

    def _load_config(self) -> Dict[str, Any]:
        config_path = self.config_path()

        config_dict: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as stream:
                try:
                    config_dict = yaml.safe_load(stream) or {}
                except yaml.YAMLError as exc:
                    print(f"Error loading config.yaml: {exc}")
                    raise

        expanded = expand_env_vars(config_dict)

        # Sections present in YAML but left empty come back as None
        expanded = {k: v for k, v in expanded.items() if v is not None}

        try:
            validated_config = ConfigModel(**expanded)
        except ValidationError as e:
            print(f"Configuration validation error: {e}")
            raise

        return validated_config.model_dump()

    @property
    def config(self) -> Dict[str, Any]:
        if self._config is None:
            raise RuntimeError("Config not loaded")
        return self._config

    def get(self, key, default=None):
        """
        Retrieves a top-level configuration section, returning `default` if absent.
        """
        return self.config.get(key, default)

    def __getitem__(self, key):
        return self.config[key]

    def __repr__(self):
        return f"Config(path={self.config_path()})"


# Singleton instance
config = Config().config
