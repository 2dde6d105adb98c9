"""Text Analyzer: summary, sentiment and keywords for free-form text via an LLM."""

__version__ = "0.1.0"
