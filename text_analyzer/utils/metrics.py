"""
metrics.py

Provides a simple centralized tracker for upstream LLM usage and errors.
"""


class MetricsTracker:
    """
    Tracks operational counters for calls to the completion provider.

    A global instance `metrics_tracker` is provided for convenience.

    Attributes:
        api_calls (int): Count of successful upstream calls.
        total_tokens (int): Total tokens reported by the provider (prompt + completion).
        errors (int): Count of failed upstream calls or unusable replies.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Resets all counters to zero."""
        self.api_calls: int = 0
        self.total_tokens: int = 0
        self.errors: int = 0

    def increment_api_calls(self, count: int = 1):
        self.api_calls += count

    def add_tokens(self, count: int):
        """
        Adds to the total token count.

        Ignores values that are not non-negative integers, since the provider's
        usage block may be missing or partially populated.
        """
        if isinstance(count, int) and count >= 0:
            self.total_tokens += count

    def increment_errors(self, count: int = 1):
        self.errors += count

    def get_summary(self) -> dict:
        """Returns the tracked counters as a dictionary."""
        return {
            "total_api_calls": self.api_calls,
            "total_tokens_used": self.total_tokens,
            "total_errors": self.errors,
        }


# Global instance
metrics_tracker = MetricsTracker()
