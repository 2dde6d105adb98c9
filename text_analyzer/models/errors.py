"""
errors.py

Classified error type shared by every stage of the analysis pipeline.

Each failure is tagged with an `ErrorKind` at the point where it happens and
travels unchanged up to the HTTP layer, which uses the kind to choose the
response status and how much to log.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    UPSTREAM_429 = "upstream_429"
    UPSTREAM_AUTH = "upstream_auth"
    UPSTREAM_FORBIDDEN = "upstream_forbidden"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_MALFORMED = "upstream_malformed"
    UPSTREAM_GENERIC = "upstream_generic"


class ClassifiedError(Exception):
    """
    An error carrying a fixed category and a caller-safe message.

    Attributes:
        kind (ErrorKind): The failure category.
        message (str): Stable, user-facing message. Never contains raw
            provider error text.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        """HTTP status for this error: 400 for validation, 500 for everything else."""
        return 400 if self.kind is ErrorKind.VALIDATION else 500

    def __repr__(self):
        return f"ClassifiedError(kind={self.kind.value!r}, message={self.message!r})"
