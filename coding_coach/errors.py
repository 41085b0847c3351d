"""
Error taxonomy for the analysis pipeline.

Validation and configuration errors short-circuit; transient and malformed
response errors are retried by the gateway and end up wrapped in
ExhaustedRetriesError once the retry budget is spent.
"""

from typing import Optional


class CoachError(Exception):
    """Base class for every error surfaced to the HTTP layer."""

    status_code = 500
    retryable = False

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidRequestError(CoachError):
    """Bad or missing input, correctable by the user."""

    status_code = 400


class ConfigurationError(CoachError):
    """Deployment misconfiguration, e.g. a missing API key."""


class TransientServiceError(CoachError):
    """Network failure, API error or rate limit from the model service."""

    retryable = True


class ModelTimeoutError(TransientServiceError):
    pass


class MalformedResponseError(CoachError):
    """Model output does not match the AnalysisResult contract."""

    retryable = True


class ExhaustedRetriesError(CoachError):
    def __init__(self, attempts: int, last_error: Exception):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            "Failed to analyze code",
            details=f"Gave up after {attempts} attempt(s): {last_error}",
        )
