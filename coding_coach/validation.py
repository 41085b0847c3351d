from typing import Any, Optional

from pydantic import BaseModel

from coding_coach.models import AnalysisRequest


class ValidationDecision(BaseModel):
    accepted: bool
    reason: Optional[str] = None
    request: Optional[AnalysisRequest] = None

    @classmethod
    def accept(cls, request: AnalysisRequest) -> "ValidationDecision":
        return cls(accepted=True, request=request)

    @classmethod
    def reject(cls, reason: str) -> "ValidationDecision":
        return cls(accepted=False, reason=reason)


def check_request(body: Any, max_content_length: int) -> ValidationDecision:
    """
    Check an untrusted request body before anything is sent to the model.

    Args:
        body: The decoded JSON body as received from the client.
        max_content_length: Upper bound on the number of characters in content.

    Returns:
        An accepted decision carrying a typed AnalysisRequest, or a rejected
        decision with a user-facing reason.
    """
    if not isinstance(body, dict):
        return ValidationDecision.reject("Request body must be a JSON object")

    filename = body.get("filename")
    content = body.get("content")

    if not content or not filename:
        return ValidationDecision.reject("Missing filename or content")

    if not isinstance(content, str):
        return ValidationDecision.reject("File content must be text")

    if not isinstance(filename, str):
        return ValidationDecision.reject("Filename must be a string")

    if len(content) > max_content_length:
        return ValidationDecision.reject(
            f"File is too large ({len(content)} characters, limit is {max_content_length})"
        )

    return ValidationDecision.accept(AnalysisRequest(filename=filename, content=content))
