"""
Gateway to the Gemini API.

This is the only part of the service that leaves the process: one
generate_content call per attempt, raced against a timeout, with the reply
validated against AnalysisResult before it is handed back.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from google import genai
from google.genai.errors import APIError
from pydantic import ValidationError

from coding_coach.constants import RESPONSE_SCHEMA
from coding_coach.errors import (
    ConfigurationError,
    MalformedResponseError,
    ModelTimeoutError,
    TransientServiceError,
)
from coding_coach.models import AnalysisResult
from coding_coach.retry import RetryPolicy, run_with_retry


class GeminiGateway:
    """Sends analysis prompts to Gemini and returns validated results."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        timeout: float = 50.0,
        retry_policy: Optional[RetryPolicy] = None,
        client_factory: Callable[..., Any] = genai.Client,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            api_key: Gemini API key. An empty key makes every call fail with
                     ConfigurationError.
            model: Gemini model name.
            timeout: Seconds allowed for a single attempt.
            retry_policy: Retry budget and backoff; defaults to 2 retries, 1s base.
            client_factory: Builds the SDK client from an api_key.
            sleep: Awaitable used for the backoff delay.
        """
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._retry_policy = retry_policy or RetryPolicy()
        self._client_factory = client_factory
        self._sleep = sleep
        self._client = None

    def _get_client(self):
        if self._client is None:
            try:
                self._client = self._client_factory(api_key=self._api_key)
            except Exception as e:
                logging.error(f"Failed to initialize Gemini client: {e}")
                raise ConfigurationError(
                    "Gemini client could not be initialized", details=str(e)
                ) from e
        return self._client

    async def analyze(self, prompt: str) -> AnalysisResult:
        if not self._api_key:
            raise ConfigurationError(
                "Server is not configured", details="GEMINI_API_KEY is not set"
            )

        client = self._get_client()
        return await run_with_retry(
            lambda: self._attempt(client, prompt),
            self._retry_policy,
            sleep=self._sleep,
        )

    async def _attempt(self, client, prompt: str) -> AnalysisResult:
        config = genai.types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
        )
        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self._model,
                    contents=[prompt],
                    config=config,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise ModelTimeoutError(
                f"Gemini did not respond within {self._timeout:g}s"
            ) from e
        except APIError as e:
            logging.error(f"Gemini API Error: {e}")
            raise TransientServiceError(f"Gemini API error: {e}") from e
        except Exception as e:
            logging.error(f"Gemini request failed: {e}")
            raise TransientServiceError(f"Gemini request failed: {e}") from e

        return parse_result(extract_text(response))


def extract_text(response: Any) -> str:
    """Pull the text of the first part of the first candidate out of a response."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise MalformedResponseError("Gemini response has no candidates")

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        raise MalformedResponseError("Gemini candidate has no content parts")

    text = getattr(parts[0], "text", None)
    if not isinstance(text, str) or not text.strip():
        raise MalformedResponseError("Gemini candidate has no text")
    return text


def parse_result(text: str) -> AnalysisResult:
    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as e:
        raise MalformedResponseError(
            "Gemini response does not match the analysis format",
            details=f"{e.error_count()} validation error(s)",
        ) from e
