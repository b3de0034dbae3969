"""Live generator: OpenAI-compatible chat completions over httpx.

Each attempt is one JSON-mode request at temperature 0.  Failures are
classified into ErrorKind tags at the HTTP boundary; tenacity retries the
transient kinds with exponential backoff.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from typing import Any, Callable

import httpx
import tenacity

from clausegate.exceptions import GenerationCancelledError
from clausegate.llm.errors import (
    ErrorKind,
    GenerationError,
    LLMAuthError,
    LLMClientError,
    LLMConfigError,
    LLMRateLimitError,
    LLMResponseError,
    LLMServerError,
    LLMTimeoutError,
)
from clausegate.models.prompt import PromptPair

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"

_AUTH_ERROR_STATUS_CODES = {401, 403}
_QUOTA_ERROR_CODES = {"insufficient_quota", "billing_hard_limit_reached"}


def _is_retryable(exc: BaseException) -> bool:
    """Check if an exception is retryable.

    Retryable kinds: rate_limit, timeout, server_error.
    Everything else (auth, bad_request, quota, empty_response, ...) is not.
    """
    return isinstance(exc, LLMClientError) and exc.retryable


def _error_code(response: httpx.Response) -> str | None:
    """Pull ``error.code`` out of an OpenAI-style error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("code")
    return None


class OpenAIClient:
    """Sync httpx generator for OpenAI-compatible chat completions.

    Implements the Generator protocol. Retries transient failures
    (rate limiting, timeouts, 5xx) with exponential backoff of
    ``base_delay * 2 ** (attempt - 1)`` seconds. Fails immediately on
    permanent errors (auth, malformed request, exhausted quota, empty
    response).

    Usage::

        with OpenAIClient(api_key="sk-...") as client:
            raw = client.generate(prompt)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        max_retries: int = 3,
        base_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the OpenAI-compatible client.

        Args:
            api_key: API key. Falls back to CLAUSEGATE_OPENAI_API_KEY, then
                OPENAI_API_KEY.
            base_url: API base URL. Falls back to CLAUSEGATE_OPENAI_BASE_URL,
                then to https://api.openai.com/v1.
            model: Model identifier sent with every request.
            timeout: Per-attempt network timeout in seconds.
            max_retries: Maximum total attempts for retryable errors.
            base_delay: First backoff delay in seconds.
            sleep: Function used to wait between attempts.

        Raises:
            LLMConfigError: If no API key is provided or found in environment.
        """
        self._api_key = (
            api_key
            or os.environ.get("CLAUSEGATE_OPENAI_API_KEY")
            or os.environ.get("OPENAI_API_KEY", "")
        )
        if not self._api_key:
            raise LLMConfigError(
                "No API key provided. Pass api_key= or set CLAUSEGATE_OPENAI_API_KEY "
                "environment variable."
            )
        self._base_url = (
            base_url
            or os.environ.get("CLAUSEGATE_OPENAI_BASE_URL", DEFAULT_BASE_URL)
        ).rstrip("/")
        self.model = model
        self._timeout = timeout
        self._max_retries = max_retries
        self._base_delay = base_delay
        self._sleep = sleep
        self._client = httpx.Client(
            timeout=timeout,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
        )

    def generate(
        self,
        prompt: PromptPair,
        *,
        cancel: threading.Event | None = None,
    ) -> str:
        """Send the prompt and return the response text, retrying transient failures.

        Uses tenacity.Retrying programmatically (not as decorator) so that
        the retry budget and backoff are configurable per-instance.

        Args:
            prompt: Instruction/data pair to send.
            cancel: Optional event; when set, no further attempt is made and
                any backoff wait ends early.

        Returns:
            The non-empty content of the first choice.

        Raises:
            GenerationError: On a permanent error, or after all attempts failed.
            GenerationCancelledError: If ``cancel`` was set.
        """
        attempts = 0

        def attempt() -> str:
            nonlocal attempts
            if cancel is not None and cancel.is_set():
                raise GenerationCancelledError("generation")
            attempts += 1
            logger.debug(
                "Calling %s (attempt %d/%d) for task %s",
                self.model, attempts, self._max_retries, prompt.task,
            )
            response = self._do_chat(prompt.to_messages())
            content = self.extract_content(response)
            if not content.strip():
                raise LLMResponseError(
                    "LLM returned empty response", kind=ErrorKind.EMPTY_RESPONSE
                )
            return content

        retryer = tenacity.Retrying(
            retry=tenacity.retry_if_exception(_is_retryable),
            wait=tenacity.wait_exponential(multiplier=self._base_delay, exp_base=2),
            stop=tenacity.stop_after_attempt(self._max_retries),
            sleep=self._sleeper(cancel),
            before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        try:
            return retryer(attempt)
        except LLMClientError as exc:
            logger.error("Generation failed after %d attempt(s): %s", attempts, exc)
            raise GenerationError(attempts, exc) from exc

    def _sleeper(self, cancel: threading.Event | None) -> Callable[[float], None]:
        if cancel is None:
            return self._sleep

        def wait(seconds: float) -> None:
            if cancel.wait(seconds):
                raise GenerationCancelledError("backoff")

        return wait

    def _do_chat(self, messages: list[dict[str, str]], **kwargs: Any) -> dict:
        """Execute a single chat completion request (no retry).

        Every failure leaves here as an LLMClientError tagged with its kind.
        """
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": 0,
            "response_format": {"type": "json_object"},
        }
        payload.update(kwargs)

        try:
            response = self._client.post(
                f"{self._base_url}/chat/completions",
                json=payload,
            )
        except httpx.TimeoutException as exc:
            raise LLMTimeoutError(
                f"Request timed out after {self._timeout}s: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise LLMClientError(
                f"Connection failed: {exc}", kind=ErrorKind.CONNECTION
            ) from exc

        status = response.status_code
        if status in _AUTH_ERROR_STATUS_CODES:
            raise LLMAuthError(
                f"Authentication failed: HTTP {status} - {response.text}"
            )

        if status == 429:
            if _error_code(response) in _QUOTA_ERROR_CODES:
                raise LLMClientError(
                    f"Quota exhausted: HTTP 429 - {response.text}",
                    kind=ErrorKind.QUOTA,
                )
            retry_after_raw = response.headers.get("Retry-After")
            retry_after: float | None = None
            if retry_after_raw is not None:
                try:
                    retry_after = float(retry_after_raw)
                except (ValueError, TypeError):
                    pass
            raise LLMRateLimitError(
                f"Rate limited: HTTP 429 - {response.text}",
                retry_after=retry_after,
            )

        if status >= 500:
            raise LLMServerError(f"Server error: HTTP {status} - {response.text}")

        if status >= 400:
            raise LLMClientError(
                f"Request rejected: HTTP {status} - {response.text}",
                kind=ErrorKind.BAD_REQUEST,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMResponseError(
                f"Response body is not JSON: {response.text[:200]}"
            ) from exc
        if not isinstance(data, dict) or "choices" not in data:
            raise LLMResponseError(
                f"Unexpected response format: missing 'choices' key. "
                f"Response: {data}"
            )
        return data

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> OpenAIClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @staticmethod
    def extract_content(response: dict) -> str:
        """Extract the assistant's message content from a response dict.

        Raises:
            LLMResponseError: If the response format is unexpected.
        """
        try:
            return response["choices"][0]["message"].get("content") or ""
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise LLMResponseError(
                f"Cannot extract content from response: {exc}. "
                f"Response: {response}"
            ) from exc
