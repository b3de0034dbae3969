"""Generator infrastructure for ClauseGate.

Provides an OpenAI-compatible HTTP generator with transient-failure retry,
a deterministic stand-in generator, and the Generator protocol both
implement.
"""

from clausegate.llm.client import OpenAIClient
from clausegate.llm.errors import (
    RETRYABLE_KINDS,
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
from clausegate.llm.protocols import Generator
from clausegate.llm.standin import StandInGenerator

__all__ = [
    "OpenAIClient",
    "StandInGenerator",
    "Generator",
    "ErrorKind",
    "RETRYABLE_KINDS",
    "LLMClientError",
    "LLMConfigError",
    "LLMRateLimitError",
    "LLMAuthError",
    "LLMTimeoutError",
    "LLMServerError",
    "LLMResponseError",
    "GenerationError",
]
