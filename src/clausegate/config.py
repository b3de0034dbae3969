"""Process-level configuration and generator selection.

Configuration is read once at startup.  ``build_generator`` turns it into
the live OpenAIClient or the StandInGenerator; nothing downstream looks
at the configuration again.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from clausegate.llm.client import DEFAULT_MODEL, OpenAIClient
from clausegate.llm.protocols import Generator
from clausegate.llm.standin import StandInGenerator

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class ClauseGateConfig(BaseModel):
    """Settings for generator selection and the live client."""

    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    timeout: float = Field(default=60.0, gt=0)
    max_retries: int = Field(default=3, ge=1)
    base_delay: float = Field(default=1.0, ge=0)
    max_corrections: int = Field(default=1, ge=0)
    force_standin: bool = False

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @property
    def uses_standin(self) -> bool:
        return self.force_standin or not self.has_credentials

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClauseGateConfig:
        """Build a config from environment variables.

        Recognized: CLAUSEGATE_OPENAI_API_KEY (or OPENAI_API_KEY),
        CLAUSEGATE_OPENAI_BASE_URL, CLAUSEGATE_MODEL (or OPENAI_MODEL),
        CLAUSEGATE_TIMEOUT, CLAUSEGATE_FORCE_STANDIN.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {
            "api_key": env.get("CLAUSEGATE_OPENAI_API_KEY") or env.get("OPENAI_API_KEY") or None,
            "base_url": env.get("CLAUSEGATE_OPENAI_BASE_URL") or None,
            "force_standin": env.get("CLAUSEGATE_FORCE_STANDIN", "").lower() in _TRUTHY,
        }
        model = env.get("CLAUSEGATE_MODEL") or env.get("OPENAI_MODEL")
        if model:
            values["model"] = model
        timeout = env.get("CLAUSEGATE_TIMEOUT")
        if timeout:
            values["timeout"] = timeout
        return cls.model_validate(values)


def build_generator(config: ClauseGateConfig) -> Generator:
    """Select the generator implementation once, from configuration."""
    if config.uses_standin:
        logger.info("No API credential configured; using stand-in generator")
        return StandInGenerator()
    logger.info("Using OpenAI-compatible generator (model %s)", config.model)
    return OpenAIClient(
        api_key=config.api_key,
        base_url=config.base_url,
        model=config.model,
        timeout=config.timeout,
        max_retries=config.max_retries,
        base_delay=config.base_delay,
    )
