"""Generator protocol.

The pipeline depends only on this interface.  The live OpenAIClient and
the deterministic StandInGenerator both implement it.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from clausegate.models.prompt import PromptPair


@runtime_checkable
class Generator(Protocol):
    """Protocol for pluggable text generators.

    Any object with generate() and close() methods matching this signature
    works.
    """

    def generate(
        self,
        prompt: PromptPair,
        *,
        cancel: threading.Event | None = None,
    ) -> str:
        """Return the raw text produced for ``prompt``.

        Raises:
            GenerationError: When no usable text could be obtained.
            GenerationCancelledError: When ``cancel`` is set mid-call.
        """
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...
