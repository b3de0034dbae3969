"""Prompt value type passed between the composer, pipeline and generators."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PromptPair:
    """Instruction/data text pair sent to the generation service.

    Attributes:
        instruction_text: Sent as the system message.
        data_text: Sent as the user message (carries the document).
        task: Name of the task contract the prompt targets, or None.
    """

    instruction_text: str
    data_text: str
    task: str | None = None

    def with_correction(self, note: str) -> PromptPair:
        """Return a new pair with ``note`` appended to the data text."""
        return replace(self, data_text=f"{self.data_text}\n\n{note}")

    def to_messages(self) -> list[dict[str, str]]:
        """Render as OpenAI-style chat messages."""
        return [
            {"role": "system", "content": self.instruction_text},
            {"role": "user", "content": self.data_text},
        ]

    def __repr__(self) -> str:
        return (
            f"PromptPair(task={self.task!r}, "
            f"instruction={len(self.instruction_text)} chars, "
            f"data={len(self.data_text)} chars)"
        )
