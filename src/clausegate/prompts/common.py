"""Shared fragments for analysis prompts.

Vocabularies are rendered from the result enums so the prompt and the
validator can never disagree about the allowed values.
"""

from __future__ import annotations

import enum

from clausegate.models.results import Severity

JSON_ONLY_RULE: str = (
    "IMPORTANT: Return ONLY valid JSON. No markdown, no code fences, "
    "no explanation outside the JSON."
)


def choices(enum_cls: type[enum.Enum], sep: str = "|") -> str:
    """Render an enum's values as ``a|b|c``."""
    return sep.join(member.value for member in enum_cls)


def quoted_choices(enum_cls: type[enum.Enum]) -> str:
    """Render an enum's values as ``"a", "b", or "c"``."""
    values = [f'"{member.value}"' for member in enum_cls]
    if len(values) < 2:
        return "".join(values)
    return ", ".join(values[:-1]) + f", or {values[-1]}"


def severity_rule() -> str:
    return f"Assign severity: {quoted_choices(Severity)}"


def document_block(intro: str, document_text: str) -> str:
    return f"{intro}\n\n---\nDOCUMENT:\n{document_text}\n---"
