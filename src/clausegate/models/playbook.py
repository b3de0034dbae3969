"""Playbook models: the standard a document is benchmarked against.

Playbook storage lives outside this package; callers construct a
Playbook directly or load one from a JSON file.
"""

from __future__ import annotations

import enum
import json
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Importance(str, enum.Enum):
    """How much weight the standard puts on a clause."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"


class PlaybookClause(BaseModel):
    """One standard clause of a playbook."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    title: str
    standard_text: str
    importance: Importance = Importance.MAJOR


class Playbook(BaseModel):
    """A named, ordered set of standard clauses."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    id: str
    name: str
    description: str = ""
    clauses: list[PlaybookClause] = Field(default_factory=list)


def load_playbook(path: str | Path) -> Playbook:
    """Read a playbook from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file does not describe a playbook.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Playbook.model_validate(data)
