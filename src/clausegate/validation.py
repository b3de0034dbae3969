"""Validation of raw generated text against a task contract.

Two failure classes are reported separately so the diagnostics can be fed
back to the generator:

- **syntax** -- the text is not JSON at all.
- **schema** -- the JSON violates the contract (one issue per violation).

``validate`` never raises for bad input; any violation makes the whole
outcome invalid.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

import pydantic
from pydantic import BaseModel

from clausegate.contracts import TaskContract

EXCERPT_LIMIT = 200
ROOT_PATH = "(root)"
SYNTAX_MESSAGE = "Response is not valid JSON"


@dataclass(frozen=True)
class ValidationIssue:
    """One violation: where it is and what is wrong."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one raw response.

    Attributes:
        value: The validated model instance, or None when invalid.
        issues: Ordered violations (empty when valid).
        kind: "syntax" or "schema" when invalid, None when valid.
    """

    value: BaseModel | None = None
    issues: tuple[ValidationIssue, ...] = ()
    kind: Literal["syntax", "schema"] | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.issues

    @property
    def diagnostics(self) -> str:
        """Issues joined in order, one ``path: message`` per violation."""
        return "; ".join(str(issue) for issue in self.issues)

    def __repr__(self) -> str:
        if self.ok:
            return f"ValidationOutcome(valid {type(self.value).__name__})"
        return f"ValidationOutcome({self.kind}, {len(self.issues)} issue(s))"


def _excerpt(raw: str) -> str:
    if len(raw) <= EXCERPT_LIMIT:
        return raw
    return raw[:EXCERPT_LIMIT] + "..."


def _format_path(loc: tuple) -> str:
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def validate(raw: str, contract: TaskContract) -> ValidationOutcome:
    """Parse ``raw`` as JSON and check it against ``contract``.

    Args:
        raw: Literal text returned by the generator.
        contract: The contract the result must satisfy.

    Returns:
        A valid outcome holding the model instance, or an invalid outcome
        listing every violation.
    """
    try:
        json.loads(raw)
    except (json.JSONDecodeError, TypeError, RecursionError) as exc:
        reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
        issue = ValidationIssue(
            path=ROOT_PATH,
            message=f"{SYNTAX_MESSAGE} ({reason}). Received: {_excerpt(str(raw))!r}",
        )
        return ValidationOutcome(issues=(issue,), kind="syntax")

    try:
        # strict: JSON strings and booleans never coerce to numbers
        value = contract.model.model_validate_json(raw, strict=True)
    except pydantic.ValidationError as exc:
        issues = tuple(
            ValidationIssue(path=_format_path(err["loc"]), message=err["msg"])
            for err in exc.errors()
        )
        return ValidationOutcome(issues=issues, kind="schema")

    return ValidationOutcome(value=value)
