"""Analysis tasks: a prompt composer bound to the contract it targets.

Built-ins:

- ``comparison`` -- params: a Playbook (or a dict describing one).
- ``review`` -- params: None, or a mapping with an optional ``jurisdiction``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

import pydantic

from clausegate.contracts import COMPARISON_CONTRACT, REVIEW_CONTRACT, TaskContract
from clausegate.exceptions import InvalidTaskParamsError, UnknownTaskError
from clausegate.models.playbook import Playbook
from clausegate.models.prompt import PromptPair
from clausegate.prompts.comparison import compose_comparison_prompt
from clausegate.prompts.review import compose_review_prompt

Composer = Callable[[str, Any], PromptPair]


@dataclass(frozen=True)
class AnalysisTask:
    """A named analysis: how to build its prompt and what its output must satisfy."""

    name: str
    contract: TaskContract
    compose: Composer


def _compose_comparison(document_text: str, params: Any) -> PromptPair:
    if isinstance(params, Playbook):
        playbook = params
    else:
        try:
            playbook = Playbook.model_validate(params)
        except pydantic.ValidationError as exc:
            raise InvalidTaskParamsError("comparison", str(exc)) from exc
    return compose_comparison_prompt(document_text, playbook)


def _compose_review(document_text: str, params: Any) -> PromptPair:
    jurisdiction = None
    if isinstance(params, Mapping):
        jurisdiction = params.get("jurisdiction") or None
    elif isinstance(params, str):
        jurisdiction = params or None
    return compose_review_prompt(document_text, jurisdiction)


_tasks: dict[str, AnalysisTask] = {}


def register_task(task: AnalysisTask) -> None:
    _tasks[task.name] = task


def get_task(name: str) -> AnalysisTask:
    try:
        return _tasks[name]
    except KeyError:
        raise UnknownTaskError(name) from None


def list_tasks() -> list[str]:
    return sorted(_tasks)


register_task(AnalysisTask("comparison", COMPARISON_CONTRACT, _compose_comparison))
register_task(AnalysisTask("review", REVIEW_CONTRACT, _compose_review))
