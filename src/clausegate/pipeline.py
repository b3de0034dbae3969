"""Self-correcting generation pipeline.

Runs a prompt through a generator, validates the raw output against a
task contract, and on failure re-prompts once with the validation
diagnostics appended before giving up.

States::

    requested -> awaiting_generation -> validating -> succeeded
                        ^                    |
                        |                    +-> retrying_with_feedback
                        +--------------------+        (at most max_corrections times)
                                             +-> failed

The generator's own transient-failure retries happen inside
``awaiting_generation`` and are invisible here.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from clausegate.contracts import TaskContract
from clausegate.exceptions import CorrectionExhaustedError, GenerationCancelledError
from clausegate.llm.protocols import Generator
from clausegate.models.prompt import PromptPair
from clausegate.tasks import get_task
from clausegate.validation import validate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

CORRECTION_TEMPLATE: str = (
    "IMPORTANT CORRECTION: Your previous response had validation errors: "
    "{diagnostics}. Fix these issues and return valid JSON matching the "
    "required contract."
)


class PipelineState(str, enum.Enum):
    """States a single request moves through."""

    REQUESTED = "requested"
    AWAITING_GENERATION = "awaiting_generation"
    VALIDATING = "validating"
    RETRYING_WITH_FEEDBACK = "retrying_with_feedback"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineResult(Generic[T]):
    """Result of a validated generation.

    Attributes:
        value: The validated model instance.
        attempts: Generator calls made (1 = first output was valid).
        history: Diagnostics of rejected outputs (None if first try succeeded).
        states: States visited, in order.
    """

    value: T
    attempts: int
    history: list[str] | None = None
    states: tuple[PipelineState, ...] = ()


def correction_note(diagnostics: str) -> str:
    return CORRECTION_TEMPLATE.format(diagnostics=diagnostics)


class Pipeline:
    """Generic validate-and-correct orchestrator.

    The generator is injected; the pipeline never inspects configuration
    to decide between live and stand-in generation.

    Usage::

        pipeline = Pipeline(build_generator(ClauseGateConfig.from_env()))
        result = pipeline.analyze("review", document_text)
    """

    def __init__(self, generator: Generator, *, max_corrections: int = 1) -> None:
        if max_corrections < 0:
            raise ValueError(f"max_corrections must be >= 0, got {max_corrections}")
        self._generator = generator
        self.max_corrections = max_corrections

    @property
    def generator(self) -> Generator:
        return self._generator

    def execute(
        self,
        prompt: PromptPair,
        contract: TaskContract,
        *,
        cancel: threading.Event | None = None,
    ) -> PipelineResult:
        """Generate and validate, correcting at most ``max_corrections`` times.

        Args:
            prompt: The original prompt. Never modified; corrections derive
                new pairs from it.
            contract: Contract the output must satisfy.
            cancel: Optional event checked between every pair of states.

        Returns:
            PipelineResult holding the validated model.

        Raises:
            CorrectionExhaustedError: Output still invalid after the last
                corrective attempt.
            GenerationError: The generator gave up.
            GenerationCancelledError: ``cancel`` was set.
        """
        states: list[PipelineState] = [PipelineState.REQUESTED]

        def enter(state: PipelineState) -> None:
            if cancel is not None and cancel.is_set():
                raise GenerationCancelledError(state.value)
            logger.debug("[%s] %s -> %s", contract.name, states[-1].value, state.value)
            states.append(state)

        history: list[str] = []
        current = prompt
        attempts = 0
        corrections = 0

        while True:
            enter(PipelineState.AWAITING_GENERATION)
            attempts += 1
            raw = self._generator.generate(current, cancel=cancel)
            logger.debug("[%s] generator returned %d chars", contract.name, len(raw))

            enter(PipelineState.VALIDATING)
            outcome = validate(raw, contract)
            if outcome.ok:
                states.append(PipelineState.SUCCEEDED)
                logger.info(
                    "[%s] validated after %d attempt(s)", contract.name, attempts
                )
                return PipelineResult(
                    value=outcome.value,
                    attempts=attempts,
                    history=history if history else None,
                    states=tuple(states),
                )

            history.append(outcome.diagnostics)
            if corrections >= self.max_corrections:
                states.append(PipelineState.FAILED)
                logger.error(
                    "[%s] %s validation failed after %d attempt(s): %s",
                    contract.name, outcome.kind, attempts, outcome.diagnostics,
                )
                raise CorrectionExhaustedError(attempts, outcome.diagnostics, contract.name)

            corrections += 1
            enter(PipelineState.RETRYING_WITH_FEEDBACK)
            logger.warning(
                "[%s] %s validation failed, retrying with feedback: %s",
                contract.name, outcome.kind, outcome.diagnostics,
            )
            current = prompt.with_correction(correction_note(outcome.diagnostics))

    def run(
        self,
        prompt: PromptPair,
        contract: TaskContract,
        *,
        cancel: threading.Event | None = None,
    ) -> BaseModel:
        """Like execute(), but return only the validated model."""
        return self.execute(prompt, contract, cancel=cancel).value

    def analyze(
        self,
        task_name: str,
        document_text: str,
        params: Any = None,
        *,
        cancel: threading.Event | None = None,
    ) -> BaseModel:
        """Compose the prompt for a registered task and run it.

        Raises:
            UnknownTaskError: If ``task_name`` is not registered.
        """
        task = get_task(task_name)
        prompt = task.compose(document_text, params)
        logger.info(
            "[%s] processing %d chars (%r)", task.name, len(document_text), prompt
        )
        return self.run(prompt, task.contract, cancel=cancel)
