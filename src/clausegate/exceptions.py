"""ClauseGate exception hierarchy.

All ClauseGate-specific exceptions inherit from ClauseGateError.
"""


class ClauseGateError(Exception):
    """Base exception for all ClauseGate errors."""


class UnknownContractError(ClauseGateError):
    """Raised when a task contract lookup fails."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Task contract not registered: {name}")


class DuplicateContractError(ClauseGateError):
    """Raised when a task contract name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Task contract already registered: {name}. "
            f"Use replace=True to overwrite it."
        )


class UnknownTaskError(ClauseGateError):
    """Raised when an analysis task lookup fails."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Analysis task not registered: {name}")


class InvalidTaskParamsError(ClauseGateError):
    """Raised when the parameters given to an analysis task are unusable."""

    def __init__(self, task: str, message: str) -> None:
        self.task = task
        super().__init__(f"Invalid parameters for task '{task}': {message}")


class GenerationCancelledError(ClauseGateError):
    """Raised when the caller abandons a request via its cancel event."""

    def __init__(self, stage: str) -> None:
        self.stage = stage
        super().__init__(f"Request cancelled during {stage}")


class CorrectionExhaustedError(ClauseGateError):
    """Generated output still failed validation after the corrective retry.

    Attributes:
        attempts: Number of generation calls made.
        diagnostics: Joined diagnostics from the last validation.
        contract: Name of the contract the output was checked against.
    """

    def __init__(self, attempts: int, diagnostics: str, contract: str) -> None:
        self.attempts = attempts
        self.diagnostics = diagnostics
        self.contract = contract
        super().__init__(
            f"Output failed '{contract}' validation after {attempts} "
            f"attempt(s): {diagnostics}"
        )
