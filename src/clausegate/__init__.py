"""ClauseGate: validated, self-correcting structured generation for contract analysis.

Turns a free-form text-generation service into a dependable source of
schema-conformant results: prompts are composed per task, generation is
retried on transient failures, and output is validated against a task
contract with one corrective re-prompt.
"""

from clausegate._version import __version__

# Configuration and generator selection
from clausegate.config import ClauseGateConfig, build_generator

# Contracts and tasks
from clausegate.contracts import (
    COMPARISON_CONTRACT,
    REVIEW_CONTRACT,
    TaskContract,
    get_contract,
    list_contracts,
    register_contract,
)
from clausegate.tasks import AnalysisTask, get_task, list_tasks, register_task

# Models
from clausegate.models.playbook import Importance, Playbook, PlaybookClause, load_playbook
from clausegate.models.prompt import PromptPair
from clausegate.models.results import (
    ClauseDeviation,
    ComparisonResult,
    DeviationType,
    ReviewResult,
    RiskCategory,
    RiskFinding,
    Severity,
)

# Prompt composers
from clausegate.prompts.comparison import compose_comparison_prompt
from clausegate.prompts.review import compose_review_prompt

# Validation and orchestration
from clausegate.validation import ValidationIssue, ValidationOutcome, validate
from clausegate.pipeline import Pipeline, PipelineResult, PipelineState

# Generators
from clausegate.llm import Generator, OpenAIClient, StandInGenerator

# Exceptions
from clausegate.exceptions import (
    ClauseGateError,
    CorrectionExhaustedError,
    DuplicateContractError,
    GenerationCancelledError,
    InvalidTaskParamsError,
    UnknownContractError,
    UnknownTaskError,
)
from clausegate.llm.errors import ErrorKind, GenerationError

__all__ = [
    "__version__",
    # Configuration
    "ClauseGateConfig",
    "build_generator",
    # Contracts and tasks
    "TaskContract",
    "COMPARISON_CONTRACT",
    "REVIEW_CONTRACT",
    "register_contract",
    "get_contract",
    "list_contracts",
    "AnalysisTask",
    "register_task",
    "get_task",
    "list_tasks",
    # Models
    "PromptPair",
    "Playbook",
    "PlaybookClause",
    "Importance",
    "load_playbook",
    "ComparisonResult",
    "ClauseDeviation",
    "ReviewResult",
    "RiskFinding",
    "Severity",
    "DeviationType",
    "RiskCategory",
    # Prompts
    "compose_comparison_prompt",
    "compose_review_prompt",
    # Validation and orchestration
    "validate",
    "ValidationOutcome",
    "ValidationIssue",
    "Pipeline",
    "PipelineResult",
    "PipelineState",
    # Generators
    "Generator",
    "OpenAIClient",
    "StandInGenerator",
    # Exceptions
    "ClauseGateError",
    "CorrectionExhaustedError",
    "DuplicateContractError",
    "GenerationCancelledError",
    "InvalidTaskParamsError",
    "UnknownContractError",
    "UnknownTaskError",
    "GenerationError",
    "ErrorKind",
]
