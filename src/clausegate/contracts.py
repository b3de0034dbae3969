"""Task contracts: the named shapes generated output must satisfy.

A TaskContract pairs a name with a pydantic model.  The validator and the
pipeline are generic over contracts; adding an analysis task means adding
a model, registering a contract, and writing a prompt composer.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from clausegate.exceptions import DuplicateContractError, UnknownContractError
from clausegate.models.results import ComparisonResult, ReviewResult


@dataclass(frozen=True)
class TaskContract:
    """A named schema a structured result is validated against.

    Attributes:
        name: Registry key, also used as ``PromptPair.task``.
        model: Pydantic model describing required fields, ranges and
            closed enumerations.
        description: One-line summary for listings.
    """

    name: str
    model: type[BaseModel]
    description: str = ""

    def field_names(self) -> list[str]:
        """Top-level output keys, in the aliases the model validates against."""
        return [
            info.alias or name
            for name, info in self.model.model_fields.items()
        ]


COMPARISON_CONTRACT = TaskContract(
    name="comparison",
    model=ComparisonResult,
    description="Clause-by-clause deviations of a document from a playbook.",
)

REVIEW_CONTRACT = TaskContract(
    name="review",
    model=ReviewResult,
    description="General risk findings for a document, no playbook.",
)

_registry: dict[str, TaskContract] = {}


def register_contract(contract: TaskContract, *, replace: bool = False) -> None:
    """Add a contract to the registry.

    Raises:
        DuplicateContractError: If the name is taken and replace is False.
    """
    if contract.name in _registry and not replace:
        raise DuplicateContractError(contract.name)
    _registry[contract.name] = contract


def get_contract(name: str) -> TaskContract:
    try:
        return _registry[name]
    except KeyError:
        raise UnknownContractError(name) from None


def list_contracts() -> list[TaskContract]:
    return sorted(_registry.values(), key=lambda c: c.name)


register_contract(COMPARISON_CONTRACT)
register_contract(REVIEW_CONTRACT)
