"""Tests for the contract and task registries, including custom task types."""

from __future__ import annotations

import pytest
from pydantic import Field

import clausegate.contracts as contracts_module
import clausegate.tasks as tasks_module
from clausegate.contracts import (
    COMPARISON_CONTRACT,
    REVIEW_CONTRACT,
    TaskContract,
    get_contract,
    list_contracts,
    register_contract,
)
from clausegate.exceptions import DuplicateContractError, UnknownContractError
from clausegate.models.prompt import PromptPair
from clausegate.models.results import ResultModel
from clausegate.pipeline import Pipeline
from clausegate.tasks import AnalysisTask, get_task, list_tasks, register_task
from tests.conftest import ScriptedGenerator


class PartyList(ResultModel):
    parties: list[str]
    party_count: int = Field(ge=1)


PARTY_CONTRACT = TaskContract("parties", PartyList, "Parties named in a document.")


@pytest.fixture
def isolated_registries(monkeypatch):
    """Give each test private copies of both registries."""
    monkeypatch.setattr(contracts_module, "_registry", dict(contracts_module._registry))
    monkeypatch.setattr(tasks_module, "_tasks", dict(tasks_module._tasks))


class TestContractRegistry:

    def test_builtins_registered(self):
        assert get_contract("comparison") is COMPARISON_CONTRACT
        assert get_contract("review") is REVIEW_CONTRACT
        assert [c.name for c in list_contracts()][:2] == ["comparison", "review"]

    def test_field_names_are_wire_aliases(self):
        assert COMPARISON_CONTRACT.field_names() == [
            "alignmentScore", "totalClauses", "playbook", "summary", "deviations",
        ]
        assert REVIEW_CONTRACT.field_names() == [
            "riskScore", "totalFindings", "documentType", "summary", "findings",
        ]

    def test_unknown_contract(self):
        with pytest.raises(UnknownContractError, match="obligations"):
            get_contract("obligations")

    def test_duplicate_rejected(self, isolated_registries):
        clash = TaskContract("review", PartyList)
        with pytest.raises(DuplicateContractError, match="replace=True"):
            register_contract(clash)
        assert get_contract("review") is REVIEW_CONTRACT

    def test_replace_overwrites(self, isolated_registries):
        replacement = TaskContract("review", PartyList)
        register_contract(replacement, replace=True)
        assert get_contract("review") is replacement

    def test_isolation_restores_builtins(self):
        assert get_contract("review") is REVIEW_CONTRACT
        with pytest.raises(UnknownContractError):
            get_contract("parties")


class TestTaskRegistry:

    def test_builtin_tasks(self):
        assert list_tasks() == ["comparison", "review"]
        assert get_task("comparison").contract is COMPARISON_CONTRACT
        assert get_task("review").contract is REVIEW_CONTRACT

    def test_review_params_forms(self):
        compose = get_task("review").compose
        with_map = compose("text", {"jurisdiction": "Austria"})
        with_str = compose("text", "Austria")
        without = compose("text", None)

        assert with_map == with_str
        assert "Austria" in with_map.instruction_text
        assert "Austria" not in without.instruction_text


class TestCustomTask:
    """A new task type needs only a model, a contract and a composer."""

    def test_custom_task_runs_through_pipeline(self, isolated_registries):
        register_contract(PARTY_CONTRACT)
        register_task(
            AnalysisTask(
                "parties",
                PARTY_CONTRACT,
                lambda text, params: PromptPair("List the parties as JSON.", text, task="parties"),
            )
        )
        gen = ScriptedGenerator(
            '{"parties": ["Acme"], "partyCount": 0}',
            '{"parties": ["Acme", "Globex"], "partyCount": 2}',
        )

        value = Pipeline(gen).analyze("parties", "Acme and Globex agree...")

        assert isinstance(value, PartyList)
        assert value.party_count == 2
        assert gen.calls == 2
        assert "partyCount" in gen.prompts[1].data_text
        assert "parties" in list_tasks()
