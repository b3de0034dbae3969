"""Shared test fixtures for ClauseGate.

Provides sample playbooks, contract-valid payloads, and a scripted
generator that records every prompt it receives.
"""

from __future__ import annotations

import copy
import json
import threading

import pytest

from clausegate.models.playbook import Playbook, PlaybookClause
from clausegate.models.prompt import PromptPair


NDA_TEXT = (
    "MUTUAL NDA. Confidential Information shall mean any proprietary data shared "
    "between the parties. This agreement is valid for one (1) year from the date "
    "of signing. This agreement shall be governed by the laws of Germany."
)


@pytest.fixture
def nda_playbook() -> Playbook:
    return Playbook(
        id="nda-standard",
        name="NDA Standard",
        description="Standard Non-Disclosure Agreement template for DACH region",
        clauses=[
            PlaybookClause(
                title="Definition of Confidential Information",
                standard_text=(
                    "Confidential Information means any and all non-public "
                    "information, whether written, oral, electronic, or visual."
                ),
                importance="critical",
            ),
            PlaybookClause(
                title="Term and Duration",
                standard_text=(
                    "This Agreement shall remain in effect for a period of two (2) "
                    "years from the Effective Date."
                ),
                importance="major",
            ),
            PlaybookClause(
                title="Governing Law",
                standard_text=(
                    "This Agreement shall be governed by the laws of Switzerland."
                ),
                importance="minor",
            ),
        ],
    )


@pytest.fixture
def empty_playbook() -> Playbook:
    return Playbook(id="empty", name="Empty Standard", clauses=[])


_COMPARISON_PAYLOAD = {
    "alignmentScore": 62,
    "totalClauses": 3,
    "playbook": "NDA Standard",
    "summary": "Core obligations are present but the definition is narrow.",
    "deviations": [
        {
            "clauseTitle": "Definition of Confidential Information",
            "documentExcerpt": "Confidential Information shall mean any proprietary data",
            "standardExcerpt": "Confidential Information means any and all non-public information",
            "deviationType": "weaker",
            "severity": "critical",
            "explanation": "Oral disclosures are not covered.",
            "suggestedFix": "Use the standard definition.",
            "locationHint": "Confidential Information shall mean any proprietary",
        },
        {
            "clauseTitle": "Governing Law",
            "documentExcerpt": "governed by the laws of Germany",
            "standardExcerpt": "governed by the laws of Switzerland",
            "deviationType": "different",
            "severity": "minor",
            "explanation": "Different jurisdiction.",
            "suggestedFix": None,
            "locationHint": "governed by the laws of Germany",
        },
    ],
}

_REVIEW_PAYLOAD = {
    "riskScore": 55,
    "totalFindings": 1,
    "documentType": "NDA",
    "summary": "One significant gap.",
    "findings": [
        {
            "title": "No remedies clause",
            "riskCategory": "liability",
            "severity": "major",
            "documentExcerpt": "N/A",
            "explanation": "Injunctive relief is not acknowledged.",
            "suggestedAlternative": "Add an injunctive relief clause.",
            "locationHint": "Not found in document",
        },
    ],
}


@pytest.fixture
def comparison_payload() -> dict:
    return copy.deepcopy(_COMPARISON_PAYLOAD)


@pytest.fixture
def review_payload() -> dict:
    return copy.deepcopy(_REVIEW_PAYLOAD)


@pytest.fixture
def sample_prompt() -> PromptPair:
    return PromptPair(
        instruction_text="Return JSON.",
        data_text=f"---\nDOCUMENT:\n{NDA_TEXT}\n---",
        task="comparison",
    )


# ------------------------------------------------------------------
# Shared test helpers
# ------------------------------------------------------------------

class ScriptedGenerator:
    """Generator that replays scripted outputs and records prompts.

    Each script entry is either a string (returned) or an exception
    (raised).  The last entry repeats once the script is exhausted.
    """

    def __init__(self, *outputs: object, on_call=None) -> None:
        self.outputs = list(outputs)
        self.prompts: list[PromptPair] = []
        self.on_call = on_call
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def generate(self, prompt: PromptPair, *, cancel: threading.Event | None = None) -> str:
        idx = min(len(self.prompts), len(self.outputs) - 1)
        self.prompts.append(prompt)
        if self.on_call is not None:
            self.on_call(prompt)
        out = self.outputs[idx]
        if isinstance(out, BaseException):
            raise out
        return out

    def close(self) -> None:
        self.closed = True


def as_json(payload: dict) -> str:
    return json.dumps(payload)
