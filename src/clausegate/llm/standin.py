"""Deterministic stand-in generator.

Used when no API credential is configured. Returns fixed, contract-valid
sample payloads so the composer -> pipeline -> validator path runs
identically with and without a live service.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from typing import Any, Callable

from clausegate.exceptions import GenerationCancelledError
from clausegate.llm.errors import LLMResponseError
from clausegate.models.prompt import PromptPair

logger = logging.getLogger(__name__)

_NOT_FOUND = "Not found in document"
_NDA_PATTERN = re.compile(r"\bNDA\b|non-disclosure", re.IGNORECASE)


def _nda_comparison() -> dict[str, Any]:
    return {
        "alignmentScore": 62,
        "totalClauses": 8,
        "playbook": "NDA Standard",
        "summary": (
            "The document covers core confidentiality obligations but is missing "
            "several standard protective clauses. The definition of confidential "
            "information is narrower than the standard, and governing law points "
            "to a different jurisdiction."
        ),
        "deviations": [
            {
                "clauseTitle": "Definition of Confidential Information",
                "documentExcerpt": "Confidential Information shall mean any proprietary data shared between the parties.",
                "standardExcerpt": "Confidential Information means any and all non-public information, whether written, oral, electronic, or visual...",
                "deviationType": "weaker",
                "severity": "critical",
                "explanation": "The narrow definition ('proprietary data') does not cover oral or visual disclosures, trade secrets or customer lists.",
                "suggestedFix": "Replace with the standard definition covering written, oral, electronic and visual information.",
                "locationHint": "Confidential Information shall mean any proprietary",
            },
            {
                "clauseTitle": "Term and Duration",
                "documentExcerpt": "This agreement is valid for one (1) year from the date of signing.",
                "standardExcerpt": "This Agreement shall remain in effect for a period of two (2) years...",
                "deviationType": "weaker",
                "severity": "major",
                "explanation": "The term is one year instead of two and confidentiality does not survive termination.",
                "suggestedFix": "Extend the term to two years and add a three-year survival period.",
                "locationHint": "valid for one (1) year from the date",
            },
            {
                "clauseTitle": "Permitted Disclosures",
                "documentExcerpt": "N/A",
                "standardExcerpt": "The Receiving Party may disclose Confidential Information to its employees, agents, or advisors who have a need to know...",
                "deviationType": "missing",
                "severity": "major",
                "explanation": "Without a permitted-disclosure clause the agreement implies no disclosure to employees or advisors at all.",
                "suggestedFix": "Add a need-to-know disclosure right for employees, agents and advisors bound by equivalent obligations.",
                "locationHint": _NOT_FOUND,
            },
            {
                "clauseTitle": "Return or Destruction",
                "documentExcerpt": "N/A",
                "standardExcerpt": "Upon termination or upon request, the Receiving Party shall promptly return or destroy all Confidential Information...",
                "deviationType": "missing",
                "severity": "minor",
                "explanation": "There is no obligation to return or destroy confidential material on termination.",
                "suggestedFix": "Add a return-or-destroy obligation with written certification.",
                "locationHint": _NOT_FOUND,
            },
            {
                "clauseTitle": "Governing Law",
                "documentExcerpt": "This agreement shall be governed by the laws of Germany.",
                "standardExcerpt": "This Agreement shall be governed by and construed in accordance with the laws of Switzerland...",
                "deviationType": "different",
                "severity": "minor",
                "explanation": "German law and Munich courts are specified instead of Swiss law and Zurich courts.",
                "suggestedFix": None,
                "locationHint": "governed by the laws of Germany",
            },
        ],
    }


def _msa_comparison() -> dict[str, Any]:
    return {
        "alignmentScore": 71,
        "totalClauses": 6,
        "playbook": "Service Agreement (MSA)",
        "summary": (
            "The agreement defines scope and payment terms close to the standard, "
            "but liability is uncapped and intellectual property ownership is "
            "left with the provider."
        ),
        "deviations": [
            {
                "clauseTitle": "Limitation of Liability",
                "documentExcerpt": "The Service Provider shall be liable for all damages arising from the services.",
                "standardExcerpt": "Neither Party's aggregate liability shall exceed the total fees paid under this Agreement in the twelve (12) months preceding the claim...",
                "deviationType": "stronger",
                "severity": "critical",
                "explanation": "Liability is unlimited and includes indirect damages, far beyond the standard cap.",
                "suggestedFix": "Cap aggregate liability at twelve months of fees and exclude indirect damages.",
                "locationHint": "liable for all damages arising from",
            },
            {
                "clauseTitle": "Intellectual Property",
                "documentExcerpt": "All work product remains the property of the Service Provider.",
                "standardExcerpt": "All intellectual property created in the performance of services shall be owned by the Client upon full payment...",
                "deviationType": "different",
                "severity": "major",
                "explanation": "Ownership of deliverables stays with the provider instead of passing to the client on payment.",
                "suggestedFix": "Transfer ownership of created IP to the Client upon full payment.",
                "locationHint": "work product remains the property of",
            },
            {
                "clauseTitle": "Payment Terms",
                "documentExcerpt": "Invoices are payable within thirty (30) days.",
                "standardExcerpt": "Client shall pay invoices within thirty (30) days of receipt...",
                "deviationType": "ok",
                "severity": "info",
                "explanation": "Payment period matches the standard; late-payment interest is not specified.",
                "locationHint": "payable within thirty (30) days",
            },
        ],
    }


def _review() -> dict[str, Any]:
    return {
        "riskScore": 48,
        "totalFindings": 3,
        "documentType": "Non-Disclosure Agreement",
        "summary": (
            "The agreement protects confidential information only loosely, has no "
            "remedies clause, and places disputes before a foreign court."
        ),
        "findings": [
            {
                "title": "Narrow definition of confidential information",
                "riskCategory": "confidentiality",
                "severity": "critical",
                "documentExcerpt": "Confidential Information shall mean any proprietary data shared between the parties.",
                "explanation": "Oral and visual disclosures fall outside the definition and would be unprotected.",
                "suggestedAlternative": "Define Confidential Information as any non-public information in any form.",
                "locationHint": "Confidential Information shall mean any proprietary",
            },
            {
                "title": "No injunctive relief",
                "riskCategory": "liability",
                "severity": "major",
                "documentExcerpt": "N/A",
                "explanation": "Without acknowledging irreparable harm, urgent court relief after a breach is harder to obtain.",
                "suggestedAlternative": "Add a clause entitling the disclosing party to seek injunctive relief.",
                "locationHint": _NOT_FOUND,
            },
            {
                "title": "Foreign governing law",
                "riskCategory": "governing_law",
                "severity": "minor",
                "documentExcerpt": "This agreement shall be governed by the laws of Germany.",
                "explanation": "Disputes would be litigated under German law in Munich.",
                "suggestedAlternative": None,
                "locationHint": "governed by the laws of Germany",
            },
        ],
    }


def _comparison(prompt: PromptPair) -> dict[str, Any]:
    text = f"{prompt.instruction_text}\n{prompt.data_text}"
    return _nda_comparison() if _NDA_PATTERN.search(text) else _msa_comparison()


_SAMPLES: dict[str, Callable[[PromptPair], dict[str, Any]]] = {
    "comparison": _comparison,
    "review": lambda prompt: _review(),
}


class StandInGenerator:
    """Generator that returns fixed sample payloads instead of calling a service.

    Implements the Generator protocol. Samples are keyed by
    ``PromptPair.task``; extra samples can be supplied for custom tasks.
    """

    def __init__(
        self,
        samples: dict[str, Callable[[PromptPair], dict[str, Any]]] | None = None,
    ) -> None:
        self._samples = dict(_SAMPLES)
        if samples:
            self._samples.update(samples)

    @property
    def tasks(self) -> list[str]:
        return sorted(self._samples)

    def generate(
        self,
        prompt: PromptPair,
        *,
        cancel: threading.Event | None = None,
    ) -> str:
        if cancel is not None and cancel.is_set():
            raise GenerationCancelledError("generation")
        sample = self._samples.get(prompt.task or "")
        if sample is None:
            raise LLMResponseError(
                f"Stand-in generator has no sample for task {prompt.task!r}"
            )
        logger.info("Using stand-in generator for task %s", prompt.task)
        return json.dumps(sample(prompt))

    def close(self) -> None:
        pass
