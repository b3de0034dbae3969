"""Benchmark prompts: compare a document against a playbook of standard clauses.

The instruction block enumerates the standard clauses, the deviation
categories, the severity scale and the JSON contract validated by the
``comparison`` task contract.
"""

from __future__ import annotations

import json

from clausegate.contracts import COMPARISON_CONTRACT
from clausegate.models.playbook import Playbook
from clausegate.models.prompt import PromptPair
from clausegate.models.results import DeviationType, Severity
from clausegate.prompts.common import (
    JSON_ONLY_RULE,
    choices,
    document_block,
    severity_rule,
)

COMPARISON_ROLE: str = (
    "You are a legal contract analyst specializing in DACH (Germany, Austria, "
    "Switzerland) law.\n"
    "Your task is to benchmark a contract against a defined standard (playbook)."
)

NO_CLAUSES_NOTE: str = (
    "This playbook defines no standard clauses. Report totalClauses as 0 "
    "and return an empty deviations list."
)

_DEVIATION_MEANINGS: dict[DeviationType, str] = {
    DeviationType.OK: "matches the standard or is equivalent",
    DeviationType.MISSING: "the clause is entirely absent from the document",
    DeviationType.WEAKER: "present but offers less protection than the standard",
    DeviationType.STRONGER: "present but more restrictive than the standard",
    DeviationType.DIFFERENT: "present but takes a materially different approach",
}


def _clause_section(playbook: Playbook) -> str:
    if not playbook.clauses:
        return NO_CLAUSES_NOTE
    return "\n\n".join(
        f"### Standard Clause {i}: {clause.title} "
        f"[importance: {clause.importance.value}]\n{clause.standard_text}"
        for i, clause in enumerate(playbook.clauses, start=1)
    )


def _output_format(playbook: Playbook) -> str:
    return (
        "OUTPUT FORMAT (strict JSON):\n"
        "{\n"
        '  "alignmentScore": <number 0-100>,\n'
        f'  "totalClauses": {len(playbook.clauses)},\n'
        f'  "playbook": {json.dumps(playbook.name)},\n'
        '  "summary": "<2-3 sentence overall assessment>",\n'
        '  "deviations": [\n'
        "    {\n"
        '      "clauseTitle": "<title from standard>",\n'
        '      "documentExcerpt": "<relevant text from the document, or \'N/A\'>",\n'
        '      "standardExcerpt": "<text from the standard>",\n'
        f'      "deviationType": "<{choices(DeviationType)}>",\n'
        f'      "severity": "<{choices(Severity)}>",\n'
        '      "explanation": "<why this matters>",\n'
        '      "suggestedFix": "<suggested replacement text or null>",\n'
        '      "locationHint": "<5-10 word quote from document>"\n'
        "    }\n"
        "  ]\n"
        "}"
    )


def build_comparison_instructions(playbook: Playbook) -> str:
    """Render the system prompt for benchmarking against ``playbook``."""
    categories = "\n".join(
        f'   - "{kind.value}" -- {meaning}'
        for kind, meaning in _DEVIATION_MEANINGS.items()
    )
    return (
        f"{COMPARISON_ROLE}\n\n"
        "INSTRUCTIONS:\n"
        "1. Compare the document clause-by-clause against each standard clause below.\n"
        "2. For each standard clause, determine if the document is:\n"
        f"{categories}\n"
        f"3. {severity_rule()}\n"
        "4. Provide a brief explanation of the deviation\n"
        f'5. Suggest a fix when the deviation is "{DeviationType.MISSING.value}", '
        f'"{DeviationType.WEAKER.value}", or "{DeviationType.DIFFERENT.value}"\n'
        "6. Include a locationHint -- quote 5-10 words from the document where "
        'the clause appears (or "Not found in document" if missing)\n\n'
        f"STANDARD PLAYBOOK: {json.dumps(playbook.name)}\n"
        f"{_clause_section(playbook)}\n\n"
        f"{_output_format(playbook)}\n\n"
        f"{JSON_ONLY_RULE}"
    )


def compose_comparison_prompt(document_text: str, playbook: Playbook) -> PromptPair:
    """Build the prompt pair for benchmarking ``document_text`` against ``playbook``."""
    data_text = document_block(
        f"Analyze the following contract against the {json.dumps(playbook.name)} standard:",
        document_text,
    )
    return PromptPair(
        instruction_text=build_comparison_instructions(playbook),
        data_text=data_text,
        task=COMPARISON_CONTRACT.name,
    )
