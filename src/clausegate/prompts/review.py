"""Review prompts: general risk analysis of a contract, no playbook needed."""

from __future__ import annotations

from clausegate.contracts import REVIEW_CONTRACT
from clausegate.models.prompt import PromptPair
from clausegate.models.results import RiskCategory, Severity
from clausegate.prompts.common import (
    JSON_ONLY_RULE,
    choices,
    document_block,
    severity_rule,
)

REVIEW_ROLE: str = (
    "You are a senior legal contract reviewer.\n"
    "Your task is to identify risks, red flags, and weaknesses in the "
    "contract provided by the user."
)

REVIEW_OUTPUT_FORMAT: str = (
    "OUTPUT FORMAT (strict JSON):\n"
    "{\n"
    '  "riskScore": <number 0-100, where 100 means very low risk>,\n'
    '  "totalFindings": <number of findings>,\n'
    '  "documentType": "<kind of contract, e.g. NDA, Service Agreement>",\n'
    '  "summary": "<2-3 sentence overall risk assessment>",\n'
    '  "findings": [\n'
    "    {\n"
    '      "title": "<short name of the risk>",\n'
    f'      "riskCategory": "<{choices(RiskCategory)}>",\n'
    f'      "severity": "<{choices(Severity)}>",\n'
    '      "documentExcerpt": "<relevant text from the document, or \'N/A\'>",\n'
    '      "explanation": "<why this is a risk>",\n'
    '      "suggestedAlternative": "<safer wording or null>",\n'
    '      "locationHint": "<5-10 word quote from document>"\n'
    "    }\n"
    "  ]\n"
    "}"
)


def build_review_instructions(jurisdiction: str | None = None) -> str:
    """Render the system prompt for a risk review."""
    jurisdiction_rule = (
        f"5. Assess every finding under the law of {jurisdiction}.\n"
        if jurisdiction
        else "5. If the governing law is unclear, flag it as a finding.\n"
    )
    return (
        f"{REVIEW_ROLE}\n\n"
        "INSTRUCTIONS:\n"
        "1. Read the whole document and list each distinct risk as a finding.\n"
        f"2. Classify each finding with one riskCategory: {choices(RiskCategory, ', ')}\n"
        f"3. {severity_rule()}\n"
        "4. Explain why each finding matters and suggest a safer alternative "
        "where one exists.\n"
        f"{jurisdiction_rule}"
        "6. Include a locationHint -- quote 5-10 words from the document where "
        'the risk appears (or "Not found in document" if it concerns a missing clause)\n'
        "7. totalFindings must equal the number of findings. If there are no "
        "risks, return an empty findings list.\n\n"
        f"{REVIEW_OUTPUT_FORMAT}\n\n"
        f"{JSON_ONLY_RULE}"
    )


def compose_review_prompt(document_text: str, jurisdiction: str | None = None) -> PromptPair:
    """Build the prompt pair for a general risk review of ``document_text``."""
    intro = "Review the following contract for legal risks"
    intro += f" (jurisdiction: {jurisdiction}):" if jurisdiction else ":"
    return PromptPair(
        instruction_text=build_review_instructions(jurisdiction),
        data_text=document_block(intro, document_text),
        task=REVIEW_CONTRACT.name,
    )
