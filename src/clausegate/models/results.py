"""Structured result models for the built-in analysis contracts.

Field names serialize to camelCase, the vocabulary the prompts render and
the downstream client consumes.  The closed vocabularies are ``str`` enums
so that prompt text and validation are derived from the same values.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Severity(str, enum.Enum):
    """Urgency attached to each deviation or finding."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    INFO = "info"


class DeviationType(str, enum.Enum):
    """How a document clause relates to the standard clause."""

    OK = "ok"
    MISSING = "missing"
    WEAKER = "weaker"
    STRONGER = "stronger"
    DIFFERENT = "different"


class RiskCategory(str, enum.Enum):
    """Area of law a risk finding belongs to."""

    LIABILITY = "liability"
    TERMINATION = "termination"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    CONFIDENTIALITY = "confidentiality"
    PAYMENT = "payment"
    DATA_PROTECTION = "data_protection"
    GOVERNING_LAW = "governing_law"
    INDEMNIFICATION = "indemnification"
    NON_COMPETE = "non_compete"
    GENERAL = "general"


class ResultModel(BaseModel):
    """Base for generated results: camelCase aliases, extra keys ignored."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_payload(self) -> dict:
        """Dump to the camelCase JSON-compatible dict the consumer expects."""
        return self.model_dump(mode="json", by_alias=True)


class ClauseDeviation(ResultModel):
    clause_title: str
    document_excerpt: str
    standard_excerpt: str
    deviation_type: DeviationType
    severity: Severity
    explanation: str
    suggested_fix: Optional[str] = None
    location_hint: str


class ComparisonResult(ResultModel):
    """Outcome of benchmarking a document against a playbook."""

    alignment_score: float = Field(ge=0, le=100)
    total_clauses: int = Field(ge=0)
    playbook: str
    summary: str
    deviations: list[ClauseDeviation]


class RiskFinding(ResultModel):
    title: str
    risk_category: RiskCategory
    severity: Severity
    document_excerpt: str
    explanation: str
    suggested_alternative: Optional[str] = None
    location_hint: str


class ReviewResult(ResultModel):
    """Outcome of a general risk review (no playbook)."""

    risk_score: float = Field(ge=0, le=100)
    total_findings: int = Field(ge=0)
    document_type: str
    summary: str
    findings: list[RiskFinding]
