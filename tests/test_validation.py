"""Tests for validate(): syntax failures, schema failures, and valid payloads."""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from clausegate.contracts import COMPARISON_CONTRACT, REVIEW_CONTRACT
from clausegate.models.results import ComparisonResult, ReviewResult, Severity
from clausegate.validation import EXCERPT_LIMIT, ValidationOutcome, validate
from tests.strategies import comparison_payload as comparison_payloads
from tests.strategies import review_payload as review_payloads


class TestValidPayloads:

    def test_comparison_payload_validates(self, comparison_payload):
        outcome = validate(json.dumps(comparison_payload), COMPARISON_CONTRACT)

        assert outcome.ok
        assert outcome.kind is None
        assert outcome.issues == ()
        assert isinstance(outcome.value, ComparisonResult)
        assert outcome.value.deviations[0].severity is Severity.CRITICAL
        assert outcome.value.to_payload() == comparison_payload

    def test_review_payload_validates(self, review_payload):
        outcome = validate(json.dumps(review_payload), REVIEW_CONTRACT)

        assert outcome.ok
        assert isinstance(outcome.value, ReviewResult)
        assert outcome.value.to_payload() == review_payload

    def test_optional_fix_may_be_omitted(self, comparison_payload):
        del comparison_payload["deviations"][0]["suggestedFix"]
        outcome = validate(json.dumps(comparison_payload), COMPARISON_CONTRACT)

        assert outcome.ok
        assert outcome.value.deviations[0].suggested_fix is None

    def test_zero_clauses_and_no_deviations(self):
        payload = {
            "alignmentScore": 100,
            "totalClauses": 0,
            "playbook": "Empty Standard",
            "summary": "Nothing to compare.",
            "deviations": [],
        }
        outcome = validate(json.dumps(payload), COMPARISON_CONTRACT)

        assert outcome.ok
        assert outcome.value.total_clauses == 0
        assert outcome.value.deviations == []

    def test_unknown_keys_are_ignored(self, review_payload):
        review_payload["confidence"] = "high"
        assert validate(json.dumps(review_payload), REVIEW_CONTRACT).ok

    @settings(max_examples=50)
    @given(payload=comparison_payloads)
    def test_generated_comparison_payloads_round_trip(self, payload):
        outcome = validate(json.dumps(payload), COMPARISON_CONTRACT)
        assert outcome.ok, outcome.diagnostics
        assert outcome.value.to_payload() == payload

    @settings(max_examples=50)
    @given(payload=review_payloads)
    def test_generated_review_payloads_round_trip(self, payload):
        outcome = validate(json.dumps(payload), REVIEW_CONTRACT)
        assert outcome.ok, outcome.diagnostics
        assert outcome.value.to_payload() == payload


class TestSyntaxFailures:

    def test_plain_prose_is_syntax_failure(self):
        outcome = validate("I could not analyze this contract.", COMPARISON_CONTRACT)

        assert not outcome.ok
        assert outcome.kind == "syntax"
        assert outcome.value is None
        assert len(outcome.issues) == 1
        assert outcome.issues[0].path == "(root)"
        assert "not valid JSON" in outcome.diagnostics
        assert "I could not analyze" in outcome.diagnostics

    def test_prose_wrapped_json_is_syntax_failure(self, comparison_payload):
        raw = "Here is the analysis:\n```json\n" + json.dumps(comparison_payload) + "\n```"
        outcome = validate(raw, COMPARISON_CONTRACT)

        assert outcome.kind == "syntax"

    def test_excerpt_is_bounded(self):
        raw = "x" * 5000
        outcome = validate(raw, REVIEW_CONTRACT)

        assert outcome.kind == "syntax"
        assert "x" * EXCERPT_LIMIT + "..." in outcome.diagnostics
        assert "x" * (EXCERPT_LIMIT + 1) not in outcome.diagnostics

    def test_empty_string_is_syntax_failure(self):
        assert validate("", REVIEW_CONTRACT).kind == "syntax"

    def test_deep_nesting_is_syntax_failure(self):
        outcome = validate("[" * 100000, COMPARISON_CONTRACT)

        assert outcome.kind == "syntax"
        assert outcome.issues[0].path == "(root)"

    @given(raw=st.text(max_size=300))
    def test_arbitrary_text_never_raises(self, raw):
        outcome = validate(raw, COMPARISON_CONTRACT)
        assert isinstance(outcome, ValidationOutcome)
        assert outcome.ok or outcome.issues


class TestSchemaFailures:

    def test_every_violation_is_listed(self, comparison_payload):
        comparison_payload["alignmentScore"] = 150
        comparison_payload["deviations"][1]["severity"] = "severe"
        outcome = validate(json.dumps(comparison_payload), COMPARISON_CONTRACT)

        assert outcome.kind == "schema"
        paths = [issue.path for issue in outcome.issues]
        assert paths == ["alignmentScore", "deviations.1.severity"]
        assert "100" in outcome.issues[0].message
        assert "critical" in outcome.issues[1].message

    def test_diagnostics_are_joined_in_order(self, comparison_payload):
        comparison_payload["alignmentScore"] = -1
        comparison_payload["deviations"][0]["deviationType"] = "Weaker"
        outcome = validate(json.dumps(comparison_payload), COMPARISON_CONTRACT)

        first, second = outcome.diagnostics.split("; ")
        assert first.startswith("alignmentScore: ")
        assert second.startswith("deviations.0.deviationType: ")

    def test_missing_required_field(self, review_payload):
        del review_payload["summary"]
        del review_payload["findings"][0]["locationHint"]
        outcome = validate(json.dumps(review_payload), REVIEW_CONTRACT)

        assert outcome.kind == "schema"
        paths = {issue.path for issue in outcome.issues}
        assert paths == {"summary", "findings.0.locationHint"}

    def test_unknown_risk_category(self, review_payload):
        review_payload["findings"][0]["riskCategory"] = "tax"
        outcome = validate(json.dumps(review_payload), REVIEW_CONTRACT)

        assert [i.path for i in outcome.issues] == ["findings.0.riskCategory"]

    def test_negative_count(self, review_payload):
        review_payload["totalFindings"] = -3
        outcome = validate(json.dumps(review_payload), REVIEW_CONTRACT)

        assert [i.path for i in outcome.issues] == ["totalFindings"]

    def test_numeric_strings_are_not_coerced(self, comparison_payload):
        comparison_payload["alignmentScore"] = "85"
        comparison_payload["totalClauses"] = "3"
        outcome = validate(json.dumps(comparison_payload), COMPARISON_CONTRACT)

        assert outcome.kind == "schema"
        assert [i.path for i in outcome.issues] == ["alignmentScore", "totalClauses"]

    def test_boolean_count_is_rejected(self, review_payload):
        review_payload["totalFindings"] = True
        outcome = validate(json.dumps(review_payload), REVIEW_CONTRACT)

        assert [i.path for i in outcome.issues] == ["totalFindings"]

    def test_float_count_is_rejected(self, review_payload):
        review_payload["totalFindings"] = 2.5
        outcome = validate(json.dumps(review_payload), REVIEW_CONTRACT)

        assert [i.path for i in outcome.issues] == ["totalFindings"]

    def test_wrong_type(self, comparison_payload):
        comparison_payload["deviations"] = "none"
        outcome = validate(json.dumps(comparison_payload), COMPARISON_CONTRACT)

        assert [i.path for i in outcome.issues] == ["deviations"]

    def test_top_level_array_reports_root(self):
        outcome = validate("[1, 2, 3]", COMPARISON_CONTRACT)

        assert outcome.kind == "schema"
        assert outcome.issues[0].path == "(root)"

    def test_same_input_same_diagnostics(self, comparison_payload):
        comparison_payload["alignmentScore"] = 101
        comparison_payload["totalClauses"] = "many"
        raw = json.dumps(comparison_payload)

        assert validate(raw, COMPARISON_CONTRACT).diagnostics == validate(
            raw, COMPARISON_CONTRACT
        ).diagnostics
