# tests/unit/test_models.py
"""
Tests for the risk assessment input model and result models.
"""

import pytest
from pydantic import ValidationError

from swms_compliance.models.assessment import RiskAssessment, ScoringFactors
from swms_compliance.models.results import (
    ComplianceResult,
    Issue,
    IssueCategory,
    IssueSeverity,
)


class TestRiskAssessment:
    def test_parses_camel_case(self):
        risk = RiskAssessment.model_validate(
            {
                "id": "r1",
                "activity": "Roof sheeting",
                "likelihood": 3,
                "consequence": 4,
                "initialRiskScore": 12,
                "controlMeasures": ["Harness"],
                "residualLikelihood": 1,
                "residualConsequence": 4,
                "residualRiskScore": 4,
                "riskLevel": "Medium",
                "legislation": ["WHS Act 2011"],
            }
        )

        assert risk.initial_risk_score == 12
        assert risk.control_measures == ["Harness"]
        assert risk.residual_likelihood == 1
        assert risk.risk_level == "Medium"

    def test_parses_snake_case(self):
        risk = RiskAssessment(initial_risk_score=6, control_measures=["Gloves"])
        assert risk.initial_risk_score == 6
        assert risk.control_measures == ["Gloves"]

    def test_defaults(self):
        risk = RiskAssessment()
        assert risk.id is None
        assert risk.activity == ""
        assert risk.initial_risk_score == 0
        assert risk.residual_risk_score == 0
        assert risk.control_measures == []
        assert risk.legislation == []

    def test_nulls_become_empty_values(self):
        risk = RiskAssessment.model_validate(
            {
                "activity": None,
                "controlMeasures": None,
                "legislation": None,
                "ppe": None,
                "initialRiskScore": None,
                "residual_risk_score": None,
            }
        )

        assert risk.activity == ""
        assert risk.control_measures == []
        assert risk.legislation == []
        assert risk.ppe == []
        assert risk.initial_risk_score == 0
        assert risk.residual_risk_score == 0

    def test_unknown_fields_ignored(self):
        risk = RiskAssessment.model_validate({"activity": "Welding", "signature": "abc"})
        assert risk.activity == "Welding"

    def test_id_coerced_to_string(self):
        assert RiskAssessment.model_validate({"id": 42}).id == "42"

    def test_non_numeric_score_rejected(self):
        with pytest.raises(ValidationError):
            RiskAssessment.model_validate({"initialRiskScore": "high"})

    def test_frozen(self):
        risk = RiskAssessment(activity="Welding")
        with pytest.raises(ValidationError):
            risk.activity = "Cutting"


class TestScoringFactors:
    def test_explicit_factors(self):
        risk = RiskAssessment(
            likelihood=4, consequence=3, residual_likelihood=2, residual_consequence=1
        )
        assert risk.scoring_factors() == ScoringFactors(4, 3, 2, 1)

    def test_residual_falls_back_to_initial(self):
        risk = RiskAssessment(likelihood=4, consequence=3)
        assert risk.scoring_factors() == ScoringFactors(4, 3, 4, 3)

    def test_missing_factors_default_to_one(self):
        assert RiskAssessment().scoring_factors() == ScoringFactors(1, 1, 1, 1)

    def test_zero_factor_treated_as_missing(self):
        risk = RiskAssessment(likelihood=0, consequence=5, residual_likelihood=0)
        assert risk.scoring_factors() == ScoringFactors(1, 5, 1, 5)


class TestComplianceResult:
    def _result(self, issues):
        return ComplianceResult(
            is_compliant=False,
            overall_score=70,
            risk_score_accuracy=75,
            standards_compliance=60,
            legislation_compliance=75,
            issues=issues,
            recommendations=["Review risk matrix calculations and ensure accuracy"],
        )

    def test_to_dict_uses_camel_case(self):
        issue = Issue(
            type=IssueSeverity.HIGH,
            category=IssueCategory.RISK_CALCULATION,
            message="Initial risk score incorrect",
            risk_id="r1",
        )

        data = self._result([issue]).to_dict()

        assert data["isCompliant"] is False
        assert data["overallScore"] == 70
        assert data["riskScoreAccuracy"] == 75
        assert data["standardsCompliance"] == 60
        assert data["legislationCompliance"] == 75
        assert data["issues"][0] == {
            "type": "high",
            "category": "risk_calculation",
            "message": "Initial risk score incorrect",
            "riskId": "r1",
            "resolution": None,
        }

    def test_round_trip_from_dict(self):
        result = self._result(
            [Issue(type=IssueSeverity.LOW, category=IssueCategory.DOCUMENTATION, message="m")]
        )
        assert ComplianceResult.model_validate(result.to_dict()) == result

    def test_scores_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            ComplianceResult(
                is_compliant=False,
                overall_score=-5,
                risk_score_accuracy=0,
                standards_compliance=0,
                legislation_compliance=0,
            )

    def test_critical_issues(self):
        critical = Issue(type=IssueSeverity.CRITICAL, category=IssueCategory.LEGISLATION, message="c")
        low = Issue(type=IssueSeverity.LOW, category=IssueCategory.STANDARDS, message="l")
        assert self._result([low, critical]).critical_issues == [critical]

    def test_issues_by_severity_is_stable(self):
        issues = [
            Issue(type=IssueSeverity.MEDIUM, category=IssueCategory.STANDARDS, message="m1"),
            Issue(type=IssueSeverity.CRITICAL, category=IssueCategory.LEGISLATION, message="c1"),
            Issue(type=IssueSeverity.MEDIUM, category=IssueCategory.STANDARDS, message="m2"),
            Issue(type=IssueSeverity.HIGH, category=IssueCategory.RISK_CALCULATION, message="h1"),
            Issue(type=IssueSeverity.CRITICAL, category=IssueCategory.RISK_CALCULATION, message="c2"),
        ]

        ordered = self._result(issues).issues_by_severity()

        assert [i.message for i in ordered] == ["c1", "c2", "h1", "m1", "m2"]
