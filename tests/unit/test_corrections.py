# tests/unit/test_corrections.py
"""
Tests for proposed risk score corrections.
"""

from swms_compliance.config.schema import PolicyConfig
from swms_compliance.models.assessment import RiskAssessment
from swms_compliance.scoring.corrections import (
    CorrectionKind,
    correct_assessment,
    propose_corrections,
)
from swms_compliance.scoring.matrix import INCLUSIVE_4_8_15_BANDS


def _assessment(**fields) -> RiskAssessment:
    data = {
        "id": "r1",
        "activity": "Formwork stripping",
        "likelihood": 3,
        "consequence": 3,
        "initialRiskScore": 9,
        "controlMeasures": ["Exclusion zone"],
        "residualLikelihood": 1,
        "residualConsequence": 3,
        "residualRiskScore": 3,
        "riskLevel": "Low",
    }
    data.update(fields)
    return RiskAssessment.model_validate(data)


class TestCorrectAssessment:
    def test_valid_assessment_unchanged(self):
        risk = _assessment()

        corrected, corrections = correct_assessment(risk)

        assert corrections == []
        assert corrected is risk

    def test_wrong_initial_score(self):
        risk = _assessment(initialRiskScore=12, riskLevel="Medium")

        corrected, corrections = correct_assessment(risk)

        assert [c.kind for c in corrections] == [CorrectionKind.INITIAL_SCORE]
        assert corrections[0].original == 12
        assert corrections[0].corrected == 9
        assert corrections[0].reason == "Calculated from Likelihood (3) × Consequence (3)"
        assert corrected.initial_risk_score == 9
        assert corrected.risk_level == "Low"

    def test_relabel_uses_given_table(self):
        risk = _assessment(initialRiskScore=12)

        corrected, _ = correct_assessment(risk, bands=INCLUSIVE_4_8_15_BANDS)

        assert corrected.risk_level == "High"

    def test_wrong_residual_score(self):
        risk = _assessment(residualRiskScore=6)

        corrected, corrections = correct_assessment(risk)

        assert [c.kind for c in corrections] == [CorrectionKind.RESIDUAL_SCORE]
        assert corrections[0].corrected == 3
        assert corrected.residual_risk_score == 3

    def test_no_reduction_proposes_lower_residual(self):
        risk = _assessment(
            likelihood=2,
            consequence=2,
            initialRiskScore=4,
            residualLikelihood=None,
            residualConsequence=None,
            residualRiskScore=4,
        )

        corrected, corrections = correct_assessment(risk)

        assert [c.kind for c in corrections] == [CorrectionKind.RISK_REDUCTION]
        assert corrections[0].original == 4
        assert corrections[0].corrected == 2
        assert corrected.residual_risk_score == 2

    def test_reduced_residual_never_below_one(self):
        risk = _assessment(
            likelihood=1,
            consequence=1,
            initialRiskScore=1,
            residualLikelihood=1,
            residualConsequence=1,
            residualRiskScore=1,
        )

        corrected, _ = correct_assessment(risk)

        assert corrected.residual_risk_score == 1

    def test_residual_fixed_before_reduction_check(self):
        """A wrong residual that is really lower than initial needs no reduction."""
        risk = _assessment(
            likelihood=4,
            consequence=4,
            initialRiskScore=16,
            residualLikelihood=2,
            residualConsequence=2,
            residualRiskScore=20,
            controlMeasures=["a", "b", "c"],
        )

        corrected, corrections = correct_assessment(risk)

        assert [c.kind for c in corrections] == [CorrectionKind.RESIDUAL_SCORE]
        assert corrected.residual_risk_score == 4

    def test_control_measures_flagged_not_invented(self):
        risk = _assessment(
            likelihood=4,
            consequence=4,
            initialRiskScore=16,
            residualLikelihood=2,
            residualConsequence=2,
            residualRiskScore=4,
        )

        corrected, corrections = correct_assessment(risk)

        assert [c.kind for c in corrections] == [CorrectionKind.CONTROL_MEASURES]
        assert corrections[0].original == 1
        assert corrections[0].corrected == 3
        assert corrected.control_measures == ["Exclusion zone"]

    def test_control_minimum_from_policy(self):
        risk = _assessment(
            likelihood=4,
            consequence=4,
            initialRiskScore=16,
            residualLikelihood=2,
            residualConsequence=2,
            residualRiskScore=4,
        )

        _, corrections = correct_assessment(risk, policy=PolicyConfig(min_control_measures=1))

        assert corrections == []

    def test_input_not_modified(self):
        risk = _assessment(initialRiskScore=12, residualRiskScore=6)

        correct_assessment(risk)

        assert risk.initial_risk_score == 12
        assert risk.residual_risk_score == 6


class TestProposeCorrections:
    def test_report(self):
        risks = [
            _assessment(id="a"),
            _assessment(id="b", initialRiskScore=12),
            _assessment(
                id="c",
                likelihood=2,
                consequence=2,
                initialRiskScore=4,
                residualLikelihood=None,
                residualConsequence=None,
                residualRiskScore=4,
            ),
        ]

        report = propose_corrections(risks)

        assert [a.id for a in report.assessments] == ["a", "b", "c"]
        assert [c.risk_id for c in report.corrections] == ["b", "c"]
        # "c" only needs a reduction; its scores match the matrix
        assert report.valid_count == 2

    def test_empty(self):
        report = propose_corrections([])
        assert report.assessments == []
        assert report.corrections == []
        assert report.valid_count == 0
