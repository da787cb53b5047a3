# swms_compliance/scoring/validator.py
"""Check a reported risk score against the risk matrix."""

from dataclasses import dataclass

from swms_compliance.scoring.matrix import clamp_factor, expected_score


@dataclass(frozen=True)
class ScoreValidation:
    """Outcome of validating one reported score."""

    is_valid: bool
    expected_score: int
    reported_score: int
    variance: int


def validate_risk_score(likelihood: int, consequence: int, reported_score: int) -> ScoreValidation:
    """
    Validate a reported score for a likelihood/consequence pair.

    Out-of-range factors are clamped into 1-5 rather than rejected, since
    they come from user-entered forms. Never raises for data values; an
    invalid score is reported through is_valid.

    Args:
        likelihood: Reported likelihood (clamped)
        consequence: Reported consequence (clamped)
        reported_score: Score the author entered

    Returns:
        ScoreValidation with the matrix score and absolute variance
    """
    expected = expected_score(clamp_factor(likelihood), clamp_factor(consequence))
    return ScoreValidation(
        is_valid=expected == reported_score,
        expected_score=expected,
        reported_score=reported_score,
        variance=abs(expected - reported_score),
    )
