# swms_compliance/compliance/aggregator.py
"""
Turns sub-scores and issues into a ComplianceResult.
"""

import math

from swms_compliance.config.schema import PolicyConfig
from swms_compliance.models.results import ComplianceResult, Issue, IssueSeverity

RECOMMEND_MATRIX_REVIEW = "Review risk matrix calculations and ensure accuracy"
RECOMMEND_STANDARDS = "Include all relevant Australian Standards for complete compliance"
RECOMMEND_LEGISLATION = "Ensure all WHS legislation requirements are addressed"
RECOMMEND_RESOLVE_CRITICAL = "Address all critical issues before finalizing SWMS"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def aggregate(
    risk_score_accuracy: int,
    standards_compliance: int,
    legislation_compliance: int,
    issues: list[Issue],
    policy: PolicyConfig | None = None,
) -> ComplianceResult:
    """
    Build the compliance verdict.

    The overall score is the rounded mean of the raw sub-scores; all four
    scores are then floored at 0. A document is compliant only when the
    overall score reaches the policy threshold AND there are no critical
    issues.

    Args:
        risk_score_accuracy: Raw risk calculation sub-score (may be negative)
        standards_compliance: Raw standards sub-score (may be negative)
        legislation_compliance: Raw legislation sub-score (may be negative)
        issues: Findings in detection order
        policy: Thresholds (defaults to PolicyConfig())

    Returns:
        ComplianceResult
    """
    policy = policy or PolicyConfig()

    overall_score = _round_half_up(
        (risk_score_accuracy + standards_compliance + legislation_compliance) / 3
    )
    has_critical = any(issue.type == IssueSeverity.CRITICAL for issue in issues)
    is_compliant = overall_score >= policy.compliant_score and not has_critical

    recommendations: list[str] = []
    if risk_score_accuracy < policy.accuracy_recommendation_below:
        recommendations.append(RECOMMEND_MATRIX_REVIEW)
    if standards_compliance < policy.standards_recommendation_below:
        recommendations.append(RECOMMEND_STANDARDS)
    if legislation_compliance < policy.legislation_recommendation_below:
        recommendations.append(RECOMMEND_LEGISLATION)
    if has_critical:
        recommendations.append(RECOMMEND_RESOLVE_CRITICAL)

    return ComplianceResult(
        is_compliant=is_compliant,
        overall_score=max(0, overall_score),
        risk_score_accuracy=max(0, risk_score_accuracy),
        standards_compliance=max(0, standards_compliance),
        legislation_compliance=max(0, legislation_compliance),
        issues=list(issues),
        recommendations=recommendations,
    )
