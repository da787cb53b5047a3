# tests/unit/test_aggregator.py
"""
Tests for the compliance verdict and recommendations.
"""

from swms_compliance.compliance.aggregator import (
    RECOMMEND_LEGISLATION,
    RECOMMEND_MATRIX_REVIEW,
    RECOMMEND_RESOLVE_CRITICAL,
    RECOMMEND_STANDARDS,
    aggregate,
)
from swms_compliance.config.schema import PolicyConfig
from swms_compliance.models.results import Issue, IssueCategory, IssueSeverity


def _issue(severity: IssueSeverity) -> Issue:
    return Issue(type=severity, category=IssueCategory.STANDARDS, message="x")


class TestOverallScore:
    def test_perfect(self):
        result = aggregate(100, 100, 100, [])
        assert result.overall_score == 100
        assert result.is_compliant
        assert result.recommendations == []

    def test_rounded_mean(self):
        assert aggregate(100, 100, 84, []).overall_score == 95
        assert aggregate(100, 100, 83, []).overall_score == 94
        assert aggregate(90, 85, 80, []).overall_score == 85

    def test_mean_uses_raw_sub_scores(self):
        result = aggregate(-50, 100, 100, [])
        assert result.overall_score == 50
        assert result.risk_score_accuracy == 0

    def test_overall_floored_at_zero(self):
        result = aggregate(-100, -100, -100, [])
        assert result.overall_score == 0
        assert result.standards_compliance == 0
        assert result.legislation_compliance == 0


class TestVerdict:
    def test_threshold_is_inclusive(self):
        assert aggregate(85, 85, 85, []).is_compliant
        assert not aggregate(84, 84, 84, []).is_compliant

    def test_critical_issue_blocks_verdict(self):
        result = aggregate(100, 100, 100, [_issue(IssueSeverity.CRITICAL)])
        assert result.overall_score == 100
        assert not result.is_compliant

    def test_non_critical_issues_allowed(self):
        issues = [_issue(IssueSeverity.HIGH), _issue(IssueSeverity.MEDIUM)]
        assert aggregate(100, 100, 100, issues).is_compliant

    def test_threshold_from_policy(self):
        policy = PolicyConfig(compliant_score=95)
        assert not aggregate(90, 90, 90, [], policy=policy).is_compliant

    def test_issues_kept_in_order(self):
        issues = [_issue(IssueSeverity.LOW), _issue(IssueSeverity.CRITICAL)]
        result = aggregate(100, 100, 100, issues)
        assert [i.type for i in result.issues] == [IssueSeverity.LOW, IssueSeverity.CRITICAL]


class TestRecommendations:
    def test_each_sub_score_threshold(self):
        assert aggregate(89, 100, 100, []).recommendations == [RECOMMEND_MATRIX_REVIEW]
        assert aggregate(90, 100, 100, []).recommendations == []
        assert aggregate(100, 84, 100, []).recommendations == [RECOMMEND_STANDARDS]
        assert aggregate(100, 100, 84, []).recommendations == [RECOMMEND_LEGISLATION]

    def test_order_and_critical_last(self):
        result = aggregate(50, 50, 50, [_issue(IssueSeverity.CRITICAL)])
        assert result.recommendations == [
            RECOMMEND_MATRIX_REVIEW,
            RECOMMEND_STANDARDS,
            RECOMMEND_LEGISLATION,
            RECOMMEND_RESOLVE_CRITICAL,
        ]
