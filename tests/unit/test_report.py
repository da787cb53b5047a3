# tests/unit/test_report.py
"""
Tests for ComplianceReportRenderer.
"""

from datetime import datetime, timezone

import yaml

from swms_compliance.compliance.report import ComplianceReportRenderer
from swms_compliance.models.results import (
    ComplianceResult,
    Issue,
    IssueCategory,
    IssueSeverity,
)

GENERATED_AT = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def _result(issues=None, compliant=False):
    return ComplianceResult(
        is_compliant=compliant,
        overall_score=72 if not compliant else 100,
        risk_score_accuracy=75,
        standards_compliance=60,
        legislation_compliance=80,
        issues=issues or [],
        recommendations=["Address all critical issues before finalizing SWMS"] if not compliant else [],
    )


class TestRender:
    def test_frontmatter(self):
        md = ComplianceReportRenderer().render(
            _result(), trade_type="electrical", document_id="swms-001", generated_at=GENERATED_AT
        )

        assert md.startswith("---\n")
        assert 'document_id: "swms-001"' in md
        assert 'trade_type: "electrical"' in md
        assert 'generated_at: "2026-03-01T09:00:00+00:00"' in md
        assert "overall_score: 72" in md
        assert "is_compliant: false" in md

    def test_frontmatter_escapes_quotes(self):
        md = ComplianceReportRenderer().render(
            _result(), trade_type='say "electrical"', document_id="swms-001", generated_at=GENERATED_AT
        )

        frontmatter = yaml.safe_load(md.split("---\n")[1])

        assert frontmatter["trade_type"] == 'say "electrical"'
        assert frontmatter["document_id"] == "swms-001"
        assert frontmatter["overall_score"] == 72
        assert frontmatter["is_compliant"] is False

    def test_title_and_verdict(self):
        md = ComplianceReportRenderer().render(_result(), document_id="swms-001")

        assert "# SWMS Compliance Report: swms-001" in md
        assert "**Verdict:** NON-COMPLIANT (72%)" in md
        assert "must not be finalized" in md

    def test_compliant_document(self):
        md = ComplianceReportRenderer().render(_result(compliant=True))

        assert "# SWMS Compliance Report\n" in md
        assert "document_id" not in md
        assert "**Verdict:** COMPLIANT (100%)" in md
        assert "must not be finalized" not in md
        assert "No issues found." in md
        assert "## Recommendations" not in md

    def test_scores_table(self):
        md = ComplianceReportRenderer().render(_result())

        assert "| Risk score accuracy | 75% |" in md
        assert "| Standards compliance | 60% |" in md
        assert "| Legislation compliance | 80% |" in md

    def test_issues_grouped_critical_first(self):
        issues = [
            Issue(
                type=IssueSeverity.MEDIUM,
                category=IssueCategory.STANDARDS,
                message="Missing reference to required standard: AS 3600:2018",
            ),
            Issue(
                type=IssueSeverity.CRITICAL,
                category=IssueCategory.RISK_CALCULATION,
                message="Risk not adequately reduced for Pouring",
                resolution="Review and strengthen control measures to achieve risk reduction",
            ),
        ]

        md = ComplianceReportRenderer().render(_result(issues))

        assert "### Critical (1)" in md
        assert "### Medium (1)" in md
        assert "### High" not in md
        assert md.index("### Critical") < md.index("### Medium")
        assert "- **[risk_calculation]** Risk not adequately reduced for Pouring" in md
        assert "  - Resolution: Review and strengthen control measures" in md

    def test_recommendations(self):
        md = ComplianceReportRenderer().render(_result())

        assert "## Recommendations" in md
        assert "- Address all critical issues before finalizing SWMS" in md
