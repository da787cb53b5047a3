# swms_compliance/compliance/report.py
"""
Compliance report renderer.

Converts a ComplianceResult to markdown with metadata frontmatter, for
embedding in exported SWMS documents.
"""

import json
from datetime import datetime, timezone

from swms_compliance.models.results import ComplianceResult, IssueSeverity

_SEVERITY_HEADINGS = {
    IssueSeverity.CRITICAL: "Critical",
    IssueSeverity.HIGH: "High",
    IssueSeverity.MEDIUM: "Medium",
    IssueSeverity.LOW: "Low",
}


def _quote(value: str) -> str:
    # A JSON string is a valid YAML double-quoted scalar
    return json.dumps(value)


class ComplianceReportRenderer:
    """
    Converts ComplianceResult to markdown.

    Format:
        ---
        document_id: ...
        trade_type: ...
        generated_at: ISO timestamp
        overall_score: int
        is_compliant: bool
        ---

        # SWMS Compliance Report
        ## Scores
        ## Issues   (grouped by severity, critical first)
        ## Recommendations
    """

    def render(
        self,
        result: ComplianceResult,
        trade_type: str = "",
        document_id: str | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        """
        Render a ComplianceResult to a markdown string.

        Args:
            result: Result to render
            trade_type: Trade the document was checked against
            document_id: Optional SWMS document identifier
            generated_at: Timestamp for the frontmatter (defaults to now, UTC)

        Returns:
            Formatted markdown string
        """
        generated_at = generated_at or datetime.now(timezone.utc)
        sections = [self._render_frontmatter(result, trade_type, document_id, generated_at)]

        title = "# SWMS Compliance Report"
        if document_id:
            title += f": {document_id}"
        sections.append(title)
        sections.append("")

        verdict = "COMPLIANT" if result.is_compliant else "NON-COMPLIANT"
        sections.append(f"**Verdict:** {verdict} ({result.overall_score}%)")
        if not result.is_compliant:
            sections.append("")
            sections.append("> This SWMS must not be finalized or signed until the issues below are resolved.")
        sections.append("")

        sections.append("## Scores")
        sections.append("")
        sections.append("| Measure | Score |")
        sections.append("|---|---|")
        sections.append(f"| Overall compliance | {result.overall_score}% |")
        sections.append(f"| Risk score accuracy | {result.risk_score_accuracy}% |")
        sections.append(f"| Standards compliance | {result.standards_compliance}% |")
        sections.append(f"| Legislation compliance | {result.legislation_compliance}% |")
        sections.append("")

        sections.append("## Issues")
        sections.append("")
        if not result.issues:
            sections.append("No issues found.")
            sections.append("")
        else:
            for severity, heading in _SEVERITY_HEADINGS.items():
                group = [issue for issue in result.issues if issue.type == severity]
                if not group:
                    continue
                sections.append(f"### {heading} ({len(group)})")
                sections.append("")
                for issue in group:
                    sections.append(f"- **[{issue.category.value}]** {issue.message}")
                    if issue.resolution:
                        sections.append(f"  - Resolution: {issue.resolution}")
                sections.append("")

        if result.recommendations:
            sections.append("## Recommendations")
            sections.append("")
            for recommendation in result.recommendations:
                sections.append(f"- {recommendation}")
            sections.append("")

        return "\n".join(sections)

    def _render_frontmatter(
        self,
        result: ComplianceResult,
        trade_type: str,
        document_id: str | None,
        generated_at: datetime,
    ) -> str:
        """Render YAML frontmatter with metadata."""
        lines = ["---"]
        if document_id:
            lines.append(f"document_id: {_quote(document_id)}")
        lines.append(f"trade_type: {_quote(trade_type)}")
        lines.append(f"generated_at: {_quote(generated_at.isoformat())}")
        lines.append(f"overall_score: {result.overall_score}")
        lines.append(f"is_compliant: {str(result.is_compliant).lower()}")
        lines.append(f"critical_issues: {len(result.critical_issues)}")
        lines.append("---")
        lines.append("")
        return "\n".join(lines)
