# swms_compliance/models/results.py
"""
Compliance findings and the aggregate verdict.

Serialized with camelCase field names so stored and exported results
match the shape the SWMS builder UI expects.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IssueSeverity(str, Enum):
    """Issue severity, most severe first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """0 for critical, increasing with decreasing severity."""
        return list(IssueSeverity).index(self)


class IssueCategory(str, Enum):
    """Which part of the SWMS an issue concerns."""

    RISK_CALCULATION = "risk_calculation"
    STANDARDS = "standards"
    LEGISLATION = "legislation"
    DOCUMENTATION = "documentation"


class Issue(BaseModel):
    """A single compliance finding."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    type: IssueSeverity = Field(description="Severity of the finding")
    category: IssueCategory = Field(description="Area the finding belongs to")
    message: str = Field(description="Human-readable description")
    risk_id: str | None = Field(default=None, description="Originating risk assessment id")
    resolution: str | None = Field(default=None, description="Suggested remediation")


class ComplianceResult(BaseModel):
    """Outcome of one compliance analysis run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_compliant: bool = Field(description="Overall verdict")
    overall_score: int = Field(ge=0, description="Mean of the three sub-scores")
    risk_score_accuracy: int = Field(ge=0, description="Risk calculation sub-score")
    standards_compliance: int = Field(ge=0, description="Australian Standards sub-score")
    legislation_compliance: int = Field(ge=0, description="WHS legislation sub-score")
    issues: list[Issue] = Field(default_factory=list, description="Findings in detection order")
    recommendations: list[str] = Field(default_factory=list, description="Suggested next steps")

    @property
    def critical_issues(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.type == IssueSeverity.CRITICAL]

    def issues_by_severity(self) -> list[Issue]:
        """Issues ordered critical first, keeping detection order within a severity."""
        return sorted(self.issues, key=lambda issue: issue.type.rank)

    def to_dict(self) -> dict:
        """JSON-ready dict using the camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
