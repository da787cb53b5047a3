# swms_compliance/models/__init__.py
"""
Data models for swms-compliance.

Provides the assessment input model, findings and verdict models,
persisted result records and the analysis log.
"""

from swms_compliance.models.assessment import RiskAssessment, ScoringFactors
from swms_compliance.models.history import AnalysisEvent, AnalysisLog
from swms_compliance.models.records import (
    AssessmentType,
    InMemoryResultStore,
    ResultRecord,
)
from swms_compliance.models.responses import (
    AnalyzeResponse,
    ListResultsResponse,
    ResultDetailResponse,
    ResultSummary,
)
from swms_compliance.models.results import (
    ComplianceResult,
    Issue,
    IssueCategory,
    IssueSeverity,
)
from swms_compliance.models.store import ResultStore

__all__ = [
    # Inputs
    "RiskAssessment",
    "ScoringFactors",
    # Findings
    "ComplianceResult",
    "Issue",
    "IssueCategory",
    "IssueSeverity",
    # Persistence
    "AssessmentType",
    "ResultRecord",
    "ResultStore",
    "InMemoryResultStore",
    # Analysis log
    "AnalysisEvent",
    "AnalysisLog",
    # Responses
    "AnalyzeResponse",
    "ListResultsResponse",
    "ResultDetailResponse",
    "ResultSummary",
]
