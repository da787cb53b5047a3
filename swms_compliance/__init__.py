# swms_compliance/__init__.py
"""
Risk score validation and compliance scoring for Safe Work Method Statements.

Validates reported risk scores against the 5x5 risk matrix, checks risk
assessments against Australian standards and WHS legislation requirements,
and aggregates the findings into a compliance verdict.
"""

from swms_compliance.compliance import ComplianceAnalyzer, aggregate
from swms_compliance.models import ComplianceResult, Issue, RiskAssessment
from swms_compliance.scoring import classify, expected_score, validate_risk_score

__version__ = "0.1.0"

__all__ = [
    "ComplianceAnalyzer",
    "ComplianceResult",
    "Issue",
    "RiskAssessment",
    "aggregate",
    "classify",
    "expected_score",
    "validate_risk_score",
]
