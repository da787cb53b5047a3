# swms_compliance/compliance/__init__.py
"""
Compliance checking for SWMS risk assessments.

Provides the analyzer, the verdict aggregator, the regulatory reference
tables and the markdown report renderer.
"""

from .aggregator import aggregate
from .analyzer import ComplianceAnalyzer, coerce_assessments, highest_risk_level
from .references import (
    LEGISLATION_REQUIREMENTS,
    TRADE_STANDARDS,
    TradeStandards,
    get_trade_standards,
)
from .report import ComplianceReportRenderer

__all__ = [
    "ComplianceAnalyzer",
    "ComplianceReportRenderer",
    "LEGISLATION_REQUIREMENTS",
    "TRADE_STANDARDS",
    "TradeStandards",
    "aggregate",
    "coerce_assessments",
    "get_trade_standards",
    "highest_risk_level",
]
