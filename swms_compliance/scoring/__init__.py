# swms_compliance/scoring/__init__.py
"""
Risk matrix lookup, score validation and score corrections.
"""

from .corrections import (
    CorrectionKind,
    CorrectionReport,
    ScoreCorrection,
    correct_assessment,
    propose_corrections,
)
from .matrix import (
    BANDS_BY_NAME,
    DEFAULT_BANDS,
    RISK_MATRIX,
    RiskBands,
    RiskLevel,
    clamp_factor,
    classify,
    expected_score,
    get_bands,
)
from .validator import ScoreValidation, validate_risk_score

__all__ = [
    "BANDS_BY_NAME",
    "DEFAULT_BANDS",
    "RISK_MATRIX",
    "RiskBands",
    "RiskLevel",
    "clamp_factor",
    "classify",
    "expected_score",
    "get_bands",
    "ScoreValidation",
    "validate_risk_score",
    "CorrectionKind",
    "CorrectionReport",
    "ScoreCorrection",
    "correct_assessment",
    "propose_corrections",
]
