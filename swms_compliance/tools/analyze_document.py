# swms_compliance/tools/analyze_document.py
"""
analyze_document tool implementation.

Runs the compliance analyzer over a document and optionally persists the result.
"""

import logging
from collections.abc import Sequence

from swms_compliance.compliance.analyzer import (
    ComplianceAnalyzer,
    coerce_assessments,
    highest_risk_level,
)
from swms_compliance.config.schema import SwmsComplianceConfig
from swms_compliance.errors import InputError
from swms_compliance.models.assessment import RiskAssessment
from swms_compliance.models.records import AssessmentType, ResultRecord
from swms_compliance.models.responses import AnalyzeResponse
from swms_compliance.models.store import ResultStore
from swms_compliance.validation.sanitize import sanitize_document_id, sanitize_trade_type

logger = logging.getLogger(__name__)


async def analyze_document(
    assessments: Sequence[RiskAssessment | dict],
    trade_type: str,
    store: ResultStore | None = None,
    config: SwmsComplianceConfig | None = None,
    document_id: str | None = None,
    save: bool = True,
    analyzer: ComplianceAnalyzer | None = None,
    assessment_type: AssessmentType = AssessmentType.MANUAL,
) -> dict:
    """
    Analyze a SWMS document's risk assessments.

    Args:
        assessments: Risk assessments (models or camelCase dicts)
        trade_type: Trade used to look up required standards
        store: Result storage (required when save=True)
        config: Configuration (defaults to SwmsComplianceConfig())
        document_id: SWMS document identifier (required when save=True)
        save: Persist the result, replacing any previous result for the document
        analyzer: Analyzer to use (defaults to one built from config)
        assessment_type: Whether the run was triggered automatically or by a user

    Returns:
        AnalyzeResponse as dict

    Raises:
        InputError: If trade_type or document_id is invalid, or save is
            requested without a store or document_id
    """
    config = config or SwmsComplianceConfig()
    trade = sanitize_trade_type(trade_type)
    sanitized_id = sanitize_document_id(document_id) if document_id is not None else None

    if save and (store is None or sanitized_id is None):
        raise InputError("Saving a result requires both a store and a document ID")

    analyzer = analyzer or ComplianceAnalyzer.from_config(config)
    # Coerce once so the risk level below sees the same models
    risks = coerce_assessments(assessments)
    result = analyzer.analyze(risks, trade, document_id=sanitized_id)

    level = highest_risk_level(risks, analyzer.bands)
    risk_level = level.value if level else "None"

    if save:
        await store.save(
            ResultRecord(
                document_id=sanitized_id,
                trade_type=trade,
                result=result,
                risk_level=risk_level,
                assessment_type=assessment_type,
            )
        )

    response = AnalyzeResponse(
        document_id=sanitized_id,
        trade_type=trade,
        assessment_count=len(risks),
        risk_level=risk_level,
        saved=save,
        result=result.to_dict(),
    )
    return response.model_dump()

