# swms_compliance/tools/list_results.py
"""
list_results tool implementation.

Lists stored compliance results with their verdicts.
"""

import logging

from swms_compliance.models.responses import ListResultsResponse, ResultSummary
from swms_compliance.models.store import ResultStore

logger = logging.getLogger(__name__)


async def list_results(store: ResultStore) -> dict:
    """
    List all stored compliance results.

    Args:
        store: Result storage instance

    Returns:
        ListResultsResponse as dict
    """
    records = await store.list_all()

    summaries = [
        ResultSummary(
            document_id=record.document_id,
            trade_type=record.trade_type,
            overall_score=record.result.overall_score,
            is_compliant=record.result.is_compliant,
            critical_count=len(record.result.critical_issues),
            risk_level=record.risk_level,
            assessed_at=record.assessed_at.isoformat(),
        )
        for record in records
    ]

    response = ListResultsResponse(results=summaries, total=len(summaries))

    logger.info(f"Listed {len(summaries)} stored result(s)")
    return response.model_dump()
