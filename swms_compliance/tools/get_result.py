# swms_compliance/tools/get_result.py
"""
get_result tool implementation.

Retrieves the stored compliance result for a SWMS document.
"""

import logging

from swms_compliance.errors import InputError
from swms_compliance.models.responses import ResultDetailResponse
from swms_compliance.models.store import ResultStore
from swms_compliance.validation.sanitize import sanitize_document_id

logger = logging.getLogger(__name__)


async def get_result(document_id: str, store: ResultStore) -> dict:
    """
    Retrieve a stored compliance result.

    Args:
        document_id: SWMS document identifier
        store: Result storage instance

    Returns:
        ResultDetailResponse as dict

    Raises:
        InputError: If document_id is invalid or has no stored result
    """
    sanitized_id = sanitize_document_id(document_id)

    record = await store.get(sanitized_id)
    if not record:
        raise InputError(
            f"No result stored for document '{sanitized_id}'. Use list to see stored results."
        )

    response = ResultDetailResponse(
        document_id=record.document_id,
        trade_type=record.trade_type,
        risk_level=record.risk_level,
        assessment_type=record.assessment_type.value,
        assessed_at=record.assessed_at.isoformat(),
        result=record.result.to_dict(),
    )
    return response.model_dump()
