# swms_compliance/models/records.py
"""
Persisted compliance result records and in-memory storage.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from swms_compliance.models.results import ComplianceResult
from swms_compliance.models.store import ResultStore

logger = logging.getLogger(__name__)


class AssessmentType(Enum):
    """How the analysis was triggered."""

    AUTO = "auto"
    MANUAL = "manual"


@dataclass
class ResultRecord:
    """A compliance result stored against a SWMS document."""

    document_id: str
    trade_type: str
    result: ComplianceResult
    risk_level: str  # Highest risk level across the document's assessments
    assessment_type: AssessmentType = AssessmentType.MANUAL
    assessed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryResultStore(ResultStore):
    """
    Simple in-memory result storage.

    Single-process only; contents are lost on exit.
    """

    def __init__(self) -> None:
        self._records: dict[str, ResultRecord] = {}
        logger.info("Initialized InMemoryResultStore")

    async def save(self, record: ResultRecord) -> None:
        replaced = record.document_id in self._records
        self._records[record.document_id] = record
        logger.info(
            f"{'Replaced' if replaced else 'Saved'} result for document {record.document_id}"
        )

    async def get(self, document_id: str) -> ResultRecord | None:
        return self._records.get(document_id)

    async def list_all(self) -> list[ResultRecord]:
        return sorted(self._records.values(), key=lambda r: r.assessed_at, reverse=True)

    async def delete(self, document_id: str) -> bool:
        return self._records.pop(document_id, None) is not None
