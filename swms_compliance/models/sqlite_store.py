# swms_compliance/models/sqlite_store.py
"""
SQLite-backed compliance result persistence.

Provides async CRUD operations with WAL mode and IMMEDIATE transactions.
"""

import json
import logging
from datetime import datetime

import aiosqlite

from swms_compliance.models.records import AssessmentType, ResultRecord
from swms_compliance.models.results import ComplianceResult
from swms_compliance.models.schema import init_db
from swms_compliance.models.store import ResultStore

logger = logging.getLogger(__name__)


class SQLiteResultStore(ResultStore):
    """
    Async SQLite-backed result storage.

    Features:
        - WAL mode for concurrent reads/writes
        - IMMEDIATE transactions for write safety
        - No persistent connections (avoids resource leaks)
    """

    def __init__(self, db_path: str) -> None:
        """
        Args:
            db_path: Path to SQLite database file
        """
        self._db_path = db_path
        logger.info(f"Created SQLiteResultStore with path: {db_path}")

    async def initialize(self) -> None:
        """Initialize database schema."""
        await init_db(self._db_path)

    async def save(self, record: ResultRecord) -> None:
        """
        Insert or replace the result for a document.

        Args:
            record: ResultRecord to store
        """
        result = record.result
        async with aiosqlite.connect(self._db_path) as db:
            await db.execute("BEGIN IMMEDIATE")

            try:
                await db.execute(
                    """
                    INSERT OR REPLACE INTO compliance_results (
                        document_id, trade_type, overall_score, is_compliant,
                        issue_count, critical_count, risk_level, assessment_type,
                        result_json, assessed_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.document_id,
                        record.trade_type,
                        result.overall_score,
                        1 if result.is_compliant else 0,
                        len(result.issues),
                        len(result.critical_issues),
                        record.risk_level,
                        record.assessment_type.value,
                        json.dumps(result.to_dict()),
                        record.assessed_at.isoformat(),
                    ),
                )

                await db.commit()
                logger.info(f"Saved result for document {record.document_id} to SQLite store")

            except Exception:
                await db.rollback()
                raise

    async def get(self, document_id: str) -> ResultRecord | None:
        """
        Get the stored result for a document.

        Returns:
            ResultRecord if found, None otherwise
        """
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM compliance_results WHERE document_id = ?", (document_id,)
            )
            row = await cursor.fetchone()

            if not row:
                return None

            return self._row_to_record(row)

    async def list_all(self) -> list[ResultRecord]:
        """
        List all stored results.

        Returns:
            ResultRecords ordered by assessment time (newest first)
        """
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM compliance_results ORDER BY assessed_at DESC"
            )
            rows = await cursor.fetchall()

            return [self._row_to_record(row) for row in rows]

    async def delete(self, document_id: str) -> bool:
        """
        Delete the stored result for a document.

        Returns:
            True if a row was deleted
        """
        async with aiosqlite.connect(self._db_path) as db:
            await db.execute("BEGIN IMMEDIATE")
            try:
                cursor = await db.execute(
                    "DELETE FROM compliance_results WHERE document_id = ?", (document_id,)
                )
                deleted = cursor.rowcount > 0
                await db.commit()
            except Exception:
                await db.rollback()
                raise

        if deleted:
            logger.info(f"Deleted result for document {document_id}")
        return deleted

    async def close(self) -> None:
        """
        Checkpoint WAL and close database.

        Truncates WAL file to avoid unbounded growth.
        """
        try:
            async with aiosqlite.connect(self._db_path) as db:
                await db.execute("PRAGMA wal_checkpoint(TRUNCATE)")
                logger.info("WAL checkpoint completed")
        except aiosqlite.Error as e:
            logger.warning(f"WAL checkpoint failed: {e}")

    def _row_to_record(self, row: aiosqlite.Row) -> ResultRecord:
        """Convert SQLite row to ResultRecord."""
        return ResultRecord(
            document_id=row["document_id"],
            trade_type=row["trade_type"],
            result=ComplianceResult.model_validate(json.loads(row["result_json"])),
            risk_level=row["risk_level"],
            assessment_type=AssessmentType(row["assessment_type"]),
            assessed_at=datetime.fromisoformat(row["assessed_at"]),
        )
