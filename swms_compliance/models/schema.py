# swms_compliance/models/schema.py
"""
Database schema definition for SQLite result persistence.

Provides DDL for tables, indexes, and schema initialization.
"""

import logging

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

RESULTS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS compliance_results (
    document_id TEXT PRIMARY KEY,
    trade_type TEXT NOT NULL,
    overall_score INTEGER NOT NULL CHECK(overall_score >= 0),
    is_compliant INTEGER NOT NULL,
    issue_count INTEGER NOT NULL DEFAULT 0,
    critical_count INTEGER NOT NULL DEFAULT 0,
    risk_level TEXT NOT NULL,
    assessment_type TEXT NOT NULL CHECK(assessment_type IN ('auto', 'manual')),
    result_json TEXT NOT NULL,
    assessed_at TEXT NOT NULL
)
"""

# Newest-first listing
RESULTS_INDEX_SQL = (
    "CREATE INDEX IF NOT EXISTS idx_results_assessed ON compliance_results(assessed_at)"
)


async def _get_schema_version(db: aiosqlite.Connection) -> int:
    """
    Get current schema version from database.

    Returns:
        Schema version (0 if no version table exists)
    """
    try:
        cursor = await db.execute("SELECT version FROM schema_version LIMIT 1")
        row = await cursor.fetchone()
        return row[0] if row else 0
    except aiosqlite.OperationalError:
        return 0


async def _set_schema_version(db: aiosqlite.Connection, version: int) -> None:
    await db.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER)")
    await db.execute("DELETE FROM schema_version")
    await db.execute("INSERT INTO schema_version (version) VALUES (?)", (version,))


async def init_db(db_path: str) -> None:
    """
    Initialize database schema with WAL mode and optimal settings.

    Args:
        db_path: Path to SQLite database file

    Settings:
        - WAL mode: Concurrent reads + writes
        - synchronous=NORMAL: Good durability/performance balance
        - busy_timeout=5000ms: Retry on SQLITE_BUSY
    """
    async with aiosqlite.connect(db_path) as db:
        await db.execute("PRAGMA journal_mode=WAL")
        await db.execute("PRAGMA synchronous=NORMAL")
        await db.execute("PRAGMA busy_timeout=5000")

        await db.execute(RESULTS_TABLE_SQL)
        await db.execute(RESULTS_INDEX_SQL)

        current_version = await _get_schema_version(db)
        if current_version < SCHEMA_VERSION:
            await _set_schema_version(db, SCHEMA_VERSION)
            logger.info(f"New database initialized at v{SCHEMA_VERSION}")

        await db.commit()

        logger.info(f"Initialized database at {db_path} (schema v{SCHEMA_VERSION})")
