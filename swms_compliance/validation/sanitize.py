# swms_compliance/validation/sanitize.py
"""
Input sanitization and validation utilities.

Validates identifiers and free-text values at the service boundary.
"""

import logging
import re

from swms_compliance.compliance.references import known_trades, normalize_trade_type
from swms_compliance.errors import InputError

logger = logging.getLogger(__name__)

_DOCUMENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]{0,63}$")


def sanitize_document_id(document_id: str) -> str:
    """
    Sanitize and validate a SWMS document ID.

    Document IDs are 1-64 characters: letters, digits, '.', '_' or '-',
    starting with a letter or digit.

    Args:
        document_id: User-provided document ID

    Returns:
        Validated document ID (surrounding whitespace removed)

    Raises:
        InputError: If the ID format is invalid
    """
    cleaned = document_id.strip()
    if not _DOCUMENT_ID_PATTERN.match(cleaned):
        raise InputError(
            f"Invalid document ID '{document_id}': must be 1-64 letters, digits, '.', '_' or '-'"
        )
    return cleaned


def sanitize_trade_type(trade_type: str, max_length: int = 64) -> str:
    """
    Normalize a trade type.

    Unknown trades are accepted (the standards check is skipped for them)
    but logged, since a typo silently disables that check.

    Raises:
        InputError: If the trade type is empty or too long
    """
    cleaned = normalize_trade_type(trade_type)

    if not cleaned:
        raise InputError("Trade type cannot be empty")

    if len(cleaned) > max_length:
        raise InputError(f"Trade type longer than {max_length} characters")

    if cleaned not in known_trades():
        logger.warning(
            f"Unknown trade type '{cleaned}'; standards coverage will not be checked. "
            f"Known trades: {', '.join(known_trades())}"
        )

    return cleaned
