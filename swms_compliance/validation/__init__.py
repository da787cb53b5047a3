# swms_compliance/validation/__init__.py
"""Input validation and sanitization utilities."""

from .sanitize import sanitize_document_id, sanitize_trade_type

__all__ = [
    "sanitize_document_id",
    "sanitize_trade_type",
]
