# swms_compliance/tools/documents.py
"""
SWMS document loading.

Accepts JSON or YAML files holding either a bare list of risk
assessments or a mapping in the SWMS builder's export shape:

    {"documentId": "...", "tradeType": "electrical", "riskAssessments": [...]}
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from swms_compliance.compliance.analyzer import coerce_assessments
from swms_compliance.errors import DocumentError
from swms_compliance.models.assessment import RiskAssessment

logger = logging.getLogger(__name__)


@dataclass
class SwmsDocument:
    """Risk assessments plus the metadata the analyzer needs."""

    assessments: list[RiskAssessment]
    trade_type: str | None = None
    document_id: str | None = None


def load_document(path: str | Path) -> SwmsDocument:
    """
    Load a SWMS document from a JSON or YAML file.

    Args:
        path: File to read

    Returns:
        SwmsDocument

    Raises:
        DocumentError: If the file is unreadable or has the wrong shape
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Could not read document '{path}': {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentError(f"Could not parse document '{path}': {e}") from e

    trade_type = None
    document_id = None
    if isinstance(data, dict):
        trade_type = data.get("tradeType") or data.get("trade_type")
        document_id = data.get("documentId") or data.get("document_id")
        raw = data.get("riskAssessments", data.get("risk_assessments"))
        if raw is None:
            raise DocumentError(f"Document '{path}' has no riskAssessments list")
    else:
        raw = data

    try:
        assessments = coerce_assessments(raw)
    except (TypeError, ValidationError) as e:
        raise DocumentError(f"Invalid risk assessments in '{path}': {e}") from e

    logger.info(f"Loaded {len(assessments)} risk assessment(s) from {path}")
    return SwmsDocument(
        assessments=assessments,
        trade_type=str(trade_type) if trade_type else None,
        document_id=str(document_id) if document_id else None,
    )
