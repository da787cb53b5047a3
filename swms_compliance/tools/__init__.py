# swms_compliance/tools/__init__.py
"""
Service layer shared by the CLI and embedding hosts.

Each tool validates its inputs, delegates to the analyzer or store, and
returns a pydantic response as a dict.
"""

from .analyze_document import analyze_document
from .documents import SwmsDocument, load_document
from .get_result import get_result
from .list_results import list_results

__all__ = [
    "SwmsDocument",
    "analyze_document",
    "get_result",
    "list_results",
    "load_document",
]
