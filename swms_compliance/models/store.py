# swms_compliance/models/store.py
"""
Result store protocol definition.

Defines the abstract interface that both InMemoryResultStore and SQLiteResultStore implement.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swms_compliance.models.records import ResultRecord


class ResultStore(ABC):
    """
    Abstract base class for compliance result storage.

    Results are keyed by SWMS document id. Saving a result for a document
    that already has one replaces it, since every analysis is a full
    recomputation.
    """

    @abstractmethod
    async def save(self, record: "ResultRecord") -> None:
        """
        Insert or replace the result for record.document_id.

        Args:
            record: ResultRecord to store
        """
        pass

    @abstractmethod
    async def get(self, document_id: str) -> "ResultRecord | None":
        """
        Get the stored result for a document.

        Args:
            document_id: SWMS document identifier

        Returns:
            ResultRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> "list[ResultRecord]":
        """
        List all stored results.

        Returns:
            List of ResultRecords, most recently assessed first
        """
        pass

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        """
        Delete the stored result for a document.

        Returns:
            True if a result was deleted, False if none existed
        """
        pass

    async def close(self) -> None:
        """Release resources held by the store."""
        return None
