# swms_compliance/models/history.py
"""
Bounded in-memory log of analysis runs.

Owned by whoever constructs it and passed to the analyzer, so tests and
concurrent hosts each get their own log instead of sharing module state.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisEvent:
    """Summary of one analysis run."""

    trade_type: str
    assessment_count: int
    overall_score: int
    is_compliant: bool
    critical_count: int
    issue_count: int
    document_id: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class AnalysisLog:
    """
    Ring buffer of AnalysisEvents.

    Holds at most `capacity` events; recording beyond that evicts the oldest.
    """

    def __init__(self, capacity: int = 1000) -> None:
        """
        Args:
            capacity: Maximum events kept

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity < 1:
            raise ValueError(f"AnalysisLog capacity must be positive, got {capacity}")
        self._events: deque[AnalysisEvent] = deque(maxlen=capacity)
        self.capacity = capacity

    def record(self, event: AnalysisEvent) -> None:
        self._events.append(event)
        logger.debug(
            f"Recorded analysis: trade={event.trade_type} score={event.overall_score} "
            f"compliant={event.is_compliant}"
        )

    def recent(self, limit: int = 100) -> list[AnalysisEvent]:
        """Most recent events, newest first."""
        if limit <= 0:
            return []
        events = list(self._events)[-limit:]
        events.reverse()
        return events

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
