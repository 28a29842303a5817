"""Process-wide policy configuration and placement statistics holders.

Both hold an immutable value that is swapped as a whole under a lock, so a
reader always gets a complete, consistent snapshot and never a
half-written configuration.

A plain ``threading.Lock`` stands in for a reader/writer lock. Readers
hold it only long enough to copy a reference to the frozen value, and
writers build the new value before taking it, so neither side holds the
lock while doing any work.
"""

import logging
import threading
from collections.abc import Iterable

from app.models.policy import PolicyConfig
from app.models.statistics import PlacementStatistics
from app.models.student import Student

logger = logging.getLogger(__name__)


class PolicyConfigStore:
    """Holder of the active placement policy configuration."""

    def __init__(self, initial: PolicyConfig | None = None) -> None:
        """Initialize store.

        Args:
            initial: Starting configuration (all policies disabled if omitted)
        """
        self._lock = threading.Lock()
        self._config = initial if initial is not None else PolicyConfig()

    def get(self) -> PolicyConfig:
        """Return a snapshot of the active configuration."""
        with self._lock:
            return self._config

    def replace(self, config: PolicyConfig) -> PolicyConfig:
        """Atomically swap in a new configuration.

        Returns:
            The configuration that was replaced
        """
        with self._lock:
            previous = self._config
            self._config = config
        return previous


class PlacementStatisticsCache:
    """Cached placed/total counts over the student population.

    Must be recomputed by every operation that adds a student or changes a
    placement flag, before that operation returns.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._statistics = PlacementStatistics()

    def recompute(self, students: Iterable[Student]) -> PlacementStatistics:
        """Scan the full population and store fresh counts."""
        total = 0
        placed = 0
        for student in students:
            total += 1
            if student.is_placed:
                placed += 1

        statistics = PlacementStatistics(total_students=total, placed_students=placed)
        with self._lock:
            self._statistics = statistics

        logger.info(
            f"Placement statistics updated: total_students={total} placed_students={placed}"
        )
        return statistics

    def get(self) -> PlacementStatistics:
        """Return a snapshot of the cached statistics."""
        with self._lock:
            return self._statistics
