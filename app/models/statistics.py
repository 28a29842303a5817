"""Campus-wide placement statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacementStatistics:
    """Placed/total student counts at a point in time."""

    total_students: int = 0
    placed_students: int = 0

    @property
    def placement_percentage(self) -> float:
        """Placed students as a percentage of all students (0 when empty)."""
        if self.total_students <= 0:
            return 0.0
        return self.placed_students / self.total_students * 100
