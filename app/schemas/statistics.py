"""Pydantic schemas for placement statistics."""

from app.models.statistics import PlacementStatistics
from app.schemas.base import CamelModel


class PlacementStatisticsRead(CamelModel):
    """Campus placement statistics."""

    total_students: int
    placed_students: int
    placement_percentage: float

    @classmethod
    def from_domain(cls, statistics: PlacementStatistics) -> "PlacementStatisticsRead":
        """Build the response for a statistics snapshot."""
        return cls(
            total_students=statistics.total_students,
            placed_students=statistics.placed_students,
            placement_percentage=statistics.placement_percentage,
        )
