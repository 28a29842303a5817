"""Placement statistics endpoints."""

from fastapi import APIRouter

from app.api.deps import PlacementServiceDep
from app.schemas.statistics import PlacementStatisticsRead

router = APIRouter()


@router.get(
    "",
    response_model=PlacementStatisticsRead,
    summary="Campus placement statistics",
)
async def get_statistics(service: PlacementServiceDep) -> PlacementStatisticsRead:
    """Return placed/total counts and the placement percentage."""
    return PlacementStatisticsRead.from_domain(service.get_statistics())
