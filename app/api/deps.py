"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, Request

from app.services.placement import PlacementService


def get_placement_service(request: Request) -> PlacementService:
    """Return the placement service created at application startup.

    Args:
        request: Incoming request

    Returns:
        Shared PlacementService
    """
    return request.app.state.placement_service


PlacementServiceDep = Annotated[PlacementService, Depends(get_placement_service)]
