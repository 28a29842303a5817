"""Placement policy configuration endpoints."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from app.api.deps import PlacementServiceDep
from app.policy.loader import InvalidConfigurationError
from app.schemas.policy import PolicyConfigSchema

router = APIRouter()


@router.get(
    "",
    response_model=PolicyConfigSchema,
    summary="Get active policy configuration",
)
async def get_policies(service: PlacementServiceDep) -> PolicyConfigSchema:
    """Return the currently active policy configuration."""
    return PolicyConfigSchema.from_domain(service.get_policy_config())


@router.post(
    "/configure",
    response_model=PolicyConfigSchema,
    summary="Replace policy configuration",
    description="Replaces the whole configuration; omitted policies are disabled.",
)
async def configure_policies(
    service: PlacementServiceDep,
    payload: Any = Body(...),
) -> PolicyConfigSchema:
    """Install a new policy configuration.

    Raises:
        HTTPException: 400 if the payload does not decode
    """
    try:
        config = service.configure_policies(payload)
    except InvalidConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return PolicyConfigSchema.from_domain(config)
