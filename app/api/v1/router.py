"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from app.api.v1 import (
    companies,
    eligibility,
    health,
    policies,
    statistics,
    students,
)

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Policy configuration
api_router.include_router(
    policies.router,
    prefix="/policies",
    tags=["policies"],
)

# Eligibility
api_router.include_router(
    eligibility.router,
    prefix="/eligibility",
    tags=["eligibility"],
)

# Roster
api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"],
)

api_router.include_router(
    companies.router,
    prefix="/companies",
    tags=["companies"],
)

# Statistics
api_router.include_router(
    statistics.router,
    prefix="/statistics",
    tags=["statistics"],
)
