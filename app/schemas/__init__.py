"""Pydantic schemas for request/response validation."""

from app.schemas.company import CompanyRead
from app.schemas.eligibility import EligibilityCheckRequest, EligibilityResultRead
from app.schemas.policy import PolicyConfigSchema
from app.schemas.statistics import PlacementStatisticsRead
from app.schemas.student import (
    StudentCreate,
    StudentRead,
    StudentRecord,
    StudentUpdate,
)

__all__ = [
    "CompanyRead",
    "EligibilityCheckRequest",
    "EligibilityResultRead",
    "PolicyConfigSchema",
    "PlacementStatisticsRead",
    "StudentCreate",
    "StudentRead",
    "StudentRecord",
    "StudentUpdate",
]
