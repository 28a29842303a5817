"""Business logic services."""

from app.services.placement import (
    CompanyNotFoundError,
    EntityNotFoundError,
    InvalidStudentError,
    PlacementService,
    StudentNotFoundError,
)

__all__ = [
    "PlacementService",
    "EntityNotFoundError",
    "StudentNotFoundError",
    "CompanyNotFoundError",
    "InvalidStudentError",
]
