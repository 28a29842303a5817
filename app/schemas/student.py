"""Pydantic schemas for student roster operations."""

from dataclasses import asdict

from pydantic import Field

from app.models.policy import OfferTier
from app.models.student import Student
from app.schemas.base import CamelModel


class StudentBase(CamelModel):
    """Base schema for a student."""

    name: str
    cgpa: float = Field(default=0.0, description="0.0-10.0")
    is_placed: bool = False
    current_salary: float = Field(default=0.0, description="0 when unplaced")
    companies_applied: int = 0
    dream_offer: float = 0.0
    dream_company: str = ""


class StudentCreate(StudentBase):
    """Schema for creating a student."""

    pass


class StudentUpdate(StudentBase):
    """Schema for replacing a student's record (id is kept)."""

    pass


class StudentRecord(StudentBase):
    """Student as stored in seed data files."""

    id: int

    def to_domain(self) -> Student:
        """Convert to the domain model."""
        return Student(**self.model_dump())


class StudentRead(StudentRecord):
    """Schema for reading a student."""

    current_offer_category: OfferTier | None = None

    @classmethod
    def from_domain(
        cls,
        student: Student,
        offer_category: OfferTier | None = None,
    ) -> "StudentRead":
        """Build the response for a domain student."""
        return cls(**asdict(student), current_offer_category=offer_category)
