"""Pydantic schemas for companies."""

from dataclasses import asdict

from app.models.company import Company
from app.schemas.base import CamelModel


class CompanyRead(CamelModel):
    """Schema for reading (and seeding) a company."""

    id: str
    name: str
    offered_salary: float = 0.0

    def to_domain(self) -> Company:
        """Convert to the domain model."""
        return Company(**self.model_dump())

    @classmethod
    def from_domain(cls, company: Company) -> "CompanyRead":
        """Build the response for a domain company."""
        return cls(**asdict(company))
