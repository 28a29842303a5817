"""Pydantic schemas for eligibility checks."""

from dataclasses import asdict

from app.models.eligibility import EligibilityResult
from app.schemas.base import CamelModel


class EligibilityCheckRequest(CamelModel):
    """Request to check one student against one company."""

    student_id: int
    company_id: str


class EligibilityResultRead(CamelModel):
    """Eligibility decision with its justification trail."""

    student_id: int
    student_name: str
    company_id: str
    company_name: str
    is_eligible: bool
    reasons: list[str]
    policy_specifics: str | None = None

    @classmethod
    def from_domain(cls, result: EligibilityResult) -> "EligibilityResultRead":
        """Build the response for an engine result."""
        return cls(**asdict(result))
