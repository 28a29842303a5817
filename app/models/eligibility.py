"""Eligibility decision model."""

from dataclasses import dataclass, field


@dataclass
class EligibilityResult:
    """Outcome of one (student, company) eligibility check.

    Attributes:
        student_id: Student evaluated
        student_name: Student name at evaluation time
        company_id: Company evaluated
        company_name: Company name at evaluation time
        is_eligible: Whether the application is permitted
        reasons: Ordered justification trail
        policy_specifics: Extra policy detail (derived offer category)
    """

    student_id: int
    student_name: str
    company_id: str
    company_name: str
    is_eligible: bool
    reasons: list[str] = field(default_factory=list)
    policy_specifics: str | None = None
