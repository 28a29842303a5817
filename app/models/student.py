"""Student roster model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student on the placement roster.

    ``current_salary`` is expected to be 0 for unplaced students, but the
    eligibility engine does not rely on it.
    """

    id: int
    name: str
    cgpa: float = 0.0  # 0.0-10.0
    is_placed: bool = False
    current_salary: float = 0.0
    companies_applied: int = 0
    dream_offer: float = 0.0
    dream_company: str = ""
