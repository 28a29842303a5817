"""Recruiting company model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Company:
    """A company recruiting on campus."""

    id: str
    name: str
    offered_salary: float = 0.0
