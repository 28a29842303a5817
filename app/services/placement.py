"""Placement service.

Owns the in-memory student roster and company list together with the
policy configuration store and the placement statistics cache, and is the
single entry point for eligibility checks.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from app.core.config import Settings
from app.core.logging import audit_logger
from app.models.company import Company
from app.models.eligibility import EligibilityResult
from app.models.policy import OfferTier, PolicyConfig
from app.models.statistics import PlacementStatistics
from app.models.student import Student
from app.policy.engine import EligibilityEngine
from app.policy.loader import decode_policy_config, load_policy_file
from app.policy.rules import classify_offer_tier
from app.policy.store import PlacementStatisticsCache, PolicyConfigStore
from app.services.seed_data import load_companies_file, load_students_file

logger = logging.getLogger(__name__)


class EntityNotFoundError(Exception):
    """Raised when a student or company id cannot be resolved."""

    pass


class StudentNotFoundError(EntityNotFoundError):
    """Raised when student not found."""

    pass


class CompanyNotFoundError(EntityNotFoundError):
    """Raised when company not found."""

    pass


class InvalidStudentError(Exception):
    """Raised when a student payload fails validation."""

    pass


class PlacementService:
    """Service for roster management and eligibility checks."""

    def __init__(
        self,
        config_store: PolicyConfigStore | None = None,
        statistics: PlacementStatisticsCache | None = None,
        engine: EligibilityEngine | None = None,
    ) -> None:
        self.config_store = config_store or PolicyConfigStore()
        self.statistics = statistics or PlacementStatisticsCache()
        self.engine = engine or EligibilityEngine()
        self._lock = threading.Lock()
        self._students: dict[int, Student] = {}
        self._companies: dict[str, Company] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlacementService":
        """Build a service with the default policy and seed data.

        Raises:
            PolicyFileError: If the default policy file is missing
            InvalidConfigurationError: If the default policy is malformed
        """
        config, _ = load_policy_file(settings.policy_file)
        service = cls(config_store=PolicyConfigStore(config))

        if settings.load_seed_data_on_startup:
            service.load_seed_data(
                load_students_file(settings.students_path),
                load_companies_file(settings.companies_path),
            )

        return service

    def load_seed_data(
        self,
        students: Iterable[Student],
        companies: Iterable[Company],
    ) -> None:
        """Replace the roster and company list."""
        with self._lock:
            self._students = {student.id: student for student in students}
            self._companies = {company.id: company for company in companies}
            self.statistics.recompute(self._students.values())

    # Students

    def list_students(self) -> list[Student]:
        """Return all students in roster order."""
        with self._lock:
            return list(self._students.values())

    def get_student(self, student_id: int) -> Student:
        """Get a student by id.

        Raises:
            StudentNotFoundError: If no such student
        """
        student = self._students.get(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student not found for ID: {student_id}")
        return student

    def create_student(
        self,
        name: str,
        cgpa: float = 0.0,
        is_placed: bool = False,
        current_salary: float = 0.0,
        companies_applied: int = 0,
        dream_offer: float = 0.0,
        dream_company: str = "",
    ) -> Student:
        """Add a student with the next free id.

        Statistics are recomputed before returning.

        Raises:
            InvalidStudentError: If name is empty
        """
        if not name.strip():
            raise InvalidStudentError("Student name cannot be empty")

        with self._lock:
            student_id = max(self._students, default=0) + 1
            student = Student(
                id=student_id,
                name=name,
                cgpa=cgpa,
                is_placed=is_placed,
                current_salary=current_salary,
                companies_applied=companies_applied,
                dream_offer=dream_offer,
                dream_company=dream_company,
            )
            self._students[student_id] = student
            self.statistics.recompute(self._students.values())

        audit_logger.log(
            action="student.created",
            actor_type="api",
            actor_id="anonymous",
            entity_type="student",
            entity_id=str(student_id),
            metadata={"is_placed": is_placed},
        )
        return student

    def update_student(self, student_id: int, **fields: Any) -> Student:
        """Replace a student's record, keeping the id.

        Statistics are recomputed before returning.

        Raises:
            StudentNotFoundError: If no such student
            InvalidStudentError: If name is set to empty
        """
        if "name" in fields and not str(fields["name"]).strip():
            raise InvalidStudentError("Student name cannot be empty")
        fields.pop("id", None)

        with self._lock:
            current = self._students.get(student_id)
            if current is None:
                raise StudentNotFoundError(f"Student not found for ID: {student_id}")
            student = replace(current, **fields)
            self._students[student_id] = student
            self.statistics.recompute(self._students.values())

        audit_logger.log(
            action="student.updated",
            actor_type="api",
            actor_id="anonymous",
            entity_type="student",
            entity_id=str(student_id),
            metadata={"fields": sorted(fields)},
        )
        return student

    def offer_category_for(self, student: Student) -> OfferTier | None:
        """Derive a student's offer category under the active policy.

        Returns None for unplaced students or when the offer category
        policy is disabled.
        """
        policy = self.config_store.get().offer_category
        if not student.is_placed or not policy.enabled:
            return None
        return classify_offer_tier(student.current_salary, policy)

    # Companies

    def list_companies(self) -> list[Company]:
        """Return all companies."""
        with self._lock:
            return list(self._companies.values())

    def get_company(self, company_id: str) -> Company:
        """Get a company by id.

        Raises:
            CompanyNotFoundError: If no such company
        """
        company = self._companies.get(company_id)
        if company is None:
            raise CompanyNotFoundError(f"Company not found for ID: {company_id}")
        return company

    # Policy configuration and statistics

    def get_policy_config(self) -> PolicyConfig:
        """Return the active policy configuration."""
        return self.config_store.get()

    def configure_policies(self, payload: Any) -> PolicyConfig:
        """Decode and install a new policy configuration.

        Raises:
            InvalidConfigurationError: If payload does not decode; the
                active configuration is left untouched
        """
        config = decode_policy_config(payload)
        self.config_store.replace(config)

        logger.info(f"Policy configuration updated: {config}")
        audit_logger.log(
            action="policy_config.replaced",
            actor_type="api",
            actor_id="anonymous",
            entity_type="policy_config",
            entity_id="active",
        )
        return config

    def get_statistics(self) -> PlacementStatistics:
        """Return the cached placement statistics."""
        return self.statistics.get()

    # Eligibility

    def check_eligibility(self, student_id: int, company_id: str) -> EligibilityResult:
        """Check one student against one company.

        Raises:
            StudentNotFoundError: If no such student
            CompanyNotFoundError: If no such company
        """
        student = self.get_student(student_id)
        company = self.get_company(company_id)

        result = self.engine.evaluate(
            student,
            company,
            self.config_store.get(),
            self.statistics.get(),
        )
        logger.debug(
            f"Eligibility check student={student_id} company={company_id} "
            f"eligible={result.is_eligible}",
            extra={"student_id": student_id, "company_id": company_id},
        )
        return result

    def eligible_students_for_company(self, company_id: str) -> list[Student]:
        """Return every student eligible to apply to a company.

        All students are evaluated against the same snapshots.

        Raises:
            CompanyNotFoundError: If no such company
        """
        company = self.get_company(company_id)
        config = self.config_store.get()
        statistics = self.statistics.get()

        return [
            student
            for student in self.list_students()
            if self.engine.evaluate(student, company, config, statistics).is_eligible
        ]
