"""Seed data loading for the student roster and company list.

Seed files are JSON arrays using the API field names. A missing or broken
file is logged and treated as an empty collection so the service can still
start.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from app.models.company import Company
from app.models.student import Student
from app.schemas.company import CompanyRead
from app.schemas.student import StudentRecord

logger = logging.getLogger(__name__)

_students_adapter = TypeAdapter(list[StudentRecord])
_companies_adapter = TypeAdapter(list[CompanyRead])


def _read_json_file(path: Path, label: str) -> Any | None:
    """Read and parse a JSON seed file, returning None on failure."""
    if not path.exists():
        logger.warning(f"Could not find {label} data file at '{path}'. Using empty {label} list.")
        return None

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.warning(f"Could not read {label} data file '{path}': {e}. Using empty {label} list.")
    except json.JSONDecodeError as e:
        logger.warning(f"Could not parse {label} data file '{path}': {e}. Using empty {label} list.")
    return None


def load_students_file(path: Path) -> list[Student]:
    """Load students from a JSON seed file.

    Args:
        path: Path to the students JSON array

    Returns:
        List of students (empty if the file is missing or invalid)
    """
    raw = _read_json_file(path, "students")
    if raw is None:
        return []

    try:
        records = _students_adapter.validate_python(raw)
    except ValidationError as e:
        logger.warning(f"Invalid students data in '{path}': {e}. Using empty students list.")
        return []

    students = [record.to_domain() for record in records]
    logger.info(f"Successfully loaded {len(students)} students from {path}")
    return students


def load_companies_file(path: Path) -> list[Company]:
    """Load companies from a JSON seed file.

    Args:
        path: Path to the companies JSON array

    Returns:
        List of companies (empty if the file is missing or invalid)
    """
    raw = _read_json_file(path, "companies")
    if raw is None:
        return []

    try:
        records = _companies_adapter.validate_python(raw)
    except ValidationError as e:
        logger.warning(f"Invalid companies data in '{path}': {e}. Using empty companies list.")
        return []

    companies = [record.to_domain() for record in records]
    logger.info(f"Successfully loaded {len(companies)} companies from {path}")
    return companies
