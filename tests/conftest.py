"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENV", "test")

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_placement_service
from app.main import app
from app.models.company import Company
from app.models.policy import PolicyConfig
from app.models.statistics import PlacementStatistics
from app.models.student import Student
from app.policy.loader import load_policy_file
from app.policy.store import PolicyConfigStore
from app.services.placement import PlacementService


@pytest.fixture
def default_config() -> PolicyConfig:
    """Policy configuration shipped in policies/default-policy.yaml."""
    config, _ = load_policy_file()
    return config


@pytest.fixture
def placed_student() -> Student:
    """A placed L3 student with applications to spare."""
    return Student(
        id=1,
        name="Aarav Sharma",
        cgpa=8.5,
        is_placed=True,
        current_salary=600000,
        companies_applied=2,
        dream_offer=900000,
        dream_company="Google",
    )


@pytest.fixture
def unplaced_student() -> Student:
    """An unplaced student below the default CGPA bar."""
    return Student(
        id=2,
        name="Rohan Verma",
        cgpa=6.4,
        is_placed=False,
        current_salary=0,
        companies_applied=3,
        dream_offer=1000000,
        dream_company="Infosys",
    )


@pytest.fixture
def company() -> Company:
    """A company offering 10L."""
    return Company(id="C100", name="Acme Analytics", offered_salary=1000000)


@pytest.fixture
def statistics() -> PlacementStatistics:
    """Statistics for a fully placed campus."""
    return PlacementStatistics(total_students=10, placed_students=10)


@pytest.fixture
def roster() -> list[Student]:
    """Small roster: two placed (L2 and L1) and two unplaced students."""
    return [
        Student(
            id=1,
            name="Aarav Sharma",
            cgpa=8.7,
            is_placed=True,
            current_salary=1500000,
            companies_applied=2,
            dream_offer=1800000,
            dream_company="Google",
        ),
        Student(
            id=2,
            name="Diya Patel",
            cgpa=9.2,
            is_placed=True,
            current_salary=2400000,
            companies_applied=1,
            dream_offer=3000000,
            dream_company="Microsoft",
        ),
        Student(
            id=3,
            name="Rohan Verma",
            cgpa=6.4,
            is_placed=False,
            dream_offer=1000000,
            dream_company="Infosys",
        ),
        Student(
            id=4,
            name="Kabir Singh",
            cgpa=8.1,
            is_placed=False,
            dream_offer=1500000,
            dream_company="Google",
        ),
    ]


@pytest.fixture
def companies() -> list[Company]:
    """Two companies either side of the high-salary threshold."""
    return [
        Company(id="C001", name="Google", offered_salary=2800000),
        Company(id="C002", name="Infosys", offered_salary=700000),
    ]


@pytest.fixture
def service(
    default_config: PolicyConfig,
    roster: list[Student],
    companies: list[Company],
) -> PlacementService:
    """Placement service seeded with the fixture roster and default policy."""
    placement_service = PlacementService(config_store=PolicyConfigStore(default_config))
    placement_service.load_seed_data(roster, companies)
    return placement_service


@pytest.fixture
def client(service: PlacementService) -> Generator[TestClient, None, None]:
    """Create FastAPI test client with overridden dependencies."""
    app.dependency_overrides[get_placement_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
