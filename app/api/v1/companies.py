"""Company endpoints."""

from fastapi import APIRouter, HTTPException, status

from app.api.deps import PlacementServiceDep
from app.schemas.company import CompanyRead
from app.schemas.student import StudentRead
from app.services.placement import CompanyNotFoundError

router = APIRouter()


@router.get(
    "",
    response_model=list[CompanyRead],
    summary="List companies",
)
async def list_companies(service: PlacementServiceDep) -> list[CompanyRead]:
    """Return every company."""
    return [CompanyRead.from_domain(company) for company in service.list_companies()]


@router.get(
    "/{company_id}",
    response_model=CompanyRead,
    summary="Get company",
)
async def get_company(company_id: str, service: PlacementServiceDep) -> CompanyRead:
    """Return a single company."""
    try:
        company = service.get_company(company_id)
    except CompanyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return CompanyRead.from_domain(company)


@router.get(
    "/{company_id}/eligible-students",
    response_model=list[StudentRead],
    summary="Students eligible for a company",
)
async def list_eligible_students(
    company_id: str,
    service: PlacementServiceDep,
) -> list[StudentRead]:
    """Return every student currently eligible to apply to the company."""
    try:
        students = service.eligible_students_for_company(company_id)
    except CompanyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return [
        StudentRead.from_domain(student, service.offer_category_for(student))
        for student in students
    ]
