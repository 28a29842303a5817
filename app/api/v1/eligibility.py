"""Eligibility check endpoints."""

from fastapi import APIRouter, HTTPException, status

from app.api.deps import PlacementServiceDep
from app.schemas.eligibility import EligibilityCheckRequest, EligibilityResultRead
from app.services.placement import CompanyNotFoundError, StudentNotFoundError

router = APIRouter()


@router.post(
    "/check",
    response_model=EligibilityResultRead,
    summary="Check eligibility",
    description="Evaluates the active placement policies for a student and company.",
)
async def check_eligibility(
    request: EligibilityCheckRequest,
    service: PlacementServiceDep,
) -> EligibilityResultRead:
    """Check whether a student may apply to a company.

    Raises:
        HTTPException: 404 if the student or company does not exist
    """
    try:
        result = service.check_eligibility(request.student_id, request.company_id)
    except StudentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )
    except CompanyNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company not found",
        )

    return EligibilityResultRead.from_domain(result)
