"""Student roster endpoints."""

from fastapi import APIRouter, HTTPException, status

from app.api.deps import PlacementServiceDep
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentRead, StudentUpdate
from app.services.placement import (
    InvalidStudentError,
    PlacementService,
    StudentNotFoundError,
)

router = APIRouter()


def _to_read(service: PlacementService, student: Student) -> StudentRead:
    return StudentRead.from_domain(student, service.offer_category_for(student))


@router.get(
    "",
    response_model=list[StudentRead],
    summary="List students",
)
async def list_students(service: PlacementServiceDep) -> list[StudentRead]:
    """Return every student on the roster."""
    return [_to_read(service, student) for student in service.list_students()]


@router.get(
    "/{student_id}",
    response_model=StudentRead,
    summary="Get student",
)
async def get_student(student_id: int, service: PlacementServiceDep) -> StudentRead:
    """Return a single student."""
    try:
        student = service.get_student(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return _to_read(service, student)


@router.post(
    "",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
)
async def create_student(
    payload: StudentCreate,
    service: PlacementServiceDep,
) -> StudentRead:
    """Add a student; placement statistics are refreshed."""
    try:
        student = service.create_student(**payload.model_dump())
    except InvalidStudentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return _to_read(service, student)


@router.put(
    "/{student_id}",
    response_model=StudentRead,
    summary="Update student",
)
async def update_student(
    student_id: int,
    payload: StudentUpdate,
    service: PlacementServiceDep,
) -> StudentRead:
    """Replace a student's record; placement statistics are refreshed."""
    try:
        student = service.update_student(student_id, **payload.model_dump())
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStudentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return _to_read(service, student)
