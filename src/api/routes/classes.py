from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.aggregation import ClassWithStats, StudentWithEnrollment
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.classes import (
    CreateClassCommand,
    CreateClassUseCase,
    DeleteClassUseCase,
    GetClassesUseCase,
    UpdateClassCommand,
    UpdateClassUseCase,
)
from src.app.use_cases.enrollments import EnrollStudentUseCase, GetEnrollmentsUseCase
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Enrollment, SchoolClass, UserPublic

router = APIRouter(prefix="/classes", tags=["Classes"])

ENROLLMENT_ERRORS = {
    "CLASS_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STUDENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ALREADY_ENROLLED": status.HTTP_409_CONFLICT,
}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SchoolClass)
async def create_class(
    request: CreateClassCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateClassUseCase(uow).execute(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ClassWithStats])
async def list_classes(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Every class with enrollment count and attendance stats. No login needed."""
    result = await GetClassesUseCase(uow).list()
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=List[ClassWithStats])
async def list_my_classes(
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetClassesUseCase(uow).list(owner_id=current_user.id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("/{class_id}", status_code=status.HTTP_200_OK, response_model=ClassWithStats)
async def get_class(
    class_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetClassesUseCase(uow).get(class_id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return result.value


@router.put("/{class_id}", status_code=status.HTTP_200_OK, response_model=SchoolClass)
async def update_class(
    class_id: str,
    request: UpdateClassCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partial update of a class the caller created.

    Raises:
        - 404 Not Found: Class missing or created by someone else
        - 400 Bad Request: Merged class fails validation
    """
    result = await UpdateClassUseCase(uow).execute(class_id, request, current_user.id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return result.value


@router.delete("/{class_id}", status_code=status.HTTP_200_OK)
async def delete_class(
    class_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a class with its enrollments and attendance records.

    Raises:
        - 404 Not Found: Class missing or created by someone else
    """
    result = await DeleteClassUseCase(uow).execute(class_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return {"success": True, "message": "Class deleted successfully", **result.value}


@router.get(
    "/{class_id}/enrollments",
    status_code=status.HTTP_200_OK,
    response_model=List[StudentWithEnrollment],
)
async def get_class_enrollments(
    class_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Enrolled students with their latest attendance in this class"""
    result = await GetEnrollmentsUseCase(uow).class_roster(class_id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.post(
    "/{class_id}/enroll/{student_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=Enrollment,
)
async def enroll_student(
    class_id: str,
    student_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Class or student missing
        - 409 Conflict: Student already enrolled in the class
    """
    result = await EnrollStudentUseCase(uow).enroll(class_id, student_id)
    if result.is_err():
        raise_for_error(result.error, ENROLLMENT_ERRORS)
    return result.value


@router.delete("/{class_id}/enroll/{student_id}", status_code=status.HTTP_200_OK)
async def unenroll_student(
    class_id: str,
    student_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await EnrollStudentUseCase(uow).unenroll(class_id, student_id)
    if result.is_err():
        raise_for_error(result.error, ENROLLMENT_ERRORS)
    return {"success": True, "message": "Student unenrolled successfully"}
