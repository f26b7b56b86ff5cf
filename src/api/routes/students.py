from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.enrollments import GetEnrollmentsUseCase
from src.app.use_cases.students import (
    CreateStudentCommand,
    CreateStudentUseCase,
    DeleteStudentUseCase,
    GetStudentsUseCase,
    UpdateStudentCommand,
    UpdateStudentUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Enrollment, Student, UserPublic

router = APIRouter(prefix="/students", tags=["Students"])

STUDENT_ERRORS = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STUDENT_ID_TAKEN": status.HTTP_409_CONFLICT,
}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Student)
async def create_student(
    request: CreateStudentCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 409 Conflict: student_id already in use
        - 400 Bad Request: Invalid input
    """
    result = await CreateStudentUseCase(uow).execute(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, STUDENT_ERRORS)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[Student])
async def list_students(
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetStudentsUseCase(uow).list()
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=List[Student])
async def list_my_students(
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetStudentsUseCase(uow).list(owner_id=current_user.id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("/{student_id}", status_code=status.HTTP_200_OK, response_model=Student)
async def get_student(
    student_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetStudentsUseCase(uow).get(student_id)
    if result.is_err():
        raise_for_error(result.error, STUDENT_ERRORS)
    return result.value


@router.put("/{student_id}", status_code=status.HTTP_200_OK, response_model=Student)
async def update_student(
    student_id: str,
    request: UpdateStudentCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Student missing or created by someone else
        - 409 Conflict: New student_id belongs to another student
    """
    result = await UpdateStudentUseCase(uow).execute(
        student_id, request, current_user.id
    )
    if result.is_err():
        raise_for_error(result.error, STUDENT_ERRORS)
    return result.value


@router.delete("/{student_id}", status_code=status.HTTP_200_OK)
async def delete_student(
    student_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a student with their enrollments and attendance records"""
    result = await DeleteStudentUseCase(uow).execute(student_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error, STUDENT_ERRORS)
    return {"success": True, "message": "Student deleted successfully", **result.value}


@router.get(
    "/{student_id}/enrollments",
    status_code=status.HTTP_200_OK,
    response_model=List[Enrollment],
)
async def get_student_enrollments(
    student_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEnrollmentsUseCase(uow).student_enrollments(student_id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value
