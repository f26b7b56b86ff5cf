from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.aggregation import AttendanceRecordWithDetails, AttendanceStats
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.attendance import (
    BulkAttendanceResponse,
    BulkMarkAttendanceCommand,
    GetAttendanceUseCase,
    MarkAttendanceCommand,
    MarkAttendanceUseCase,
    UpdateAttendanceCommand,
    UpdateAttendanceUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.base import IsoDate
from src.domain.entities import AttendanceRecord, UserPublic

router = APIRouter(prefix="/attendance", tags=["Attendance"])

MARK_ERRORS = {
    "CLASS_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STUDENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AttendanceRecord)
async def mark_attendance(
    request: MarkAttendanceCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record one student's attendance for a class on a date.

    Raises:
        - 404 Not Found: Class or student missing
        - 400 Bad Request: Invalid input
    """
    result = await MarkAttendanceUseCase(uow).execute(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, MARK_ERRORS)
    return result.value


@router.post(
    "/bulk", status_code=status.HTTP_201_CREATED, response_model=BulkAttendanceResponse
)
async def mark_attendance_bulk(
    request: BulkMarkAttendanceCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark a whole class for one date.

    Each row succeeds or fails on its own; the response lists every row's
    outcome in input order.
    """
    result = await MarkAttendanceUseCase(uow).execute_bulk(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get(
    "/class/{class_id}",
    status_code=status.HTTP_200_OK,
    response_model=List[AttendanceRecordWithDetails],
)
async def get_class_attendance(
    class_id: str,
    date: Optional[IsoDate] = Query(None),
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAttendanceUseCase(uow).by_class(class_id, date)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get(
    "/student/{student_id}",
    status_code=status.HTTP_200_OK,
    response_model=List[AttendanceRecordWithDetails],
)
async def get_student_attendance(
    student_id: str,
    class_id: Optional[str] = Query(None),
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAttendanceUseCase(uow).by_student(student_id, class_id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get(
    "/stats/{class_id}", status_code=status.HTTP_200_OK, response_model=AttendanceStats
)
async def get_attendance_stats(
    class_id: str,
    start_date: Optional[IsoDate] = Query(None),
    end_date: Optional[IsoDate] = Query(None),
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Status counts for a class, optionally bounded by inclusive dates"""
    result = await GetAttendanceUseCase(uow).stats(class_id, start_date, end_date)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("/{record_id}", status_code=status.HTTP_200_OK, response_model=AttendanceRecord)
async def get_attendance_record(
    record_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAttendanceUseCase(uow).get(record_id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return result.value


@router.put("/{record_id}", status_code=status.HTTP_200_OK, response_model=AttendanceRecord)
async def update_attendance_record(
    record_id: str,
    request: UpdateAttendanceCommand,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Record missing or marked by someone else
    """
    result = await UpdateAttendanceUseCase(uow).update(
        record_id, request, current_user.id
    )
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return result.value


@router.delete("/{record_id}", status_code=status.HTTP_200_OK)
async def delete_attendance_record(
    record_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateAttendanceUseCase(uow).delete(record_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return {"success": True, "message": "Attendance record deleted successfully"}
