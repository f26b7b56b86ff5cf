"""
Attendance Use Cases
"""

from .mark_attendance_use_case import MarkAttendanceUseCase
from .update_attendance_use_case import UpdateAttendanceUseCase
from .get_attendance_use_case import GetAttendanceUseCase
from .dtos import (
    MarkAttendanceCommand,
    BulkMarkAttendanceCommand,
    BulkAttendanceRow,
    UpdateAttendanceCommand,
    BulkAttendanceItem,
    BulkAttendanceResponse,
)

__all__ = [
    # Use Cases
    "MarkAttendanceUseCase",
    "UpdateAttendanceUseCase",
    "GetAttendanceUseCase",
    # DTOs
    "MarkAttendanceCommand",
    "BulkMarkAttendanceCommand",
    "BulkAttendanceRow",
    "UpdateAttendanceCommand",
    "BulkAttendanceItem",
    "BulkAttendanceResponse",
]
