"""
Attendance Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ClassStatus,
    StudentStatus,
    EnrollmentStatus,
    AttendanceStatus,
)

# Export all entities
from .user import User, UserPublic
from .session import Session
from .api_key import ApiKey, ApiKeyCreated, ApiKeyDisplay
from .school_class import SchoolClass
from .student import Student
from .enrollment import Enrollment
from .attendance_record import AttendanceRecord

__all__ = [
    # Enums
    "ClassStatus",
    "StudentStatus",
    "EnrollmentStatus",
    "AttendanceStatus",
    # Entities
    "User",
    "Session",
    "ApiKey",
    "SchoolClass",
    "Student",
    "Enrollment",
    "AttendanceRecord",
    # Public views
    "UserPublic",
    "ApiKeyCreated",
    "ApiKeyDisplay",
]
