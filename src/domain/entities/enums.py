"""
Attendance Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ClassStatus(str, Enum):
    """Class lifecycle status"""

    active = "active"
    inactive = "inactive"
    completed = "completed"


class StudentStatus(str, Enum):
    """Student status"""

    active = "active"
    inactive = "inactive"
    graduated = "graduated"


class EnrollmentStatus(str, Enum):
    """Enrollment status"""

    enrolled = "enrolled"
    dropped = "dropped"
    completed = "completed"


class AttendanceStatus(str, Enum):
    """Attendance status - closed set, every record carries exactly one"""

    present = "present"
    absent = "absent"
    tardy = "tardy"
    excused = "excused"
