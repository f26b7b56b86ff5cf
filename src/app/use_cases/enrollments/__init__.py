"""
Enrollment Use Cases
"""

from .enroll_student_use_case import EnrollStudentUseCase
from .get_enrollments_use_case import GetEnrollmentsUseCase

__all__ = [
    "EnrollStudentUseCase",
    "GetEnrollmentsUseCase",
]
