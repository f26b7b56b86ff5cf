"""
Student Management Use Cases
"""

from .create_student_use_case import CreateStudentUseCase
from .update_student_use_case import UpdateStudentUseCase
from .delete_student_use_case import DeleteStudentUseCase
from .get_students_use_case import GetStudentsUseCase
from .dtos import CreateStudentCommand, UpdateStudentCommand

__all__ = [
    "CreateStudentUseCase",
    "UpdateStudentUseCase",
    "DeleteStudentUseCase",
    "GetStudentsUseCase",
    "CreateStudentCommand",
    "UpdateStudentCommand",
]
