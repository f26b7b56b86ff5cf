"""
Class Management Use Cases
"""

from .create_class_use_case import CreateClassUseCase
from .update_class_use_case import UpdateClassUseCase
from .delete_class_use_case import DeleteClassUseCase
from .get_classes_use_case import GetClassesUseCase
from .dtos import CreateClassCommand, UpdateClassCommand

__all__ = [
    "CreateClassUseCase",
    "UpdateClassUseCase",
    "DeleteClassUseCase",
    "GetClassesUseCase",
    "CreateClassCommand",
    "UpdateClassCommand",
]
