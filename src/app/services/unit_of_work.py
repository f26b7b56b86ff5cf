from abc import ABC, abstractmethod

from src.app.repositories.api_key_repository import IApiKeyRepository
from src.app.repositories.attendance_repository import IAttendanceRepository
from src.app.repositories.class_repository import IClassRepository
from src.app.repositories.enrollment_repository import IEnrollmentRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.student_repository import IStudentRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    api_keys: IApiKeyRepository
    classes: IClassRepository
    students: IStudentRepository
    enrollments: IEnrollmentRepository
    attendance: IAttendanceRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
