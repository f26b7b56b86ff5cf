from src.adapter.repositories.api_key_repository import ApiKeyRepository
from src.adapter.repositories.attendance_repository import AttendanceRepository
from src.adapter.repositories.class_repository import ClassRepository
from src.adapter.repositories.enrollment_repository import EnrollmentRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.student_repository import StudentRepository
from src.adapter.repositories.user_repository import UserRepository
from src.adapter.services.in_memory_store import InMemoryStore, StoreTransaction
from src.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """
    In-memory implementation of UnitOfWork pattern.

    Holds the store lock from __aenter__ to __aexit__, so each unit of work
    runs alone. Anything not committed is rolled back on exit.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.tx = None

    async def __aenter__(self):
        await self.store.lock.acquire()
        self.tx = StoreTransaction(self.store)
        # Initialize all repositories with the transaction
        self.users = UserRepository(self.tx)
        self.sessions = SessionRepository(self.tx)
        self.api_keys = ApiKeyRepository(self.tx)
        self.classes = ClassRepository(self.tx)
        self.students = StudentRepository(self.tx)
        self.enrollments = EnrollmentRepository(self.tx)
        self.attendance = AttendanceRepository(self.tx)
        return self

    async def __aexit__(self, *args):
        try:
            await self.rollback()
        finally:
            self.tx = None
            self.store.lock.release()

    async def commit(self):
        self.tx.commit()

    async def rollback(self):
        self.tx.rollback()
