"""
Attendance aggregation

Statistics and joined read models built from the repositories of an already
entered UnitOfWork. Nothing here writes.
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    AttendanceRecord,
    AttendanceStatus,
    Enrollment,
    EnrollmentStatus,
    SchoolClass,
    Student,
    UserPublic,
)


class AttendanceStats(BaseModel):
    """Per-status counts; the four fields sum to the number of records counted"""

    present: int = 0
    absent: int = 0
    tardy: int = 0
    excused: int = 0


class ClassWithStats(SchoolClass):
    enrolled_count: int
    attendance_stats: AttendanceStats


class StudentWithEnrollment(Student):
    enrollment: Enrollment
    latest_attendance: Optional[AttendanceRecord] = None


class AttendanceRecordWithDetails(AttendanceRecord):
    student: Student
    school_class: SchoolClass
    marked_by_user: Optional[UserPublic] = None


def in_date_range(
    record: AttendanceRecord, start_date: Optional[str], end_date: Optional[str]
) -> bool:
    # ISO dates are zero-padded, so string order is calendar order
    if start_date and record.date < start_date:
        return False
    if end_date and record.date > end_date:
        return False
    return True


def count_statuses(
    records: Iterable[AttendanceRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> AttendanceStats:
    counts = {status.value: 0 for status in AttendanceStatus}
    for record in records:
        if in_date_range(record, start_date, end_date):
            counts[AttendanceStatus(record.status).value] += 1
    return AttendanceStats(**counts)


def latest_record(records: Iterable[AttendanceRecord]) -> Optional[AttendanceRecord]:
    """Most recent record by date; same-day ties go to the last marked"""
    return max(records, key=lambda r: (r.date, r.marked_at), default=None)


class AttendanceAggregator:
    """
    Read-side joins over the entity store.

    Must be used inside ``async with uow``.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def class_stats(
        self,
        class_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> AttendanceStats:
        records = await self.uow.attendance.get_by_class_id(class_id)
        return count_statuses(records, start_date, end_date)

    async def enrich_classes(self, classes: List[SchoolClass]) -> List[ClassWithStats]:
        enriched = []
        for school_class in classes:
            enrollments = await self.uow.enrollments.get_by_class_id(school_class.id)
            enrolled_count = sum(
                1 for e in enrollments if e.status == EnrollmentStatus.enrolled
            )
            stats = await self.class_stats(school_class.id)
            enriched.append(
                ClassWithStats(
                    **school_class.model_dump(),
                    enrolled_count=enrolled_count,
                    attendance_stats=stats,
                )
            )
        return enriched

    async def enrich_attendance(
        self, records: List[AttendanceRecord]
    ) -> List[AttendanceRecordWithDetails]:
        students: Dict[str, Optional[Student]] = {}
        classes: Dict[str, Optional[SchoolClass]] = {}
        users: Dict[str, Optional[UserPublic]] = {}

        enriched = []
        for record in records:
            if record.student_id not in students:
                students[record.student_id] = await self.uow.students.get_by_id(
                    record.student_id
                )
            if record.class_id not in classes:
                classes[record.class_id] = await self.uow.classes.get_by_id(
                    record.class_id
                )
            if record.marked_by not in users:
                user = await self.uow.users.get_by_id(record.marked_by)
                users[record.marked_by] = user.to_public() if user else None

            student = students[record.student_id]
            school_class = classes[record.class_id]
            # Dangling references are skipped rather than reported
            if student is None or school_class is None:
                continue

            enriched.append(
                AttendanceRecordWithDetails(
                    **record.model_dump(),
                    student=student,
                    school_class=school_class,
                    marked_by_user=users[record.marked_by],
                )
            )
        return enriched

    async def class_roster(self, class_id: str) -> List[StudentWithEnrollment]:
        enrollments = await self.uow.enrollments.get_by_class_id(class_id)
        records = await self.uow.attendance.get_by_class_id(class_id)

        roster = []
        for enrollment in enrollments:
            if enrollment.status != EnrollmentStatus.enrolled:
                continue
            student = await self.uow.students.get_by_id(enrollment.student_id)
            if student is None:
                continue
            latest = latest_record(r for r in records if r.student_id == student.id)
            roster.append(
                StudentWithEnrollment(
                    **student.model_dump(),
                    enrollment=enrollment,
                    latest_attendance=latest,
                )
            )
        return roster
