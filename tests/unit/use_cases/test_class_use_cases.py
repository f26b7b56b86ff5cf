"""
Unit tests for class management and cascading delete
"""

import pytest

from src.app.use_cases.classes import (
    CreateClassCommand,
    CreateClassUseCase,
    DeleteClassUseCase,
    GetClassesUseCase,
    UpdateClassCommand,
    UpdateClassUseCase,
)
from src.domain.entities import (
    AttendanceRecord,
    ClassStatus,
    Enrollment,
    Student,
)


async def create_class(uow_factory, user_id: str, **overrides):
    fields = {"name": "Physics", "instructor": "Mr. Hale", "schedule": "Tue 10:00"}
    fields.update(overrides)
    result = await CreateClassUseCase(uow_factory()).execute(
        user_id, CreateClassCommand(**fields)
    )
    assert result.is_ok()
    return result.value


@pytest.mark.asyncio
async def test_create_class_defaults(uow_factory):
    school_class = await create_class(uow_factory, "owner")

    assert school_class.capacity == 30
    assert school_class.status == ClassStatus.active
    assert school_class.created_by == "owner"


def test_create_class_command_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        CreateClassCommand(name="X", instructor="Y", schedule="{}", capacity=0)


@pytest.mark.asyncio
async def test_update_applies_only_sent_fields(uow_factory):
    school_class = await create_class(uow_factory, "owner", description="Mechanics")

    result = await UpdateClassUseCase(uow_factory()).execute(
        school_class.id, UpdateClassCommand(capacity=12), "owner"
    )

    assert result.is_ok()
    assert result.value.capacity == 12
    assert result.value.description == "Mechanics"
    assert result.value.name == "Physics"
    assert result.value.updated_at >= school_class.updated_at


@pytest.mark.asyncio
async def test_update_by_non_owner_is_not_found(store, uow_factory):
    school_class = await create_class(uow_factory, "owner")

    result = await UpdateClassUseCase(uow_factory()).execute(
        school_class.id, UpdateClassCommand(name="Hijacked"), "someone-else"
    )

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    assert store.tables["classes"][school_class.id].name == "Physics"


@pytest.mark.asyncio
async def test_delete_cascades_to_enrollments_and_attendance(store, uow_factory, seed):
    doomed = await create_class(uow_factory, "owner")
    survivor = await create_class(uow_factory, "owner", name="Chemistry")
    student = Student(student_id="S-1", first_name="Ana", last_name="Diaz", created_by="owner")
    await seed(
        student,
        Enrollment(class_id=doomed.id, student_id=student.id),
        Enrollment(class_id=survivor.id, student_id=student.id),
        AttendanceRecord(class_id=doomed.id, student_id=student.id, date="2024-03-01", status="present", marked_by="owner"),
        AttendanceRecord(class_id=doomed.id, student_id=student.id, date="2024-03-02", status="absent", marked_by="owner"),
        AttendanceRecord(class_id=survivor.id, student_id=student.id, date="2024-03-01", status="present", marked_by="owner"),
    )

    result = await DeleteClassUseCase(uow_factory()).execute(doomed.id, "owner")

    assert result.is_ok()
    assert result.value["deleted_enrollments"] == 1
    assert result.value["deleted_attendance_records"] == 2
    assert set(store.tables["classes"]) == {survivor.id}
    assert all(e.class_id == survivor.id for e in store.tables["enrollments"].values())
    assert all(r.class_id == survivor.id for r in store.tables["attendance"].values())
    assert store.count("enrollments") == 1
    assert store.count("attendance") == 1


@pytest.mark.asyncio
async def test_delete_by_non_owner_removes_nothing(store, uow_factory, seed):
    school_class = await create_class(uow_factory, "owner")
    await seed(Enrollment(class_id=school_class.id, student_id="s1"))

    result = await DeleteClassUseCase(uow_factory()).execute(school_class.id, "someone-else")

    assert result.error.code == "NOT_FOUND"
    assert store.count("classes") == 1
    assert store.count("enrollments") == 1


@pytest.mark.asyncio
async def test_get_and_list_classes(uow_factory):
    mine = await create_class(uow_factory, "owner")
    await create_class(uow_factory, "other", name="History")

    single = await GetClassesUseCase(uow_factory()).get(mine.id)
    everything = await GetClassesUseCase(uow_factory()).list()
    only_mine = await GetClassesUseCase(uow_factory()).list(owner_id="owner")
    missing = await GetClassesUseCase(uow_factory()).get("nope")

    assert single.value.enrolled_count == 0
    assert single.value.attendance_stats.present == 0
    assert len(everything.value) == 2
    assert [c.id for c in only_mine.value] == [mine.id]
    assert missing.error.code == "NOT_FOUND"
