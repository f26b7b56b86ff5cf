"""
Unit tests for the in-memory store and its unit of work
"""

import asyncio

import pytest

from src.domain.entities import SchoolClass


def make_class(**overrides) -> SchoolClass:
    fields = {"name": "Biology", "instructor": "Dr. Okafor", "schedule": "{}", "created_by": "u1"}
    fields.update(overrides)
    return SchoolClass(**fields)


@pytest.mark.asyncio
async def test_committed_writes_persist(store, uow_factory):
    school_class = make_class()

    async with uow_factory() as uow:
        await uow.classes.create(school_class)
        await uow.commit()

    assert store.count("classes") == 1
    async with uow_factory() as uow:
        stored = await uow.classes.get_by_id(school_class.id)
    assert stored.name == "Biology"


@pytest.mark.asyncio
async def test_uncommitted_writes_are_rolled_back(store, uow_factory):
    async with uow_factory() as uow:
        await uow.classes.create(make_class())

    assert store.count("classes") == 0


@pytest.mark.asyncio
async def test_exception_rolls_back_and_propagates(store, uow_factory, seed):
    existing = make_class(name="Chemistry")
    await seed(existing)

    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.classes.delete(existing.id)
            await uow.classes.create(make_class())
            raise RuntimeError("boom")

    assert store.count("classes") == 1
    async with uow_factory() as uow:
        stored = await uow.classes.get_by_id(existing.id)
    assert stored.name == "Chemistry"


@pytest.mark.asyncio
async def test_rollback_restores_previous_version(uow_factory, seed):
    school_class = make_class(capacity=20)
    await seed(school_class)

    async with uow_factory() as uow:
        school_class.capacity = 99
        await uow.classes.update(school_class)
        await uow.rollback()
        stored = await uow.classes.get_by_id(school_class.id)

    assert stored.capacity == 20


@pytest.mark.asyncio
async def test_reads_return_copies(uow_factory, seed):
    school_class = make_class()
    await seed(school_class)

    async with uow_factory() as uow:
        loaded = await uow.classes.get_by_id(school_class.id)
        loaded.name = "Mutated but never saved"
        await uow.commit()

    async with uow_factory() as uow:
        stored = await uow.classes.get_by_id(school_class.id)
    assert stored.name == "Biology"


@pytest.mark.asyncio
async def test_units_of_work_run_one_at_a_time(uow_factory):
    events = []

    async def worker(name: str):
        async with uow_factory():
            events.append(f"{name}-enter")
            await asyncio.sleep(0.01)
            events.append(f"{name}-exit")

    await asyncio.gather(worker("a"), worker("b"))

    assert events == ["a-enter", "a-exit", "b-enter", "b-exit"]
