import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_class_requires_authentication(client: AsyncClient):
    response = await client.post("/classes", json={
        "name": "Math101", "instructor": "Ms. Rivera", "schedule": "{}",
    })

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_class_listing_is_public(client: AsyncClient, other_client: AsyncClient, logged_in, create_class):
    school_class = await create_class(client, name="Math101")

    response = await other_client.get("/classes")

    assert response.status_code == 200
    [listed] = response.json()
    assert listed["id"] == school_class["id"]
    assert listed["enrolled_count"] == 0
    assert listed["attendance_stats"] == {"present": 0, "absent": 0, "tardy": 0, "excused": 0}


@pytest.mark.asyncio
async def test_create_class_validation(client: AsyncClient, logged_in):
    response = await client.post("/classes", json={
        "name": "Math101", "instructor": "Ms. Rivera", "schedule": "{}", "capacity": 0,
    })

    assert response.status_code == 400
    assert response.json()["error"]["details"][0]["field"] == "capacity"


@pytest.mark.asyncio
async def test_my_classes_and_ownership(client: AsyncClient, other_client: AsyncClient, logged_in, login_as, create_class):
    school_class = await create_class(client, name="Math101")
    await login_as(other_client, "okafor")
    await create_class(other_client, name="History")

    mine = await client.get("/classes/mine")
    assert [c["name"] for c in mine.json()] == ["Math101"]

    hijack = await other_client.put(f"/classes/{school_class['id']}", json={"name": "Mine now"})
    assert hijack.status_code == 404
    assert (await other_client.delete(f"/classes/{school_class['id']}")).status_code == 404

    update = await client.put(f"/classes/{school_class['id']}", json={"capacity": 25})
    assert update.status_code == 200
    assert update.json()["capacity"] == 25
    assert update.json()["name"] == "Math101"

    fetched = await other_client.get(f"/classes/{school_class['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["capacity"] == 25

    assert (await client.get("/classes/does-not-exist")).status_code == 404


@pytest.mark.asyncio
async def test_student_crud(client: AsyncClient, logged_in, create_student):
    student = await create_student(client, "STU001", email="sam@school.edu")

    duplicate = await client.post("/students", json={
        "student_id": "STU001", "first_name": "Other", "last_name": "Person",
    })
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "STUDENT_ID_TAKEN"

    bad_email = await client.post("/students", json={
        "student_id": "STU002", "first_name": "A", "last_name": "B", "email": "nope",
    })
    assert bad_email.status_code == 400

    fetched = await client.get(f"/students/{student['id']}")
    assert fetched.json()["email"] == "sam@school.edu"

    updated = await client.put(f"/students/{student['id']}", json={"status": "graduated"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "graduated"

    assert [s["id"] for s in (await client.get("/students")).json()] == [student["id"]]
    assert [s["id"] for s in (await client.get("/students/mine")).json()] == [student["id"]]

    deleted = await client.delete(f"/students/{student['id']}")
    assert deleted.status_code == 200
    assert (await client.get(f"/students/{student['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_enrollment_endpoints(client: AsyncClient, logged_in, create_class, create_student):
    school_class = await create_class(client)
    student = await create_student(client, "STU001")
    enroll_url = f"/classes/{school_class['id']}/enroll/{student['id']}"

    first = await client.post(enroll_url)
    second = await client.post(enroll_url)
    no_class = await client.post(f"/classes/missing/enroll/{student['id']}")
    no_student = await client.post(f"/classes/{school_class['id']}/enroll/missing")

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "ALREADY_ENROLLED"
    assert no_class.json()["error"]["code"] == "CLASS_NOT_FOUND"
    assert no_student.json()["error"]["code"] == "STUDENT_NOT_FOUND"
    assert no_class.status_code == no_student.status_code == 404

    roster = await client.get(f"/classes/{school_class['id']}/enrollments")
    assert [s["student_id"] for s in roster.json()] == ["STU001"]
    assert roster.json()[0]["enrollment"]["status"] == "enrolled"

    student_enrollments = await client.get(f"/students/{student['id']}/enrollments")
    assert [e["class_id"] for e in student_enrollments.json()] == [school_class["id"]]

    assert (await client.get(f"/classes/{school_class['id']}")).json()["enrolled_count"] == 1

    assert (await client.delete(enroll_url)).status_code == 200
    assert (await client.delete(enroll_url)).status_code == 404
    assert (await client.get(f"/classes/{school_class['id']}/enrollments")).json() == []
