import pytest
from httpx import AsyncClient


@pytest.fixture
def setup_class(create_class, create_student):
    async def _setup(client: AsyncClient):
        school_class = await create_class(client)
        ana = await create_student(client, "STU001", first_name="Ana")
        ben = await create_student(client, "STU002", first_name="Ben")
        return school_class, ana, ben

    return _setup


@pytest.mark.asyncio
async def test_mark_and_read_attendance(client: AsyncClient, logged_in, setup_class):
    school_class, ana, _ = await setup_class(client)

    response = await client.post("/attendance", json={
        "class_id": school_class["id"],
        "student_id": ana["id"],
        "date": "2024-01-10",
        "status": "present",
        "latitude": 40.7128,
        "longitude": -74.006,
        "location_accuracy": 8.0,
    })

    assert response.status_code == 201
    record = response.json()
    assert record["marked_by"] == logged_in["user"]["id"]
    assert record["latitude"] == 40.7128

    fetched = await client.get(f"/attendance/{record['id']}")
    assert fetched.json()["status"] == "present"

    by_class = await client.get(f"/attendance/class/{school_class['id']}", params={"date": "2024-01-10"})
    [joined] = by_class.json()
    assert joined["student"]["first_name"] == "Ana"
    assert joined["school_class"]["id"] == school_class["id"]
    assert joined["marked_by_user"]["username"] == "rivera"
    assert "password_hash" not in joined["marked_by_user"]

    other_day = await client.get(f"/attendance/class/{school_class['id']}", params={"date": "2024-01-11"})
    assert other_day.json() == []


@pytest.mark.asyncio
async def test_mark_attendance_validation(client: AsyncClient, logged_in, setup_class):
    school_class, ana, _ = await setup_class(client)
    base = {"class_id": school_class["id"], "student_id": ana["id"], "status": "present"}

    bad_date = await client.post("/attendance", json={**base, "date": "10/01/2024"})
    bad_status = await client.post("/attendance", json={**base, "date": "2024-01-10", "status": "late"})
    bad_latitude = await client.post("/attendance", json={**base, "date": "2024-01-10", "latitude": 123})
    no_student = await client.post("/attendance", json={**base, "student_id": "missing", "date": "2024-01-10"})

    assert bad_date.status_code == 400
    assert bad_status.status_code == 400
    assert bad_latitude.status_code == 400
    assert no_student.status_code == 404
    assert no_student.json()["error"]["code"] == "STUDENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_bulk_attendance(client: AsyncClient, logged_in, setup_class):
    school_class, ana, ben = await setup_class(client)

    response = await client.post("/attendance/bulk", json={
        "class_id": school_class["id"],
        "date": "2024-01-10",
        "records": [
            {"student_id": ana["id"], "status": "present"},
            {"student_id": ben["id"], "status": "nope"},
            {"student_id": ben["id"], "status": "absent"},
        ],
    })

    assert response.status_code == 201
    data = response.json()
    assert data["succeeded"] == 2
    assert data["failed"] == 1
    assert data["results"][1]["error"]["code"] == "VALIDATION_ERROR"

    stats = await client.get(f"/attendance/stats/{school_class['id']}")
    assert stats.json() == {"present": 1, "absent": 1, "tardy": 0, "excused": 0}


@pytest.mark.asyncio
async def test_stats_date_range(client: AsyncClient, logged_in, setup_class):
    school_class, ana, _ = await setup_class(client)
    for day, status in [("2024-01-09", "absent"), ("2024-01-10", "present"), ("2024-01-12", "tardy")]:
        await client.post("/attendance", json={
            "class_id": school_class["id"], "student_id": ana["id"], "date": day, "status": status,
        })

    ranged = await client.get(
        f"/attendance/stats/{school_class['id']}",
        params={"start_date": "2024-01-10", "end_date": "2024-01-12"},
    )
    bad_range = await client.get(
        f"/attendance/stats/{school_class['id']}", params={"start_date": "Jan 10"}
    )

    assert ranged.json() == {"present": 1, "absent": 0, "tardy": 1, "excused": 0}
    assert bad_range.status_code == 400


@pytest.mark.asyncio
async def test_only_marker_changes_record(client: AsyncClient, other_client: AsyncClient, logged_in, login_as, setup_class):
    school_class, ana, _ = await setup_class(client)
    record = (await client.post("/attendance", json={
        "class_id": school_class["id"], "student_id": ana["id"], "date": "2024-01-10", "status": "absent",
    })).json()
    await login_as(other_client, "okafor")

    foreign = await other_client.put(f"/attendance/{record['id']}", json={"status": "present"})
    assert foreign.status_code == 404

    own = await client.put(f"/attendance/{record['id']}", json={"status": "excused", "notes": "sick"})
    assert own.status_code == 200
    assert own.json()["status"] == "excused"
    assert own.json()["student_id"] == ana["id"]

    assert (await other_client.delete(f"/attendance/{record['id']}")).status_code == 404
    assert (await client.delete(f"/attendance/{record['id']}")).status_code == 200
    assert (await client.get(f"/attendance/{record['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_student_attendance_filtered_by_class(client: AsyncClient, logged_in, create_class, setup_class):
    school_class, ana, _ = await setup_class(client)
    other_class = await create_class(client, name="Art")
    for class_id in (school_class["id"], other_class["id"]):
        await client.post("/attendance", json={
            "class_id": class_id, "student_id": ana["id"], "date": "2024-01-10", "status": "present",
        })

    everything = await client.get(f"/attendance/student/{ana['id']}")
    one_class = await client.get(f"/attendance/student/{ana['id']}", params={"class_id": other_class["id"]})

    assert len(everything.json()) == 2
    assert [r["class_id"] for r in one_class.json()] == [other_class["id"]]


@pytest.mark.asyncio
async def test_bulk_keeps_valid_rows_next_to_malformed_ones(client: AsyncClient, logged_in, setup_class):
    school_class, ana, _ = await setup_class(client)

    response = await client.post("/attendance/bulk", json={
        "class_id": school_class["id"],
        "date": "2024-01-10",
        "records": [
            {"student_id": 123, "status": "present"},
            "oops",
            {"student_id": ana["id"], "status": "present"},
        ],
    })

    assert response.status_code == 201
    data = response.json()
    assert data["succeeded"] == 1
    assert data["failed"] == 2
    assert [r["success"] for r in data["results"]] == [False, False, True]
    assert data["results"][0]["student_id"] is None
    assert data["results"][1]["error"]["code"] == "VALIDATION_ERROR"

    stats = await client.get(f"/attendance/stats/{school_class['id']}")
    assert stats.json()["present"] == 1


@pytest.mark.asyncio
async def test_impossible_dates_are_rejected(client: AsyncClient, logged_in, setup_class):
    school_class, ana, _ = await setup_class(client)

    mark = await client.post("/attendance", json={
        "class_id": school_class["id"], "student_id": ana["id"], "date": "2024-13-45", "status": "present",
    })
    bulk = await client.post("/attendance/bulk", json={
        "class_id": school_class["id"], "date": "2023-02-29", "records": [],
    })
    stats = await client.get(
        f"/attendance/stats/{school_class['id']}", params={"start_date": "2024-02-30"}
    )
    by_day = await client.get(
        f"/attendance/class/{school_class['id']}", params={"date": "2024-04-31"}
    )
    student = await client.post("/students", json={
        "student_id": "STU900", "first_name": "A", "last_name": "B", "date_of_birth": "2010-02-30",
    })

    assert mark.status_code == 400
    assert mark.json()["error"]["details"][0]["field"] == "date"
    assert bulk.status_code == 400
    assert stats.status_code == 400
    assert by_day.status_code == 400
    assert student.status_code == 400
