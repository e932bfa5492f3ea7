from __future__ import annotations

import pytest

from src.student_records.student_records.core.exceptions import StorageError


def _create(client, name="Alice", email="a@a.com", department="IT"):
    return client.post("/students", json={"name": name, "email": email, "department": department})


def test_create_student_returns_201_and_view(client):
    resp = _create(client)

    assert resp.status_code == 201
    body = resp.get_json()
    assert set(body) == {"id", "name", "email", "department", "created_at"}
    assert body["name"] == "Alice"


def test_create_then_fetch_round_trip(client):
    created = _create(client).get_json()

    resp = client.get(f"/students/{created['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == created


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Alice", "email": "bad", "department": "IT"},
        {"name": "", "email": "a@a.com", "department": "IT"},
        {"email": "a@a.com", "department": "IT"},
    ],
)
def test_create_validation_errors_are_400(client, payload):
    resp = client.post("/students", json=payload)

    assert resp.status_code == 400
    assert list(resp.get_json()) == ["error"]


def test_create_with_non_json_body_is_400(client):
    resp = client.post("/students", data="name=Alice", content_type="text/plain")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_create_duplicate_email_is_400(client):
    _create(client)

    resp = _create(client, name="Other")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "email already exists"}


def test_list_students_paginates(client):
    for i in range(12):
        _create(client, name=f"S{i}", email=f"s{i}@x.org")

    first = client.get("/students?page=1&limit=10").get_json()
    second = client.get("/students?page=2&limit=10").get_json()
    default = client.get("/students?page=abc&limit=0").get_json()

    assert len(first) == 10
    assert len(second) == 2
    assert [s["id"] for s in default] == [s["id"] for s in first]


@pytest.mark.parametrize("bad_id", ["abc", "0", "-3", "1.5"])
def test_bad_student_id_is_400(client, bad_id):
    assert client.get(f"/students/{bad_id}").status_code == 400
    assert client.put(f"/students/{bad_id}", json={"name": "X"}).status_code == 400
    assert client.delete(f"/students/{bad_id}").status_code == 400


def test_get_missing_student_is_404(client):
    resp = client.get("/students/99")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "student not found"}


def test_update_student_partial(client):
    created = _create(client).get_json()

    resp = client.put(f"/students/{created['id']}", json={"name": "X"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["name"] == "X"
    assert body["email"] == "a@a.com"
    assert body["department"] == "IT"


def test_update_missing_student_is_404(client):
    assert client.put("/students/5", json={"name": "X"}).status_code == 404


def test_update_invalid_email_is_400(client):
    created = _create(client).get_json()

    assert client.put(f"/students/{created['id']}", json={"email": "nope"}).status_code == 400


def test_delete_student_twice(client):
    created = _create(client).get_json()

    first = client.delete(f"/students/{created['id']}")
    second = client.delete(f"/students/{created['id']}")

    assert first.status_code == 204
    assert first.data == b""
    assert second.status_code == 404
    assert client.get(f"/students/{created['id']}").status_code == 404


def test_mark_attendance_returns_201_empty(client, attendance_repo):
    created = _create(client).get_json()

    resp = client.post(
        "/attendance/mark",
        json={"student_id": created["id"], "date": "2026-10-15T08:30:00Z", "status": "late"},
    )

    assert resp.status_code == 201
    assert resp.data == b""
    assert attendance_repo.count() == 1


def test_mark_attendance_unknown_student_is_400(client, attendance_repo):
    resp = client.post("/attendance/mark", json={"student_id": 404, "date": "2026-10-15T08:30:00Z"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "student not found: cannot mark attendance"}
    assert attendance_repo.count() == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2026-10-15T08:30:00Z"},
        {"student_id": "x", "date": "2026-10-15T08:30:00Z"},
        {"student_id": 1},
        {"student_id": 1, "date": "yesterday"},
        {"student_id": 1, "date": "2026-10-15T08:30:00Z", "status": "sleeping"},
    ],
)
def test_mark_attendance_validation_is_400(client, payload):
    _create(client)

    resp = client.post("/attendance/mark", json=payload)

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_get_attendance_for_student(client):
    created = _create(client).get_json()
    client.post("/attendance/mark", json={"student_id": created["id"], "date": "2026-10-15T08:30:00+02:00"})

    resp = client.get(f"/attendance/{created['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {
            "id": 1,
            "student_id": created["id"],
            "student_name": "Alice",
            "date": "2026-10-15T06:30:00",
            "status": "present",
        }
    ]


def test_get_attendance_bad_id_and_missing_student(client):
    assert client.get("/attendance/abc").status_code == 400
    assert client.get("/attendance/12").status_code == 404


def test_storage_failure_is_500(client, students_repo, monkeypatch):
    def boom(**kwargs):
        raise StorageError("connection refused")

    monkeypatch.setattr(students_repo, "list_page", boom)

    resp = client.get("/students")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "connection refused"}


def test_storage_failure_on_write_is_500(client, students_repo, monkeypatch):
    def boom(**kwargs):
        raise StorageError("deadlock")

    monkeypatch.setattr(students_repo, "create", boom)

    assert _create(client).status_code == 500


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_update_missing_student_with_taken_email_is_404(client):
    _create(client)

    resp = client.put("/students/999", json={"email": "a@a.com"})

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "student not found"}


@pytest.mark.parametrize("student_id", ["1", 1.0, True])
def test_mark_attendance_requires_integer_student_id(client, attendance_repo, student_id):
    _create(client)

    resp = client.post("/attendance/mark", json={"student_id": student_id, "date": "2026-10-15T08:30:00Z"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "invalid student_id"}
    assert attendance_repo.count() == 0


def test_mark_attendance_blank_status_defaults_to_present(client, attendance_repo):
    created = _create(client).get_json()

    resp = client.post(
        "/attendance/mark",
        json={"student_id": created["id"], "date": "2026-10-15T08:30:00Z", "status": "   "},
    )

    assert resp.status_code == 201
    assert client.get(f"/attendance/{created['id']}").get_json()[0]["status"] == "present"
