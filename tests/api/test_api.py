from __future__ import annotations

import importlib
import json
from typing import Optional

import pytest

from attendance_tracker.container import build_container
from attendance_tracker.core.exceptions import PersistenceError
from attendance_tracker.main import create_app


class InMemorySnapshots:
    def __init__(self):
        self.items: dict[str, str] = {}
        self.fail = False

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail:
            raise PersistenceError("disk full")
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@pytest.fixture
def backend() -> InMemorySnapshots:
    return InMemorySnapshots()


@pytest.fixture
def client(backend, fixed_now):
    settings = importlib.import_module("config.testing")
    container = build_container(backend=backend, clock=lambda: fixed_now)
    app = create_app(settings, container=container)
    return app.test_client()


def _saved(backend) -> dict:
    return json.loads(backend.items["student-app-storage"])["state"]


def _add_subject(client, name="Math") -> str:
    res = client.post("/api/subjects", json={"name": name, "color": "#10B981"})
    assert res.status_code == 201
    return res.get_json()["id"]


def test_subject_lifecycle_persists_each_mutation(client, backend):
    subject_id = _add_subject(client)
    assert _saved(backend)["subjects"][0]["name"] == "Math"

    client.put("/api/timetable/Monday/slots/1", json={"subjectId": subject_id})
    monday = client.get("/api/timetable").get_json()["schedule"][0]
    assert monday["timeSlots"][0]["subjectName"] == "Math"
    assert monday["timeSlots"][1]["subjectName"] == "Free Period"

    client.delete(f"/api/subjects/{subject_id}")
    saved = _saved(backend)
    assert saved["subjects"] == []
    assert "subjectId" not in saved["timetable"]["schedule"][0]["timeSlots"][0]


def test_blank_subject_name_is_rejected(client, backend):
    res = client.post("/api/subjects", json={"name": "  "})
    assert res.status_code == 400
    assert "error" in res.get_json()
    assert backend.items == {}


def test_mark_and_query_stats(client):
    subject_id = _add_subject(client)
    for slot in ("1", "2", "3"):
        client.put(f"/api/timetable/Friday/slots/{slot}", json={"subjectId": subject_id})

    res = client.post("/api/attendance/2024-03-01/all", json={"status": "present"})
    assert res.get_json()["count"] == 3

    client.post(
        "/api/attendance",
        json={"date": "2024-03-01", "timeSlotId": "2", "subjectId": subject_id, "status": "absent"},
    )
    client.post(
        "/api/attendance",
        json={"date": "2024-03-01", "timeSlotId": "3", "subjectId": subject_id, "status": "cancelled"},
    )

    stats = client.get("/api/stats").get_json()
    assert (stats["totalClasses"], stats["presentClasses"], stats["percentage"]) == (2, 1, 50.0)
    assert stats["level"] == "critical"

    monthly = client.get("/api/stats?scope=monthly").get_json()
    assert monthly["totalClasses"] == 2

    day = client.get("/api/attendance?date=2024-03-01").get_json()
    assert day["day"] == "Friday"
    assert [s["status"] for s in day["slots"]] == ["present", "absent", "cancelled"]

    history = client.get("/api/attendance/history").get_json()["history"]
    assert history[0]["date"] == "2024-03-01"
    assert len(history[0]["records"]) == 3


def test_clear_single_and_whole_day(client):
    subject_id = _add_subject(client)
    client.put("/api/timetable/Friday/slots/1", json={"subjectId": subject_id})
    client.post("/api/attendance/2024-03-01/all", json={"status": "absent"})

    res = client.delete("/api/attendance/2024-03-01/1")
    assert res.get_json()["removed"] is True

    client.post("/api/attendance/2024-03-01/all", json={"status": "present"})
    client.post("/api/attendance/2024-03-01/all", json={"status": "clear"})
    assert client.get("/api/stats").get_json()["totalClasses"] == 0


def test_invalid_status_and_date(client):
    assert client.post(
        "/api/attendance", json={"date": "2024-03-01", "timeSlotId": "1", "subjectId": "x", "status": "late"}
    ).status_code == 400
    assert client.post(
        "/api/attendance", json={"date": "yesterday", "timeSlotId": "1", "subjectId": "x", "status": "present"}
    ).status_code == 400
    assert client.post("/api/attendance", json={"date": "2024-03-01", "status": "present"}).status_code == 400


def test_projection_endpoint(client):
    res = client.get("/api/projection")
    body = res.get_json()
    assert [t["target"] for t in body["targets"]] == [75.0, 76.0]
    assert body["isEstimate"] is True

    custom = client.get("/api/projection?target=80").get_json()
    assert [t["target"] for t in custom["targets"]] == [80.0]

    assert client.get("/api/projection?target=abc").status_code == 400
    assert client.get("/api/projection?target=150").status_code == 400


def test_export_then_import_round_trip(client, backend):
    subject_id = _add_subject(client)
    client.post("/api/attendance", json={"date": "2024-03-01", "timeSlotId": "1", "subjectId": subject_id, "status": "present"})

    res = client.get("/api/export")
    assert "student-app-backup-" in res.headers["Content-Disposition"]
    document = json.loads(res.get_data(as_text=True))
    assert "exportDate" in document

    client.post("/api/reset")
    assert client.get("/api/stats").get_json()["totalClasses"] == 0
    assert backend.items == {}

    res = client.post("/api/import", json=document)
    assert res.get_json() == {"ok": True, "subjects": 1, "attendanceRecords": 1}
    assert client.get("/api/subjects").get_json()["subjects"][0]["id"] == subject_id
    assert _saved(backend)["attendanceRecords"][0]["status"] == "present"


def test_malformed_import_keeps_state(client):
    _add_subject(client)

    res = client.post("/api/import", json={"subjects": [], "timetable": {"schedule": []}})
    assert res.status_code == 400
    assert len(client.get("/api/subjects").get_json()["subjects"]) == 1


def test_persistence_failure_is_reported(client, backend):
    backend.fail = True
    res = client.post("/api/subjects", json={"name": "Math"})
    assert res.status_code == 500
    assert "disk full" in res.get_json()["error"]


def test_state_is_loaded_from_existing_snapshot(backend, fixed_now):
    first = build_container(backend=backend, clock=lambda: fixed_now)
    first.store.add_subject("Chemistry", "#F59E0B")
    first.commit()

    second = build_container(backend=backend, clock=lambda: fixed_now)
    assert [s.name for s in second.store.state.subjects] == ["Chemistry"]


def test_assigning_unknown_subject_leaves_slot_free(client, backend):
    res = client.put("/api/timetable/Monday/slots/1", json={"subjectId": "no-such-subject"})
    assert res.status_code == 200

    slot = res.get_json()["schedule"][0]["timeSlots"][0]
    assert "subjectId" not in slot
    assert slot["subjectName"] == "Free Period"
    assert client.get("/api/projection").get_json()["dailyClasses"] == 0


def test_today_views_follow_the_app_clock(client):
    # fixed_now is Friday 2024-03-15
    day = client.get("/api/attendance").get_json()
    assert (day["date"], day["day"]) == ("2024-03-15", "Friday")

    subject_id = _add_subject(client)
    record = client.post(
        "/api/attendance", json={"timeSlotId": "1", "subjectId": subject_id, "status": "present"}
    ).get_json()
    assert (record["date"], record["day"]) == ("2024-03-15", "Friday")

    res = client.get("/api/export")
    assert "student-app-backup-2024-03-15.json" in res.headers["Content-Disposition"]
    assert json.loads(res.data)["exportDate"] == "2024-03-15T09:30:00"
