"""API tests for /api/screenings (upsert and listings)."""

from __future__ import annotations


def test_submit_requires_unique_id(client):
    r = client.post("/api/screenings", json={"vision": {"day1": {"result": "pass"}}})
    assert r.status_code == 400
    assert r.json()["error"] == "Unique ID is required"


def test_submit_unknown_student_is_404(client):
    r = client.post("/api/screenings", json={"uniqueId": "nope01"})
    assert r.status_code == 404
    assert r.json()["error"] == "Student not found"


def test_submit_creates_then_partially_updates(client, add_student):
    student = add_student()

    r = client.post("/api/screenings", json={
        "uniqueId": student["uniqueId"],
        "screeningYear": 2025,
        "screeningEventDate": "2025-10-01",
        "notes": "first visit",
        "vision": {"day1": {"screener": "RN Lee", "result": "pass", "rightEye": "20/20", "leftEye": "20/25"}},
    })
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Screening created successfully"
    screening = body["screening"]
    assert screening["student_id"] == student["id"]
    assert screening["school"] == "Lincoln Elementary (ln01)"
    assert screening["screening_year"] == 2025
    assert screening["screening_event_date"] == "2025-10-01"
    assert screening["vision_day1_right_eye"] == "20/20"

    r = client.post("/api/screenings", json={
        "uniqueId": student["uniqueId"],
        "screeningYear": 2025,
        "vision": {"day1": {"result": ""}},
        "hearing": {"day1": {"result": "refer", "right1000": "fail"}},
    })
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Screening updated successfully"
    screening = body["screening"]
    assert screening["vision_day1_result"] == "pass"
    assert screening["vision_day1_screener"] == "RN Lee"
    assert screening["hearing_day1_result"] == "refer"
    assert screening["hearing_day1_right_1000"] == "fail"
    assert screening["notes"] == "first visit"
    assert screening["screening_event_date"] == "2025-10-01"

    r = client.get(f"/api/screenings/{student['id']}")
    assert r.json()["total"] == 1


def test_separate_records_per_year(client, add_student):
    student = add_student()
    for year in (2024, 2025):
        r = client.post("/api/screenings", json={
            "uniqueId": student["uniqueId"],
            "screeningYear": year,
            "vision": {"day1": {"result": "pass"}},
        })
        assert r.json()["message"] == "Screening created successfully"

    r = client.get(f"/api/screenings/{student['id']}")
    assert r.json()["total"] == 2

    r = client.get(f"/api/screenings/{student['id']}", params={"screeningYear": 2024})
    body = r.json()
    assert body["total"] == 1
    assert body["screenings"][0]["screening_year"] == 2024


def test_admin_listing_filters_and_paginates(client, add_student):
    lincoln = [add_student(lastName=f"L{i}") for i in range(3)]
    oak = add_student(school="Oak Middle (ok01)", grade="6th grade")
    for student in lincoln + [oak]:
        client.post("/api/screenings", json={"uniqueId": student["uniqueId"], "screeningYear": 2025, "absent": True})

    r = client.get("/api/screenings", params={"school": "Lincoln Elementary (ln01)", "limit": 2})
    body = r.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 2
    assert len(body["screenings"]) == 2
    assert body["screenings"][0]["students"]["school"] == "Lincoln Elementary (ln01)"

    r = client.get("/api/screenings", params={"school": "Lincoln Elementary (ln01)", "limit": 2, "page": 2})
    assert len(r.json()["screenings"]) == 1

    r = client.get("/api/screenings", params={"screeningYear": 2025})
    assert r.json()["total"] == 4


def test_admin_listing_rejects_page_zero(client):
    r = client.get("/api/screenings", params={"page": 0})
    assert r.status_code == 400


def test_submission_without_year_uses_evaluation_date(client, add_student, as_of):
    student = add_student()

    r = client.post("/api/screenings", json={
        "uniqueId": student["uniqueId"],
        "vision": {"day1": {"screener": "RN Lee", "result": "pass"}},
        "hearing": {"day1": {"screener": "RN Lee", "result": "pass"}},
    })
    assert r.status_code == 200
    screening = r.json()["screening"]
    assert screening["screening_year"] == as_of.year
    assert screening["screening_event_date"] == as_of.isoformat()

    body = client.get("/api/students").json()
    assert body["completed"] == 1
    assert body["incomplete"] == 0
