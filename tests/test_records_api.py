# /tests/test_records_api.py

import pytest


@pytest.fixture
def ada(client, admin_headers, ada_payload):
    response = client.post("/api/students", json=ada_payload, headers=admin_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def cs101(client, admin_headers, cs101_payload):
    response = client.post("/api/courses", json=cs101_payload, headers=admin_headers)
    assert response.status_code == 201
    return response.json()


def test_grade_and_attendance_walkthrough(client, admin_headers, ada, cs101):
    """
    GIVEN an admin, a student and a course
    WHEN grades and attendance are recorded, duplicated and the course is renamed
    THEN conflicts leave the store untouched and views reflect the current course
    """
    grade_payload = {
        "studentId": ada["id"], "courseId": cs101["id"],
        "assessmentType": "Midterm", "gradeValue": "A", "assessmentDate": "2024-03-01",
    }
    response = client.post("/api/grades", json=grade_payload, headers=admin_headers)
    assert response.status_code == 201
    grade = response.json()
    assert grade["studentFirstName"] == "Ada"
    assert grade["studentLastName"] == "Lovelace"
    assert grade["courseCode"] == "CS101"
    assert grade["courseName"] == "Intro"

    duplicate = client.post("/api/grades", json={**grade_payload, "gradeValue": "B"}, headers=admin_headers)
    assert duplicate.status_code == 409
    assert len(client.get(f"/api/grades/student/{ada['id']}", headers=admin_headers).json()) == 1

    attendance_payload = {
        "studentId": ada["id"], "courseId": cs101["id"], "attendanceDate": "2024-01-10", "status": "PRESENT",
    }
    assert client.post("/api/attendance", json=attendance_payload, headers=admin_headers).status_code == 201
    second = client.post("/api/attendance", json={**attendance_payload, "status": "ABSENT"}, headers=admin_headers)
    assert second.status_code == 409

    renamed = client.put(
        f"/api/courses/{cs101['id']}", json={"courseName": "Introduction to Computing"}, headers=admin_headers
    )
    assert renamed.status_code == 200
    assert renamed.json()["courseCode"] == "CS101"

    refreshed = client.get(f"/api/grades/{grade['id']}", headers=admin_headers).json()
    assert refreshed["courseName"] == "Introduction to Computing"

    day = client.get(f"/api/attendance/course/{cs101['id']}/date/2024-01-10", headers=admin_headers).json()
    assert [r["status"] for r in day] == ["PRESENT"]


def test_student_sees_only_their_own_grades(client, admin_headers, student_headers, ada, cs101, alan_payload):
    alan = client.post("/api/students", json=alan_payload, headers=admin_headers).json()
    for student in (ada, alan):
        client.post("/api/grades", json={
            "studentId": student["id"], "courseId": cs101["id"], "assessmentType": "Final", "gradeValue": "A",
        }, headers=admin_headers)

    response = client.get("/api/grades/my-grades", headers=student_headers)

    assert response.status_code == 200
    assert [g["studentId"] for g in response.json()] == [ada["id"]]


def test_unknown_references_are_not_found(client, admin_headers, ada):
    response = client.post("/api/grades", json={
        "studentId": ada["id"], "courseId": "crs_missing", "assessmentType": "Quiz", "gradeValue": "7",
    }, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found with id: crs_missing"
    assert client.get("/api/students/unknown", headers=admin_headers).status_code == 404


def test_duplicate_student_email_over_http(client, admin_headers, ada, alan_payload):
    response = client.post(
        "/api/students", json={**alan_payload, "email": "ada@school.edu"}, headers=admin_headers
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "Email is already in use!"


def test_invalid_payloads_are_rejected(client, admin_headers, ada_payload, cs101):
    bad_email = client.post("/api/students", json={**ada_payload, "email": "not-an-email"}, headers=admin_headers)
    assert bad_email.status_code == 422

    bad_time = client.post("/api/timetable", json={
        "courseId": cs101["id"], "dayOfWeek": "MONDAY", "startTime": "25:00", "endTime": "10:00",
    }, headers=admin_headers)
    assert bad_time.status_code == 422

    empty_update = client.put(f"/api/courses/{cs101['id']}", json={}, headers=admin_headers)
    assert empty_update.status_code == 422
    assert empty_update.json()["detail"] == "No update data provided."


def test_timetable_by_day_over_http(client, admin_headers, student_headers, cs101):
    created = client.post("/api/timetable", json={
        "courseId": cs101["id"], "dayOfWeek": "monday", "startTime": "09:00", "endTime": "10:30",
        "roomNumber": "B12", "instructorName": "Dr. Hopper",
    }, headers=admin_headers)
    assert created.status_code == 201
    assert created.json()["dayOfWeek"] == "MONDAY"

    listed = client.get("/api/timetable/day/Monday", headers=student_headers).json()
    assert [e["courseCode"] for e in listed] == ["CS101"]
    assert client.get("/api/timetable/day/someday", headers=student_headers).status_code == 422


def test_delete_student_keeps_grade_with_empty_display_fields(client, admin_headers, ada, cs101):
    grade = client.post("/api/grades", json={
        "studentId": ada["id"], "courseId": cs101["id"], "assessmentType": "Midterm", "gradeValue": "A",
    }, headers=admin_headers).json()

    assert client.delete(f"/api/students/{ada['id']}", headers=admin_headers).status_code == 204

    orphan = client.get(f"/api/grades/{grade['id']}", headers=admin_headers).json()
    assert orphan["studentId"] == ada["id"]
    assert orphan["studentFirstName"] is None


def test_student_login_matches_email_regardless_of_case(client, admin_headers, cs101, ada_payload):
    ada = client.post(
        "/api/students", json={**ada_payload, "email": "ada@School.EDU"}, headers=admin_headers
    ).json()
    client.post("/api/grades", json={
        "studentId": ada["id"], "courseId": cs101["id"], "assessmentType": "Final", "gradeValue": "A",
    }, headers=admin_headers)
    assert client.post(
        "/api/auth/register", json={"username": "ada@School.EDU", "password": "secret123"}
    ).status_code == 201
    token = client.post("/api/auth/token", data={"username": "ada@School.EDU", "password": "secret123"}).json()

    response = client.get("/api/grades/my-grades", headers={"Authorization": f"Bearer {token['access_token']}"})

    assert response.status_code == 200
    assert [g["studentId"] for g in response.json()] == [ada["id"]]


@pytest.mark.parametrize("start_time", ["25:00", "9:00", "1٢:30", "０９:00"])
def test_timetable_rejects_malformed_times(client, admin_headers, cs101, start_time):
    response = client.post("/api/timetable", json={
        "courseId": cs101["id"], "dayOfWeek": "MONDAY", "startTime": start_time, "endTime": "10:00",
    }, headers=admin_headers)
    assert response.status_code == 422
    assert client.get("/api/timetable", headers=admin_headers).json() == []


def test_empty_update_of_a_missing_record_is_a_validation_failure(client, admin_headers):
    response = client.put("/api/courses/crs_missing", json={}, headers=admin_headers)
    assert response.status_code == 422
    assert response.json()["detail"] == "No update data provided."
