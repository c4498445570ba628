"""Courses, lessons, progress tracking and certificates over HTTP."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture()
def course(client, auth_headers, community, member):
    response = client.post(
        "/api/courses",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Async Python",
            "description": "From coroutines to task groups.",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_lesson(client, headers, course_id, **overrides):
    body = {"title": "Event loops", "type": "TEXT", "content": "The loop runs callbacks."}
    body.update(overrides)
    return client.post(f"/api/courses/{course_id}/lessons", headers=headers, json=body)


def test_create_course(course, member):
    assert course["instructorId"] == member["id"]
    assert course["instructorName"] == "Ada Owner"
    assert course["isPublished"] is False
    assert course["lessonCount"] == 0
    assert course["enrolledCount"] == 0


def test_create_course_requires_instructor_profile(client, auth_headers, community):
    response = client.post(
        "/api/courses",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Orphan course",
            "description": "Nobody teaches this one.",
        },
    )
    assert response.status_code == 404
    assert response.json()["error"] == "INSTRUCTOR_NOT_FOUND"


def test_course_description_is_validated(client, auth_headers, community, member):
    response = client.post(
        "/api/courses",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Tiny", "description": "short"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_only_instructor_can_publish(client, make_headers, course):
    response = client.post(
        f"/api/courses/{course['id']}/publish", headers=make_headers(str(uuid.uuid4()))
    )
    assert response.status_code == 403
    assert response.json()["error"] == "UNAUTHORIZED"


def test_publish_and_filter(client, auth_headers, community, course):
    response = client.post(f"/api/courses/{course['id']}/publish", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["isPublished"] is True
    assert response.json()["publishedAt"] is not None

    again = client.post(f"/api/courses/{course['id']}/publish", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "COURSE_ALREADY_PUBLISHED"

    listing = client.get(
        f"/api/communities/{community['id']}/courses?publishedOnly=true", headers=auth_headers
    )
    assert [c["id"] for c in listing.json()] == [course["id"]]


def test_update_course(client, auth_headers, course):
    response = client.patch(
        f"/api/courses/{course['id']}", headers=auth_headers, json={"title": "Async Python II"}
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Async Python II"


def test_lessons_append_in_order(client, auth_headers, course):
    first = create_lesson(client, auth_headers, course["id"])
    second = create_lesson(
        client,
        auth_headers,
        course["id"],
        title="Watch the talk",
        type="VIDEO_EMBED",
        content="",
        videoUrl="https://videos.example.com/talk",
    )
    assert first.status_code == 201, first.text
    assert second.status_code == 201, second.text
    assert first.json()["order"] == 0
    assert second.json()["order"] == 1

    lessons = client.get(f"/api/courses/{course['id']}/lessons", headers=auth_headers)
    assert [lesson["title"] for lesson in lessons.json()] == ["Event loops", "Watch the talk"]

    details = client.get(f"/api/courses/{course['id']}", headers=auth_headers)
    assert details.json()["lessonCount"] == 2


def test_lesson_type_rules(client, auth_headers, course):
    text = create_lesson(client, auth_headers, course["id"], content="   ")
    assert text.status_code == 400
    assert text.json()["error"] == "INVALID_CONTENT"

    video = create_lesson(client, auth_headers, course["id"], type="VIDEO_EMBED", content="")
    assert video.status_code == 400
    assert video.json()["error"] == "MISSING_VIDEO_URL"


def test_only_instructor_can_add_lessons(client, make_headers, course):
    response = create_lesson(client, make_headers(str(uuid.uuid4())), course["id"])
    assert response.status_code == 403
    assert response.json()["error"] == "NOT_COURSE_INSTRUCTOR"


def test_drip_schedule(client, auth_headers, course):
    past = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()
    rejected = create_lesson(client, auth_headers, course["id"], dripAvailableAt=past)
    assert rejected.status_code == 400
    assert rejected.json()["error"] == "DRIP_DATE_IN_PAST"

    lesson = create_lesson(client, auth_headers, course["id"]).json()
    future = (datetime.now(timezone.utc) + timedelta(days=3)).isoformat()
    dripped = client.put(
        f"/api/lessons/{lesson['id']}/drip", headers=auth_headers, json={"availableAt": future}
    )
    assert dripped.status_code == 200, dripped.text
    assert dripped.json()["isAvailable"] is False

    available = client.get(
        f"/api/courses/{course['id']}/lessons?availableOnly=true", headers=auth_headers
    )
    assert available.json() == []

    blocked = client.post(
        f"/api/courses/{course['id']}/progress",
        headers=auth_headers,
        json={"lessonId": lesson["id"]},
    )
    assert blocked.status_code == 409
    assert blocked.json()["error"] == "LESSON_NOT_AVAILABLE"


def test_reorder_lesson(client, auth_headers, course):
    lesson = create_lesson(client, auth_headers, course["id"]).json()
    response = client.put(
        f"/api/lessons/{lesson['id']}/order", headers=auth_headers, json={"order": 4}
    )
    assert response.status_code == 200
    assert response.json()["order"] == 4


def test_progress_without_tracking_is_null(client, auth_headers, course):
    response = client.get(f"/api/courses/{course['id']}/progress", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() is None


def test_progress_rejects_foreign_lesson(client, auth_headers, course):
    create_lesson(client, auth_headers, course["id"])
    response = client.post(
        f"/api/courses/{course['id']}/progress",
        headers=auth_headers,
        json={"lessonId": str(uuid.uuid4())},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_LESSON_ID"


def test_completing_course_issues_certificate(client, auth_headers, course):
    first = create_lesson(client, auth_headers, course["id"]).json()
    second = create_lesson(client, auth_headers, course["id"], title="Task groups").json()

    halfway = client.post(
        f"/api/courses/{course['id']}/progress",
        headers=auth_headers,
        json={"lessonId": first["id"]},
    )
    assert halfway.status_code == 200, halfway.text
    assert halfway.json()["completionPercentage"] == 50
    assert halfway.json()["completedAt"] is None

    early = client.post(f"/api/courses/{course['id']}/certificate", headers=auth_headers)
    assert early.status_code == 409
    assert early.json()["error"] == "COURSE_NOT_COMPLETED"

    done = client.post(
        f"/api/courses/{course['id']}/progress",
        headers=auth_headers,
        json={"lessonId": second["id"]},
    )
    assert done.json()["completionPercentage"] == 100
    assert done.json()["completedAt"] is not None

    certificates = client.get("/api/certificates", headers=auth_headers).json()
    assert len(certificates) == 1
    certificate = certificates[0]
    assert certificate["courseName"] == "Async Python"
    assert certificate["userName"] == "Ada Owner"
    assert certificate["verificationCode"].startswith("CERT-")

    duplicate = client.post(f"/api/courses/{course['id']}/certificate", headers=auth_headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "CERTIFICATE_ALREADY_EXISTS"

    verified = client.get(
        f"/api/certificates/verify/{certificate['verificationCode']}", headers=auth_headers
    )
    assert verified.json()["isValid"] is True
    assert verified.json()["certificate"]["id"] == certificate["id"]

    pdf = client.get(f"/api/certificates/{certificate['id']}/pdf", headers=auth_headers)
    assert pdf.status_code == 200
    assert pdf.headers["content-type"] == "application/pdf"
    assert pdf.content.startswith(b"%PDF")


def test_mark_complete_on_existing_progress(client, auth_headers, course):
    first = create_lesson(client, auth_headers, course["id"]).json()
    second = create_lesson(client, auth_headers, course["id"], title="Cancellation").json()
    third = create_lesson(client, auth_headers, course["id"], title="Timeouts").json()
    progress = client.post(
        f"/api/courses/{course['id']}/progress",
        headers=auth_headers,
        json={"lessonId": first["id"]},
    ).json()

    response = client.post(
        f"/api/progress/{progress['id']}/complete",
        headers=auth_headers,
        json={"lessonId": second["id"]},
    )
    assert response.status_code == 200
    assert set(response.json()["completedLessonIds"]) == {first["id"], second["id"]}
    assert response.json()["completionPercentage"] == 67
    assert third["id"] not in response.json()["completedLessonIds"]


def test_verify_unknown_code(client, auth_headers):
    response = client.get("/api/certificates/verify/CERT-ZZZZ9999", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"isValid": False, "certificate": None}


def test_verify_malformed_code(client, auth_headers):
    response = client.get("/api/certificates/verify/not-a-code", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_VERIFICATION_CODE"
