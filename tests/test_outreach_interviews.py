# -*- coding: utf-8 -*-
import pytest


@pytest.fixture
def pair(make_job, make_candidate):
    job = make_job()
    cand = make_candidate(jobId=job["id"])
    return cand, job


def test_generate_email_returns_draft(client, pair, completions):
    cand, job = pair
    completions.queue({"subject": "Backend role", "body": "Hi Ada"})

    resp = client.post("/api/outreach/generate-email", json={"candidateId": cand["id"], "jobId": job["id"]})
    assert resp.status_code == 200
    assert resp.json() == {"subject": "Backend role", "body": "Hi Ada"}


def test_generate_email_unknown_ids_is_404(client, pair):
    cand, _ = pair
    resp = client.post("/api/outreach/generate-email", json={"candidateId": cand["id"], "jobId": "nope"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Candidate or Job not found"


def test_saved_email_defaults_and_status_timestamps(client, pair):
    cand, job = pair
    email = client.post("/api/outreach/emails", json={
        "candidateId": cand["id"], "jobId": job["id"], "subject": "Hello", "body": "Body",
    }).json()

    assert email["status"] == "sent"
    assert email["sequence_day"] == 0
    assert email["sent_at"] is not None
    assert email["opened_at"] is None

    opened = client.put(f"/api/outreach/emails/{email['id']}", json={"status": "opened"}).json()
    assert opened["opened_at"] is not None

    client.put(f"/api/outreach/emails/{email['id']}", json={"status": "sent"})
    reopened = client.put(f"/api/outreach/emails/{email['id']}", json={"status": "opened"}).json()
    assert reopened["opened_at"] == opened["opened_at"]

    replied = client.put(f"/api/outreach/emails/{email['id']}", json={"status": "replied"}).json()
    assert replied["replied_at"] is not None
    assert replied["status"] == "replied"


def test_list_emails_filtered_by_candidate(client, pair, make_candidate):
    cand, job = pair
    other = make_candidate(email="other@example.com")
    for who in (cand, other):
        client.post("/api/outreach/emails", json={
            "candidateId": who["id"], "jobId": job["id"], "subject": "S", "body": "B", "sequenceDay": 3,
        })

    assert len(client.get("/api/outreach/emails").json()) == 2
    mine = client.get("/api/outreach/emails", params={"candidate_id": cand["id"]}).json()
    assert len(mine) == 1
    assert mine[0]["sequence_day"] == 3


def test_update_missing_email_is_404(client):
    assert client.put("/api/outreach/emails/nope", json={"status": "opened"}).status_code == 404


def test_interview_lifecycle_with_evaluations(client, pair):
    cand, job = pair
    later = client.post("/api/interviews", json={
        "candidateId": cand["id"], "jobId": job["id"],
        "start_time": "2026-03-02T10:00:00Z", "end_time": "2026-03-02T11:00:00Z",
    }).json()
    earlier = client.post("/api/interviews", json={
        "candidateId": cand["id"],
        "start_time": "2026-03-01T10:00:00Z", "end_time": "2026-03-01T11:00:00Z",
        "video_link": "https://zoom.example/abc",
    }).json()

    assert later["status"] == "scheduled"
    assert earlier["job_id"] is None

    listed = client.get("/api/interviews", params={"candidate_id": cand["id"]}).json()
    assert [i["id"] for i in listed] == [earlier["id"], later["id"]]

    moved = client.put(f"/api/interviews/{later['id']}", json={"status": "completed"}).json()
    assert moved["status"] == "completed"
    assert moved["start_time"] == later["start_time"]

    assert client.post(f"/api/interviews/{later['id']}/evaluations", json={"question": "Why?"}).status_code == 400
    ev = client.post(f"/api/interviews/{later['id']}/evaluations", json={
        "question": "Design a cache", "criterion": "System design", "listenFor": "eviction", "rating": 4,
    }).json()
    assert ev["listen_for"] == "eviction"
    assert len(client.get(f"/api/interviews/{later['id']}/evaluations").json()) == 1

    assert client.delete(f"/api/interviews/{later['id']}").status_code == 200
    assert client.get(f"/api/interviews/{later['id']}/evaluations").status_code == 404
    assert client.delete(f"/api/interviews/{later['id']}").status_code == 404


def test_deleting_candidate_removes_interviews(client, pair, db):
    from hireloop.db.models import Interview

    cand, _ = pair
    client.post("/api/interviews", json={
        "candidateId": cand["id"], "start_time": "2026-03-01T10:00:00Z", "end_time": "2026-03-01T11:00:00Z",
    })
    client.delete(f"/api/candidates/{cand['id']}")
    assert db.query(Interview).count() == 0


def test_scorecards(client, pair):
    cand, job = pair
    created = client.post("/api/scorecards", json={
        "candidateId": cand["id"], "jobId": job["id"], "interviewerId": "u1",
        "stage": "interview", "scores": {"communication": 5}, "feedback": "Strong",
    }).json()

    assert created["candidateId"] == cand["id"]
    assert created["scores"] == {"communication": 5}
    assert created["id"]

    mine = client.get(f"/api/scorecards/{cand['id']}").json()
    assert len(mine) == 1
    assert mine[0]["scores"] == {"communication": 5}
    assert mine[0]["feedback"] == "Strong"

    assert len(client.get("/api/scorecards").json()) == 1
    assert client.get("/api/scorecards/someone-else").json() == []


def test_update_interview_with_null_required_field_is_400(client, pair):
    cand, _ = pair
    interview = client.post("/api/interviews", json={
        "candidateId": cand["id"], "start_time": "2026-03-01T10:00:00Z", "end_time": "2026-03-01T11:00:00Z",
    }).json()

    for field in ("start_time", "end_time", "status"):
        resp = client.put(f"/api/interviews/{interview['id']}", json={field: None})
        assert resp.status_code == 400, field

    resp = client.put(f"/api/interviews/{interview['id']}", json={"video_link": None})
    assert resp.status_code == 200
