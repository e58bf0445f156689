# -*- coding: utf-8 -*-
from hireloop.db.models import ContactRequest, Settings


def test_health(client):
    data = client.get("/api/health").json()
    assert data["status"] == "ok"
    assert data["timestamp"]


def test_templates_crud(client):
    created = client.post("/api/templates", json={
        "name": "Welcome", "subject": "Hi", "body": "Hello {{name}}", "category": "outreach",
    }).json()
    assert created["id"]
    assert created["name"] == "Welcome"

    resp = client.put(f"/api/templates/{created['id']}", json={"name": "Renamed"})
    assert resp.status_code == 400

    resp = client.put(f"/api/templates/{created['id']}", json={
        "name": "Renamed", "subject": "Hi", "body": "Hello", "category": "outreach",
    })
    assert resp.status_code == 200
    assert client.get("/api/templates").json()[0]["name"] == "Renamed"

    full = {"name": "a", "subject": "b", "body": "c", "category": "d"}
    assert client.put("/api/templates/missing", json=full).status_code == 404

    assert client.delete(f"/api/templates/{created['id']}").json() == {"success": True}
    assert client.get("/api/templates").json() == []


def test_settings_singleton_upsert(client, db):
    assert client.get("/api/settings").json() == {}

    assert client.post("/api/settings", json={"company_name": "Acme", "auto_reject_threshold": 40}).json() == {"success": True}
    first = client.get("/api/settings").json()
    assert first["auto_reject_threshold"] == "40"
    assert first["email_notifications"] is False
    assert first["website"] is None
    client.post("/api/settings", json={"company_name": "Acme Corp", "email_notifications": True})

    assert db.query(Settings).count() == 1
    data = client.get("/api/settings").json()
    assert data["company_name"] == "Acme Corp"
    assert data["email_notifications"] is True
    assert data["auto_reject_threshold"] is None


def test_integrations_merge_catalog_with_stored(client):
    listed = client.get("/api/integrations").json()
    assert [i["id"] for i in listed] == ["gmail", "slack", "zoom", "gcal"]
    assert {i["status"] for i in listed} == {"disconnected"}

    resp = client.post("/api/integrations", json={"id": "slack", "status": "connected"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Slack"

    client.post("/api/integrations", json={"id": "notion", "name": "Notion", "status": "connected"})

    listed = {i["id"]: i for i in client.get("/api/integrations").json()}
    assert listed["slack"]["status"] == "connected"
    assert listed["gmail"]["status"] == "disconnected"
    assert listed["notion"]["name"] == "Notion"

    client.post("/api/integrations", json={"id": "slack", "status": "disconnected"})
    listed = {i["id"]: i for i in client.get("/api/integrations").json()}
    assert listed["slack"]["status"] == "disconnected"


def test_integration_status_is_validated(client):
    resp = client.post("/api/integrations", json={"id": "zoom", "status": "pending"})
    assert resp.status_code == 400


def test_contact_request_is_stored(client, db):
    resp = client.post("/api/contact", json={
        "name": "Pat", "email": "pat@example.com", "message": "Demo please",
    })
    assert resp.json() == {"success": True}

    row = db.query(ContactRequest).one()
    assert row.company is None
    assert row.message == "Demo please"


def test_analytics_overview_and_pipeline_board(client, make_job, make_candidate):
    job = make_job(status="published")
    make_job()
    make_candidate(name="A", email="a@example.com", fit_score=60, jobId=job["id"])
    make_candidate(name="B", email="b@example.com", fit_score=90, jobId=job["id"])
    make_candidate(name="C", email="c@example.com", fit_score=75, stage="interview")

    overview = client.get("/api/analytics/overview").json()
    assert overview["totalCandidates"] == 3
    assert overview["activeJobs"] == 1
    assert overview["stageCounts"]["new"] == 2
    assert overview["stageCounts"]["interview"] == 1
    assert overview["sourceBreakdown"] == {"Manual Entry": 3}
    assert overview["averageFitScore"] == 75.0
    assert overview["pipelineHealth"]["score"] == 10
    assert len(overview["recentActivity"]) == 3

    board = client.get("/api/pipeline").json()["stages"]
    assert [col["stage"] for col in board] == ["new", "screening", "interview", "offer", "hired", "rejected"]
    assert [c["name"] for c in board[0]["candidates"]] == ["B", "A"]
    assert "resume_text" not in board[0]["candidates"][0]

    scoped = client.get("/api/pipeline", params={"job_id": job["id"]}).json()["stages"]
    assert sum(len(col["candidates"]) for col in scoped) == 2
