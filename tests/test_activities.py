# tests/test_activities.py
from conftest import auth


def test_summary_counts(client, seeker, recruiter, post_job):
    rtoken, _ = recruiter
    stoken, _ = seeker
    job_id = post_job(rtoken, jobTitle="Data Analyst")
    client.post(f"/api/recruiters/{job_id}/apply", json={"address": "Pune"}, headers=auth(stoken))

    body = client.get("/api/activities/summary").json()
    assert body["recruiters"] == 1
    assert body["jobSeekers"] == 1
    assert body["jobPosts"] == 1
    assert body["totalApplications"] == 1
    assert body["activeRecruiters"] == 1
    assert body["latestJob"]["jobTitle"] == "Data Analyst"
    assert body["latestJob"]["recruiter"] == "Ravi Kumar"


def test_summary_without_posts(client):
    body = client.get("/api/activities/summary").json()
    assert body["jobPosts"] == 0
    assert body["latestJob"] is None


def test_recent_registrations(client, seeker, recruiter):
    rows = client.get("/api/activities").json()
    assert {r["userName"] for r in rows} == {"seeker@example.com", "hr@acme.com"}
    assert all(r["action"] == "Registered" for r in rows)
