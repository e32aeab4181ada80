# tests/test_profiles.py
from conftest import auth


def test_userdata_and_userdetails(client, seeker):
    token, user_id = seeker
    data = client.post("/api/users/userdata", headers=auth(token)).json()
    assert data["fullName"] == "Asha Rao"
    assert data["employmentDetailsList"] == []
    assert data["savedJobs"] == []

    details = client.post("/api/users/userdetails", headers=auth(token)).json()
    assert details == {
        "id": user_id,
        "fullName": "Asha Rao",
        "resume": "https://files.example.com/asha.pdf",
        "address": "",
        "email": "seeker@example.com",
        "profileImage": "https://img.example.com/asha.png",
    }


def test_recruiter_has_no_seeker_profile(client, recruiter):
    token, _ = recruiter
    assert client.post("/api/users/userdata", headers=auth(token)).status_code == 404


def test_update_basic_keeps_notice_end_only_while_serving(client, seeker):
    token, _ = seeker
    body = {"location": "Pune", "experiences": 3, "noticePeriod": "30 days", "noticeEndDate": "2025-01-01"}
    r = client.put("/api/users/update-basic", json=body, headers=auth(token))
    assert r.json()["user"]["basicDetails"]["noticeEndDate"] is None

    body["currentlyServingNotice"] = True
    r = client.put("/api/users/update-basic", json=body, headers=auth(token))
    assert r.json()["user"]["basicDetails"]["noticeEndDate"] == "2025-01-01"

    basic = client.get("/api/users/basic-details", headers=auth(token)).json()["user"]
    assert basic["basicDetails"]["location"] == "Pune"


def test_update_personal_and_professional(client, seeker):
    token, _ = seeker
    r = client.put("/api/users/update-personal", json={"address": "Pune", "disability": "yes", "languages": ["en"]}, headers=auth(token))
    assert r.json()["user"]["personalDetails"]["isDisabled"] is True
    r = client.put("/api/users/update-professional", json={"designation": "Engineer"}, headers=auth(token))
    assert r.json()["user"]["professionalDetails"] == {"currentIndustry": "", "department": "", "designation": "Engineer"}

    seekers = client.get("/api/users/all", headers=auth(token)).json()
    assert seekers[0]["designation"] == "Engineer"


def test_update_skills_and_roles(client, seeker):
    token, _ = seeker
    r = client.put("/api/users/update-skills", json={"skills": ["Python", {"name": "SQL"}]}, headers=auth(token))
    assert r.json()["user"]["skills"] == ["Python", {"name": "SQL"}]
    r = client.put("/api/users/update-roles", json={"summaries": "not a list"}, headers=auth(token))
    assert r.status_code == 400
    r = client.put("/api/users/update-roles", json={"summaries": [{"role": "Lead"}]}, headers=auth(token))
    assert r.json()["user"]["rolesSummaries"] == [{"role": "Lead"}]


def test_education_lifecycle(client, seeker):
    token, user_id = seeker
    r = client.post("/api/users/add-education", json={"qualification": "10th", "board": "CBSE", "percentage": 91.5}, headers=auth(token))
    assert r.status_code == 201
    edu = r.json()["education"]
    assert edu["percentage"] == "91.5"

    r = client.put("/api/users/update-education", json={"id": edu["id"], "qualification": "12th"}, headers=auth(token))
    assert r.json()["education"]["qualification"] == "12th"
    assert r.json()["education"]["board"] is None

    r = client.put("/api/users/update-education", json={"id": 999}, headers=auth(token))
    assert r.status_code == 404

    r = client.delete(f"/api/users/education/{user_id}/{edu['id']}", headers=auth(token))
    assert r.json()["profile"]["education"] == []


def test_employment_lifecycle(client, seeker, signup):
    token, user_id = seeker
    r = client.post("/api/users/add-employment", json={"company": "Acme", "jobTitle": "Dev", "experience": 2}, headers=auth(token))
    emp = r.json()["employment"]
    assert emp["experience"] == "2"

    r = client.put("/api/users/update-employment", json={"id": emp["id"], "company": "Beta"}, headers=auth(token))
    assert r.json()["employment"]["company"] == "Beta"

    intruder, _ = signup("intruder@example.com")
    r = client.delete(f"/api/users/employment/{user_id}/{emp['id']}", headers=auth(intruder))
    assert r.status_code == 403

    r = client.delete(f"/api/users/employment/{user_id}/{emp['id']}", headers=auth(token))
    assert r.json()["profile"]["employmentDetailsList"] == []


def test_settings_never_exposes_password(client, seeker):
    token, _ = seeker
    body = client.post("/api/users/settings", headers=auth(token)).json()
    assert body == {"email": "seeker@example.com", "mobileNumber": None, "emailVerified": False, "mobileVerified": False}


def test_recruiter_profile(client, recruiter):
    token, user_id = recruiter
    profile = client.get("/api/recruiters/profile", headers=auth(token)).json()
    assert profile["email"] == "hr@acme.com"
    assert profile["companyName"] == "Acme"
    assert profile["profileImage"].startswith("https://")

    r = client.put("/api/recruiters/update-data", json={"companyWebsite": "https://acme.io"}, headers=auth(token))
    assert r.json()["profile"]["companyWebsite"] == "https://acme.io"
    assert r.json()["profile"]["companyName"] == "Acme"

    r = client.get(f"/api/recruiters/check-email-verified/{user_id}", headers=auth(token))
    assert r.json() == {"verified": False}
