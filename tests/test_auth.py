# tests/test_auth.py
from sqlalchemy import select

from conftest import auth
from talent96.auth.jwt import decode_access_token
from talent96.models.account import Account, PendingRegistration
from talent96.models.seeker import JobSeekerProfile


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/status").status_code == 200


def test_register_then_login_returns_profile(client):
    r = client.post("/api/auth/register", json={
        "email": "A@X.com", "password": "p1", "role": "jobSeeker", "fullName": "A",
    })
    assert r.status_code == 201

    r = client.post("/api/auth/login", json={"email": "a@x.com", "password": "p1", "role": "jobSeeker"})
    assert r.status_code == 200
    body = r.json()
    assert body["profile"]["fullName"] == "A"
    assert body["user"]["email"] == "a@x.com"
    claims = decode_access_token(body["token"])
    assert claims["id"] == body["user"]["id"]
    assert claims["role"] == "jobSeeker"
    assert "exp" not in claims


def test_register_creates_exactly_one_profile(client, db):
    client.post("/api/auth/register", json={"email": "s@x.com", "password": "p", "role": "jobSeeker"})
    account = db.execute(select(Account).where(Account.email == "s@x.com")).scalar_one()
    profiles = db.execute(select(JobSeekerProfile).where(JobSeekerProfile.user_id == account.id)).scalars().all()
    assert len(profiles) == 1
    assert account.hashed_password.startswith("$2")


def test_duplicate_registration_conflicts(client):
    payload = {"email": "dup@x.com", "password": "p", "role": "recruiter"}
    assert client.post("/api/auth/register", json=payload).status_code == 201
    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 409
    assert r.json()["detail"] == "Email already registered"


def test_login_unknown_email_records_single_pending_marker(client, db):
    for _ in range(2):
        r = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "p", "role": "jobSeeker"})
        assert r.status_code == 400
        assert r.json()["detail"] == "Invalid email or password"
    markers = db.execute(select(PendingRegistration).where(PendingRegistration.email == "ghost@x.com")).scalars().all()
    assert len(markers) == 1


def test_registration_clears_pending_marker(client, db):
    client.post("/api/auth/login", json={"email": "late@x.com", "password": "p", "role": "jobSeeker"})
    client.post("/api/auth/register", json={"email": "late@x.com", "password": "p", "role": "jobSeeker"})
    assert db.execute(select(PendingRegistration)).scalars().all() == []


def test_login_wrong_password_and_wrong_role(client, signup):
    signup("r@x.com", role="recruiter", password="right")
    r = client.post("/api/auth/login", json={"email": "r@x.com", "password": "wrong", "role": "recruiter"})
    assert r.status_code == 400
    r = client.post("/api/auth/login", json={"email": "r@x.com", "password": "right", "role": "jobSeeker"})
    assert r.status_code == 403


def test_protected_route_token_errors(client):
    r = client.post("/api/users/userdata")
    assert r.status_code == 401
    assert r.json()["detail"] == "No token, authorization denied"
    r = client.post("/api/users/userdata", headers=auth("not-a-token"))
    assert r.status_code == 403
    assert r.json()["detail"] == "Invalid token"


def test_change_password(client, signup, mailer):
    token, _ = signup("c@x.com", password="old", fullName="Cee")
    r = client.post("/api/auth/change-password", json={"currentPassword": "bad", "newPassword": "new"}, headers=auth(token))
    assert r.status_code == 401
    r = client.post("/api/auth/change-password", json={"currentPassword": "old"}, headers=auth(token))
    assert r.status_code == 400

    r = client.post("/api/auth/change-password", json={"currentPassword": "old", "newPassword": "new"}, headers=auth(token))
    assert r.status_code == 200
    assert ("c@x.com", "Password Changed Successfully") in mailer.sent
    r = client.post("/api/auth/login", json={"email": "c@x.com", "password": "new", "role": "jobSeeker"})
    assert r.status_code == 200


def test_change_password_survives_mail_failure(client, signup, mailer):
    token, _ = signup("m@x.com", password="old")
    mailer.fail = True
    r = client.post("/api/auth/change-password", json={"currentPassword": "old", "newPassword": "new"}, headers=auth(token))
    assert r.status_code == 200
    mailer.fail = False
    r = client.post("/api/auth/login", json={"email": "m@x.com", "password": "new", "role": "jobSeeker"})
    assert r.status_code == 200


class TestForgotPassword:
    def test_full_reset_flow(self, client, signup, mailer, reset_store):
        signup("f@x.com", password="old")
        assert client.post("/api/auth/forgot-password/send-otp", json={"email": "f@x.com"}).status_code == 200
        code = mailer.codes["f@x.com"]

        # verifying does not spend the code
        for _ in range(2):
            r = client.post("/api/auth/forgot-password/verify-otp", json={"email": "f@x.com", "otp": code})
            assert r.status_code == 200

        r = client.post("/api/auth/forgot-password/reset", json={"email": "f@x.com", "otp": code, "newPassword": "fresh"})
        assert r.status_code == 200
        assert "f@x.com" not in reset_store

        r = client.post("/api/auth/forgot-password/reset", json={"email": "f@x.com", "otp": code, "newPassword": "again"})
        assert r.status_code == 400
        assert r.json()["detail"] == "Invalid or expired OTP"

        r = client.post("/api/auth/login", json={"email": "f@x.com", "password": "fresh", "role": "jobSeeker"})
        assert r.status_code == 200

    def test_unknown_email(self, client):
        r = client.post("/api/auth/forgot-password/send-otp", json={"email": "nobody@x.com"})
        assert r.status_code == 404

    def test_expired_code_rejected(self, client, signup, mailer, clock):
        signup("e@x.com")
        client.post("/api/auth/forgot-password/send-otp", json={"email": "e@x.com"})
        clock.advance(181)
        r = client.post("/api/auth/forgot-password/verify-otp", json={"email": "e@x.com", "otp": mailer.codes["e@x.com"]})
        assert r.status_code == 400

    def test_mail_failure_stores_nothing(self, client, signup, mailer, reset_store):
        signup("d@x.com")
        mailer.fail = True
        r = client.post("/api/auth/forgot-password/send-otp", json={"email": "d@x.com"})
        assert r.status_code == 500
        assert "d@x.com" not in reset_store


class TestEmailVerification:
    def test_verify_sets_flag_and_consumes(self, client, signup, mailer, email_store):
        token, body = signup("v@x.com")
        user_id = body["user"]["id"]
        assert client.post("/api/verify/send-email-otp", json={"email": "v@x.com"}).status_code == 200
        code = mailer.codes["v@x.com"]

        r = client.post("/api/verify/verify-email-otp", json={"email": "v@x.com", "otp": code}, headers=auth(token))
        assert r.status_code == 200
        assert "v@x.com" not in email_store
        assert client.get(f"/api/users/check-email-verified/{user_id}").json() == {"verified": True}

        r = client.post("/api/verify/verify-email-otp", json={"email": "v@x.com", "otp": code}, headers=auth(token))
        assert r.status_code == 400

    def test_missing_fields(self, client, signup):
        token, _ = signup("w@x.com")
        assert client.post("/api/verify/send-email-otp", json={}).status_code == 400
        r = client.post("/api/verify/verify-email-otp", json={"email": "w@x.com"}, headers=auth(token))
        assert r.status_code == 400

    def test_requires_token(self, client):
        r = client.post("/api/verify/verify-email-otp", json={"email": "w@x.com", "otp": "123456"})
        assert r.status_code == 401

    def test_stores_are_independent(self, client, signup, mailer, reset_store, email_store):
        signup("i@x.com")
        client.post("/api/verify/send-email-otp", json={"email": "i@x.com"})
        assert "i@x.com" in email_store
        assert "i@x.com" not in reset_store
