# tests/conftest.py
import os

# must be set before talent96 settings are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from talent96.auth.otp import OtpStore, get_email_otp_store, get_reset_otp_store
from talent96.db.base import Base, import_models
from talent96.db.session import get_db, make_engine
from talent96.main import app
from talent96.services.mailer import EmailDeliveryError, Mailer, get_mailer
from talent96.services.realtime import NotificationHub, get_hub


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingMailer(Mailer):
    """Keeps every message and the last code sent to each address."""

    def __init__(self):
        super().__init__(host="", sender="test@talent96.local")
        self.sent = []
        self.codes = {}
        self.fail = False

    def send(self, to_email, subject, html):
        if self.fail:
            raise EmailDeliveryError("smtp down")
        self.sent.append((to_email, subject))
        return True

    def send_otp_email(self, to_email, otp):
        self.codes[to_email] = otp
        return super().send_otp_email(to_email, otp)

    def send_password_reset_code_email(self, to_email, code):
        self.codes[to_email] = code
        return super().send_password_reset_code_email(to_email, code)


class RecordingHub(NotificationHub):
    def __init__(self):
        super().__init__()
        self.pushed = []

    async def push(self, user_id, payload, event="new_notification"):
        self.pushed.append((user_id, event, payload))
        return 1


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    import_models()
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def reset_store(clock):
    return OtpStore(ttl_seconds=180, clock=clock)


@pytest.fixture
def email_store(clock):
    return OtpStore(ttl_seconds=180, clock=clock)


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def hub():
    return RecordingHub()


@pytest.fixture
def client(session_factory, mailer, hub, reset_store, email_store):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_hub] = lambda: hub
    app.dependency_overrides[get_reset_otp_store] = lambda: reset_store
    app.dependency_overrides[get_email_otp_store] = lambda: email_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def signup(client):
    """Register then log in; returns (token, login body)."""
    def _signup(email, role="jobSeeker", password="secret123", **fields):
        r = client.post("/api/auth/register", json={"email": email, "password": password, "role": role, **fields})
        assert r.status_code == 201, r.text
        r = client.post("/api/auth/login", json={"email": email, "password": password, "role": role})
        assert r.status_code == 200, r.text
        body = r.json()
        return body["token"], body
    return _signup


@pytest.fixture
def seeker(signup):
    token, body = signup(
        "seeker@example.com",
        fullName="Asha Rao",
        resume="https://files.example.com/asha.pdf",
        profileImage="https://img.example.com/asha.png",
    )
    return token, body["user"]["id"]


@pytest.fixture
def recruiter(signup):
    token, body = signup(
        "hr@acme.com",
        role="recruiter",
        fullName="Ravi Kumar",
        companyName="Acme",
        companyWebsite="https://acme.example.com",
    )
    return token, body["user"]["id"]


@pytest.fixture
def post_job(client):
    def _post_job(token, **overrides):
        job = {
            "jobTitle": "Backend Developer",
            "companyName": "Acme",
            "salary": "10 LPA",
            "experience": "2 years",
            "location": "Bengaluru",
            "description": "Build APIs",
            "jobType": "Full-time",
            "skills": ["Python"],
            "openings": 2,
        }
        job.update(overrides)
        r = client.post("/api/recruiters/create", json=job, headers=auth(token))
        assert r.status_code == 201, r.text
        return r.json()["job"]["id"]
    return _post_job
