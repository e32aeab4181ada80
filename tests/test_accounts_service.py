# tests/test_accounts_service.py
import pytest
from sqlalchemy import select

from talent96.core.errors import ConflictError, OtpError
from talent96.models.account import Account, PendingRegistration
from talent96.schemas.auth import RegisterIn
from talent96.services import accounts


def test_failed_profile_creation_rolls_back_account(db, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("profile insert failed")

    monkeypatch.setattr(accounts, "JobSeekerProfile", boom)
    with pytest.raises(RuntimeError):
        accounts.register(db, RegisterIn(email="atomic@example.com", password="p", role="jobSeeker"))
    db.rollback()
    assert db.execute(select(Account)).scalars().all() == []


def test_admin_gets_no_profile(db):
    account = accounts.register(db, RegisterIn(email="root@example.com", password="p", role="admin"))
    assert accounts.profile_for(db, account) is None
    token, _, profile = accounts.login(db, "root@example.com", "p", "admin")
    assert token and profile is None


def test_register_is_case_insensitive_on_email(db):
    accounts.register(db, RegisterIn(email="Mixed@Example.com", password="p", role="recruiter"))
    with pytest.raises(ConflictError):
        accounts.register(db, RegisterIn(email="mixed@example.com", password="p", role="jobSeeker"))


def test_record_pending_once(db):
    assert accounts.record_pending(db, " New@Example.com ") is True
    assert accounts.record_pending(db, "new@example.com") is False
    assert accounts.record_pending(db, "") is False
    assert len(db.execute(select(PendingRegistration)).scalars().all()) == 1


def test_check_otp_maps_every_failure_to_one_error(reset_store, clock):
    with pytest.raises(OtpError):
        accounts.check_otp(reset_store, "x@example.com", "000000")
    reset_store.issue("x@example.com", "123456")
    with pytest.raises(OtpError):
        accounts.check_otp(reset_store, "x@example.com", "000000")
    clock.advance(500)
    with pytest.raises(OtpError) as e:
        accounts.check_otp(reset_store, "x@example.com", "123456")
    assert e.value.detail == "Invalid or expired OTP"
    assert e.value.status_code == 400


def test_reset_code_is_spent_by_the_first_reset(db, mailer, reset_store):
    accounts.register(db, RegisterIn(email="once@example.com", password="old", role="jobSeeker"))
    reset_store.issue("once@example.com", "424242")

    accounts.reset_password(db, "once@example.com", "424242", "first", mailer, reset_store)
    with pytest.raises(OtpError):
        accounts.reset_password(db, "once@example.com", "424242", "second", mailer, reset_store)

    token, _, _ = accounts.login(db, "once@example.com", "first", "jobSeeker")
    assert token
