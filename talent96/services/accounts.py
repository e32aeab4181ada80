# talent96/services/accounts.py
"""
Registration, login, password changes and the OTP-gated flows.

Passwords are bcrypt hashes; sessions are JWTs carrying ``{id, role}``.
Reset codes are checked again at the final reset step and only spent
there; email-verification codes are spent as soon as they verify.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from talent96.auth.jwt import create_access_token, get_password_hash, verify_password
from talent96.auth.otp import OtpStatus, OtpStore, generate_otp, normalize_email
from talent96.core.errors import (
    ConflictError, ForbiddenError, InvalidInputError, NotFoundError, OtpError,
    ServerError, UnauthorizedError,
)
from talent96.models.account import (
    Account, PendingRegistration, ROLE_JOB_SEEKER, ROLE_RECRUITER,
)
from talent96.models.recruiter import RecruiterProfile
from talent96.models.seeker import JobSeekerProfile
from talent96.schemas.auth import RegisterIn
from talent96.services.mailer import EmailDeliveryError, Mailer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def find_account(db: Session, email: str) -> Account | None:
    return db.execute(
        select(Account).where(Account.email == normalize_email(email))
    ).scalars().first()


def profile_for(db: Session, account: Account) -> JobSeekerProfile | RecruiterProfile | None:
    """The role-specific profile, or None for roles without one."""
    if account.role == ROLE_JOB_SEEKER:
        model = JobSeekerProfile
    elif account.role == ROLE_RECRUITER:
        model = RecruiterProfile
    else:
        return None
    return db.execute(select(model).where(model.user_id == account.id)).scalars().first()


def register(db: Session, data: RegisterIn) -> Account:
    """Create the account, its profile and drop any pending marker in one commit."""
    email = normalize_email(data.email)
    if find_account(db, email):
        raise ConflictError("Email already registered")

    account = Account(
        email=email,
        hashed_password=get_password_hash(data.password),
        role=data.role,
    )
    db.add(account)
    db.flush()  # get account.id

    if data.role == ROLE_JOB_SEEKER:
        db.add(JobSeekerProfile(
            user_id=account.id,
            full_name=data.full_name,
            mobile_number=data.mobile_number,
            resume=data.resume,
            profile_image=data.profile_image,
        ))
    elif data.role == ROLE_RECRUITER:
        db.add(RecruiterProfile(
            user_id=account.id,
            full_name=data.full_name,
            phone_number=data.mobile_number,
            company_name=data.company_name,
            company_website=data.company_website,
        ))

    db.execute(delete(PendingRegistration).where(PendingRegistration.email == email))
    db.commit()
    db.refresh(account)
    logger.info(f"Registered {account.role} account {account.id}")
    return account


def record_pending(db: Session, email: str) -> bool:
    """Remember an unregistered email once. Returns True if a marker was added."""
    email = normalize_email(email)
    if not email:
        return False
    exists = db.execute(
        select(PendingRegistration.id).where(PendingRegistration.email == email)
    ).scalar()
    if exists:
        return False
    db.add(PendingRegistration(email=email))
    db.commit()
    logger.info(f"New unregistered visitor: {email}")
    return True


def login(db: Session, email: str, password: str, role: str):
    """Returns ``(token, account, profile)``."""
    account = find_account(db, email)
    if account is None:
        record_pending(db, email)
        raise InvalidInputError(INVALID_CREDENTIALS)

    if not verify_password(password, account.hashed_password):
        raise InvalidInputError(INVALID_CREDENTIALS)

    if account.role != role:
        raise ForbiddenError(f"You are not registered as a {role}")

    profile = profile_for(db, account)
    if profile is None and role in (ROLE_JOB_SEEKER, ROLE_RECRUITER):
        label = "Jobseeker" if role == ROLE_JOB_SEEKER else "Recruiter"
        raise NotFoundError(f"{label} profile not found")

    token = create_access_token(account.id, account.role)
    return token, account, profile


def _notify_password_changed(mailer: Mailer, account: Account, name: str | None) -> None:
    # the password is already saved; a mail failure must not undo or fail that
    try:
        mailer.send_password_change_email(account.email, name)
    except EmailDeliveryError:
        logger.exception(f"Password change email failed for account {account.id}")


def _full_name(db: Session, account: Account) -> str | None:
    profile = profile_for(db, account)
    return getattr(profile, "full_name", None)


def change_password(
    db: Session,
    account_id: int,
    current_password: str | None,
    new_password: str | None,
    mailer: Mailer,
) -> None:
    if not current_password or not new_password:
        raise InvalidInputError("Both current and new passwords are required")

    account = db.get(Account, account_id)
    if account is None:
        raise NotFoundError("User not found")
    if not verify_password(current_password, account.hashed_password):
        raise UnauthorizedError("Incorrect current password")

    account.hashed_password = get_password_hash(new_password)
    db.commit()
    logger.info(f"Password changed for account {account.id}")
    _notify_password_changed(mailer, account, _full_name(db, account))


# ---------- forgot password ----------
def send_reset_otp(db: Session, email: str | None, mailer: Mailer, store: OtpStore) -> None:
    account = find_account(db, email or "")
    if account is None:
        raise NotFoundError("User not found")

    code = generate_otp()
    try:
        mailer.send_password_reset_code_email(account.email, code)
    except EmailDeliveryError:
        logger.exception(f"Failed to send reset OTP to account {account.id}")
        raise ServerError("Failed to send OTP")
    store.issue(account.email, code)


def _reject_unless_ok(email: str | None, result: OtpStatus) -> None:
    if result is not OtpStatus.OK:
        logger.info(f"OTP rejected for {normalize_email(email)}: {result.value}")
        raise OtpError()


def check_otp(store: OtpStore, email: str | None, otp: str | None) -> None:
    _reject_unless_ok(email, store.check(email or "", otp))


def take_otp(store: OtpStore, email: str | None, otp: str | None) -> None:
    """Like ``check_otp`` but spends the code, so it passes at most once."""
    _reject_unless_ok(email, store.take(email or "", otp))


def reset_password(
    db: Session,
    email: str | None,
    otp: str | None,
    new_password: str,
    mailer: Mailer,
    store: OtpStore,
) -> None:
    take_otp(store, email, otp)

    account = find_account(db, email or "")
    if account is None:
        raise NotFoundError("User not found")

    account.hashed_password = get_password_hash(new_password)
    db.commit()
    logger.info(f"Password reset for account {account.id}")
    _notify_password_changed(mailer, account, _full_name(db, account))


# ---------- email verification ----------
def send_email_otp(email: str | None, mailer: Mailer, store: OtpStore) -> None:
    email = normalize_email(email)
    if not email:
        raise InvalidInputError("Email is required")

    code = generate_otp()
    try:
        mailer.send_otp_email(email, code)
    except EmailDeliveryError:
        logger.exception(f"Failed to send verification OTP to {email}")
        raise ServerError("Could not send OTP")
    store.issue(email, code)


def verify_email_otp(
    db: Session,
    account_id: int,
    email: str | None,
    otp: str | None,
    store: OtpStore,
) -> None:
    if not email or not otp:
        raise InvalidInputError("Email and OTP are required")
    take_otp(store, email, otp)

    account = db.get(Account, account_id)
    if account is None:
        raise NotFoundError("User not found")

    profile = profile_for(db, account)
    if profile is not None:
        profile.email_verified = True
    db.commit()
    logger.info(f"Email verified for account {account.id}")
