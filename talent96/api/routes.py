# talent96/api/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talent96.auth.deps import CurrentUser, get_current_user
from talent96.auth.otp import OtpStore, get_reset_otp_store
from talent96.db.session import get_db
from talent96.models.recruiter import RecruiterProfile
from talent96.models.seeker import JobSeekerProfile
from talent96.schemas.auth import (
    ChangePasswordIn, EmailIn, LoginIn, LoginOut, MessageOut, OtpIn, RegisterIn, ResetPasswordIn,
)
from talent96.schemas.user import AccountOut, JobSeekerProfileOut, RecruiterProfileOut
from talent96.services import accounts
from talent96.services.mailer import Mailer, get_mailer

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/status")
def status():
    return {"message": "Server is running"}


auth_router = APIRouter(prefix="/api/auth", tags=["Auth"])


def serialize_profile(profile) -> dict | None:
    if isinstance(profile, JobSeekerProfile):
        return JobSeekerProfileOut.model_validate(profile).model_dump(mode="json", by_alias=True)
    if isinstance(profile, RecruiterProfile):
        return RecruiterProfileOut.model_validate(profile).model_dump(mode="json", by_alias=True)
    return None


@auth_router.post("/register", response_model=MessageOut, status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    """Create an account plus its role profile"""
    accounts.register(db, payload)
    return MessageOut(message="Registered successfully")

@auth_router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    """Authenticate and return a session token with the role profile"""
    token, account, profile = accounts.login(db, payload.email, payload.password, payload.role)
    return LoginOut(
        token=token,
        user=AccountOut.model_validate(account),
        profile=serialize_profile(profile),
    )

@auth_router.post("/change-password", response_model=MessageOut)
def change_password(
    payload: ChangePasswordIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
):
    accounts.change_password(db, user.id, payload.current_password, payload.new_password, mailer)
    return MessageOut(message="Password updated successfully")

@auth_router.post("/forgot-password/send-otp", response_model=MessageOut)
def forgot_password_send_otp(
    payload: EmailIn,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    store: OtpStore = Depends(get_reset_otp_store),
):
    accounts.send_reset_otp(db, payload.email, mailer, store)
    return MessageOut(message="OTP sent to your email")

@auth_router.post("/forgot-password/verify-otp", response_model=MessageOut)
def forgot_password_verify_otp(payload: OtpIn, store: OtpStore = Depends(get_reset_otp_store)):
    """Checks the code without spending it; /reset checks it again."""
    accounts.check_otp(store, payload.email, payload.otp)
    return MessageOut(message="OTP verified successfully")

@auth_router.post("/forgot-password/reset", response_model=MessageOut)
def forgot_password_reset(
    payload: ResetPasswordIn,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    store: OtpStore = Depends(get_reset_otp_store),
):
    accounts.reset_password(db, payload.email, payload.otp, payload.new_password, mailer, store)
    return MessageOut(message="Password has been reset successfully")
