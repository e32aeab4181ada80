# talent96/api/verify_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talent96.auth.deps import CurrentUser, get_current_user
from talent96.auth.otp import OtpStore, get_email_otp_store
from talent96.db.session import get_db
from talent96.schemas.auth import EmailIn, MessageOut, OtpIn
from talent96.services import accounts
from talent96.services.mailer import Mailer, get_mailer

router = APIRouter(prefix="/api/verify", tags=["Verify"])

@router.post("/send-email-otp", response_model=MessageOut)
def send_email_otp(
    payload: EmailIn,
    mailer: Mailer = Depends(get_mailer),
    store: OtpStore = Depends(get_email_otp_store),
):
    accounts.send_email_otp(payload.email, mailer, store)
    return MessageOut(message="OTP sent to email")

@router.post("/verify-email-otp", response_model=MessageOut)
def verify_email_otp(
    payload: OtpIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    store: OtpStore = Depends(get_email_otp_store),
):
    accounts.verify_email_otp(db, user.id, payload.email, payload.otp, store)
    return MessageOut(message="Email verified successfully")
