# talent96/services/mailer.py
import logging
import smtplib
from datetime import datetime
from email.mime.text import MIMEText
from email.utils import parseaddr

from talent96.core.config import settings


class EmailDeliveryError(Exception):
    pass


class Mailer:
    """SMTP sender. Without SMTP_HOST it only logs what it would have sent."""

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        user: str | None = None,
        password: str | None = None,
        sender: str | None = None,
    ):
        self.host = settings.SMTP_HOST if host is None else host
        self.port = port or settings.SMTP_PORT
        self.user = settings.SMTP_USER if user is None else user
        self.password = settings.SMTP_PASS if password is None else password
        self.sender = sender or settings.MAIL_FROM
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def configured(self) -> bool:
        return bool(self.host)

    def send(self, to_email: str, subject: str, html: str) -> bool:
        """Send one HTML message. Returns False when delivery is disabled."""
        if not self.configured:
            self.logger.info(f"SMTP not configured; skipping '{subject}' to {to_email}")
            return False

        msg = MIMEText(html, "html")
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = to_email
        try:
            with smtplib.SMTP(self.host, self.port, timeout=20) as server:
                server.starttls()
                if self.user:
                    server.login(self.user, self.password)
                server.sendmail(parseaddr(self.sender)[1], [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"Failed to send '{subject}' to {to_email}: {e}") from e

        self.logger.info(f"Sent '{subject}' to {to_email}")
        return True

    # ---------- templates ----------
    def send_otp_email(self, to_email: str, otp: str) -> bool:
        minutes = settings.OTP_TTL_SECONDS // 60
        html = (
            "<h2>Email Verification</h2>"
            "<p>Thank you for using <strong>Talent96</strong>.</p>"
            f"<p>Your OTP is:</p><h1>{otp}</h1>"
            f"<p>This OTP is valid for <strong>{minutes} minutes</strong>.</p>"
            "<p>If you did not request this, please ignore this email.</p>"
        )
        return self.send(to_email, "Your Email Verification OTP", html)

    def send_password_reset_code_email(self, to_email: str, code: str) -> bool:
        minutes = settings.OTP_TTL_SECONDS // 60
        html = (
            "<h2>Password Reset Request</h2>"
            "<p>We received a request to reset your password. Use the code below to reset it:</p>"
            f"<h1>{code}</h1>"
            f"<p>This code will expire in <strong>{minutes} minutes</strong>.</p>"
            "<p>If you didn't request this, please ignore the email.</p>"
        )
        return self.send(to_email, "Reset Your Password - Code Inside", html)

    def send_password_change_email(self, to_email: str, name: str | None = None) -> bool:
        html = (
            "<h2>Password Change Notification</h2>"
            f"<p>Dear <strong>{name or 'User'}</strong>,</p>"
            "<p>Your account password was changed successfully.</p>"
            "<p>If this was not you, please contact support@talent96.com immediately.</p>"
            f"<p>&copy; {datetime.now().year} Talent96. All rights reserved.</p>"
        )
        return self.send(to_email, "Password Changed Successfully", html)


_mailer = Mailer()

def get_mailer() -> Mailer:
    """FastAPI dependency; tests override it with a recording fake."""
    return _mailer
