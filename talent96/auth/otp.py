# talent96/auth/otp.py
"""
One-time codes for password reset and email verification.

Codes live in process memory only: they do not survive a restart and are not
shared between backend instances. Each flow owns its own ``OtpStore``.
"""
import enum
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable

from talent96.core.config import settings

OTP_DIGITS = 6


class OtpStatus(enum.Enum):
    OK = "ok"
    MISSING = "missing"
    MISMATCH = "mismatch"
    EXPIRED = "expired"


@dataclass(frozen=True)
class OtpRecord:
    code: str
    expires_at: float


def generate_otp() -> str:
    """Six random decimal digits, zero-padded."""
    return f"{secrets.randbelow(10 ** OTP_DIGITS):0{OTP_DIGITS}d}"


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class OtpStore:
    """Keyed code store with per-entry expiry."""

    def __init__(self, ttl_seconds: int | None = None, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.OTP_TTL_SECONDS
        self.clock = clock
        self._records: dict[str, OtpRecord] = {}
        self._lock = threading.Lock()
        self.logger = logging.getLogger(self.__class__.__name__)

    def issue(self, email: str, code: str | None = None) -> str:
        """Store a fresh code for ``email``, replacing any pending one."""
        key = normalize_email(email)
        code = code or generate_otp()
        self.purge_expired()
        with self._lock:
            self._records[key] = OtpRecord(code=code, expires_at=self.clock() + self.ttl_seconds)
        self.logger.debug(f"Issued OTP for {key}")
        return code

    def _status(self, key: str, code: str | None) -> OtpStatus:
        # caller holds the lock
        record = self._records.get(key)
        if record is None:
            return OtpStatus.MISSING
        if self.clock() > record.expires_at:
            del self._records[key]
            return OtpStatus.EXPIRED
        if code is None or str(code).strip() != record.code:
            return OtpStatus.MISMATCH
        return OtpStatus.OK

    def check(self, email: str, code: str | None) -> OtpStatus:
        """Validate without consuming. Expired entries are evicted."""
        with self._lock:
            return self._status(normalize_email(email), code)

    def take(self, email: str, code: str | None) -> OtpStatus:
        """Validate and, on success, delete the code in the same step.

        Of several callers presenting the same code only one sees ``OK``.
        """
        key = normalize_email(email)
        with self._lock:
            status = self._status(key, code)
            if status is OtpStatus.OK:
                del self._records[key]
        return status

    def purge_expired(self) -> int:
        now = self.clock()
        with self._lock:
            stale = [k for k, r in self._records.items() if now > r.expires_at]
            for k in stale:
                del self._records[k]
        return len(stale)

    def __contains__(self, email: str) -> bool:
        with self._lock:
            return normalize_email(email) in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


# One store per flow
reset_otp_store = OtpStore()
email_otp_store = OtpStore()

def get_reset_otp_store() -> OtpStore:
    return reset_otp_store

def get_email_otp_store() -> OtpStore:
    return email_otp_store
