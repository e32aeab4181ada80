# talent96/auth/jwt.py
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from passlib.context import CryptContext
from talent96.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)
ALGORITHM = "HS256"

def create_access_token(account_id: int, role: str, expires_minutes: int | None = None) -> str:
    payload = {"id": account_id, "role": role}
    expire_delta = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    if expire_delta:
        payload["exp"] = datetime.now(tz=timezone.utc) + timedelta(minutes=expire_delta)
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> dict:
    """Return the token claims; raises JWTError on a bad signature, expiry or shape."""
    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    if "id" not in claims or "role" not in claims:
        raise JWTError("token is missing id/role claims")
    return claims

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
