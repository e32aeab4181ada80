from datetime import datetime, timezone
from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def utcnow() -> datetime:
    """Naive UTC timestamp, the shape SQLite hands back on read."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# --- IMPORT ALL MODELS so create_all sees every table ---
def import_models() -> None:
    from talent96.models import account, seeker, recruiter, notification  # noqa: F401
