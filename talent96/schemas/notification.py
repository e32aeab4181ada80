# talent96/schemas/notification.py
from datetime import datetime
from pydantic import AliasChoices, Field

from talent96.schemas.base import CamelModel


class NotificationIn(CamelModel):
    type: str | None = None
    title: str | None = None
    message: str | None = None
    job_id: int | None = None
    metadata: dict = Field(default_factory=dict)
    company_name: str | None = None
    company_logo: str | None = None


class NotificationOut(CamelModel):
    id: int
    user_id: int
    type: str
    title: str
    message: str
    is_read: bool = False
    job_id: int | None = None
    meta_data: dict | None = Field(
        default=None,
        validation_alias=AliasChoices("meta_data", "metadata"),
        serialization_alias="metadata",
    )
    company_name: str | None = None
    company_logo: str | None = None
    created_at: datetime | None = None
