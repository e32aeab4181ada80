from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String, Integer, Boolean, DateTime, Text, JSON, ForeignKey, UniqueConstraint,
)
from talent96.db.base import Base, utcnow

DEFAULT_RECRUITER_IMAGE = (
    "https://www.shutterstock.com/image-vector/"
    "default-avatar-profile-icon-social-600nw-1677509740.jpg"
)

STATUS_APPLIED = "applied"
STATUS_SHORTLIST = "shortlist"
STATUS_MAYBE = "maybe"
STATUS_REJECT = "reject"
DECISION_STATUSES = (STATUS_SHORTLIST, STATUS_MAYBE, STATUS_REJECT)


class RecruiterProfile(Base):
    __tablename__ = "recruiter_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    full_name: Mapped[str | None] = mapped_column(String(255))
    phone_number: Mapped[str | None] = mapped_column(String(32))
    email_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    profile_image: Mapped[str] = mapped_column(String(1024), default=DEFAULT_RECRUITER_IMAGE)
    company_name: Mapped[str | None] = mapped_column(String(255))
    company_website: Mapped[str | None] = mapped_column(String(1024))
    company_logo: Mapped[str | None] = mapped_column(String(1024))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    account = relationship("Account")
    job_posts = relationship(
        "JobPost",
        back_populates="recruiter",
        cascade="all, delete-orphan",
        order_by="JobPost.id",
    )


class JobPost(Base):
    __tablename__ = "job_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    recruiter_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("recruiter_profiles.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_logo: Mapped[str] = mapped_column(String(1024), default="")
    salary: Mapped[str] = mapped_column(String(128), nullable=False)
    experience: Mapped[str] = mapped_column(String(128), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    job_type: Mapped[str] = mapped_column(String(32), default="Full-time")
    remote: Mapped[bool] = mapped_column(Boolean, default=False)
    skills: Mapped[list] = mapped_column(JSON, default=list)
    recruiter_email: Mapped[str] = mapped_column(String(255), nullable=False)
    openings: Mapped[int] = mapped_column(Integer, default=1)
    posted_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    recruiter = relationship("RecruiterProfile", back_populates="job_posts")
    applicants = relationship(
        "Applicant",
        back_populates="job_post",
        cascade="all, delete-orphan",
        order_by="Applicant.id",
    )


class Applicant(Base):
    __tablename__ = "applicants"
    __table_args__ = (UniqueConstraint("job_post_id", "user_id", name="uq_applicant_per_job"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    job_post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("job_posts.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255))
    resume: Mapped[str] = mapped_column(String(1024))
    address: Mapped[str] = mapped_column(String(1024))
    profile_image: Mapped[str] = mapped_column(String(1024))
    application_status: Mapped[str] = mapped_column(String(16), default=STATUS_APPLIED)
    applied_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    job_post = relationship("JobPost", back_populates="applicants")
