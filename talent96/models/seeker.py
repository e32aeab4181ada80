from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String, Integer, Boolean, DateTime, JSON, ForeignKey, UniqueConstraint,
)
from talent96.db.base import Base, utcnow

DEFAULT_SEEKER_IMAGE = "https://randomuser.me/api/portraits"


class JobSeekerProfile(Base):
    __tablename__ = "job_seeker_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    full_name: Mapped[str | None] = mapped_column(String(255))
    mobile_number: Mapped[str | None] = mapped_column(String(32))

    # Nested sections are stored whole; services always assign a fresh dict
    basic_details: Mapped[dict] = mapped_column(JSON, default=dict)
    professional_details: Mapped[dict] = mapped_column(JSON, default=dict)
    personal_details: Mapped[dict] = mapped_column(JSON, default=dict)
    skills: Mapped[list] = mapped_column(JSON, default=list)  # technologies
    roles_summaries: Mapped[list] = mapped_column(JSON, default=list)

    resume: Mapped[str | None] = mapped_column(String(1024))
    profile_image: Mapped[str | None] = mapped_column(String(1024))
    email_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    mobile_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    account = relationship("Account")
    education = relationship(
        "Education",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Education.id",
    )
    employment = relationship(
        "Employment",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Employment.id",
    )
    saved_jobs = relationship(
        "SavedJob",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="SavedJob.id",
    )


class Education(Base):
    __tablename__ = "education_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), index=True, nullable=False
    )
    qualification: Mapped[str | None] = mapped_column(String(128))
    # school level
    board: Mapped[str | None] = mapped_column(String(255))
    medium: Mapped[str | None] = mapped_column(String(64))
    percentage: Mapped[str | None] = mapped_column(String(32))
    year_of_passing: Mapped[str | None] = mapped_column(String(16))
    # higher education
    course: Mapped[str | None] = mapped_column(String(255))
    college: Mapped[str | None] = mapped_column(String(255))
    grading: Mapped[str | None] = mapped_column(String(64))
    cgpa: Mapped[str | None] = mapped_column(String(32))
    course_type: Mapped[str | None] = mapped_column(String(64))
    start_year: Mapped[str | None] = mapped_column(String(16))
    end_year: Mapped[str | None] = mapped_column(String(16))

    profile = relationship("JobSeekerProfile", back_populates="education")


class Employment(Base):
    __tablename__ = "employment_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), index=True, nullable=False
    )
    company: Mapped[str | None] = mapped_column(String(255))
    job_title: Mapped[str | None] = mapped_column(String(255))
    is_current_company: Mapped[bool] = mapped_column(Boolean, default=False)
    current_salary: Mapped[dict | None] = mapped_column(JSON)  # salary breakdown
    start_date: Mapped[str | None] = mapped_column(String(32))
    end_date: Mapped[str | None] = mapped_column(String(32))
    is_ongoing: Mapped[bool] = mapped_column(Boolean, default=False)
    pay_type: Mapped[str | None] = mapped_column(String(64))
    experience: Mapped[str | None] = mapped_column(String(64))
    projects: Mapped[list] = mapped_column(JSON, default=list)
    responsibilities: Mapped[list] = mapped_column(JSON, default=list)

    profile = relationship("JobSeekerProfile", back_populates="employment")


class SavedJob(Base):
    __tablename__ = "saved_jobs"
    __table_args__ = (UniqueConstraint("profile_id", "job_post_id", name="uq_saved_job"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), index=True, nullable=False
    )
    job_post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("job_posts.id", ondelete="CASCADE"), index=True, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    profile = relationship("JobSeekerProfile", back_populates="saved_jobs")
