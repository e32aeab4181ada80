# talent96/schemas/job.py
from datetime import datetime
from typing import Annotated, Any, Literal
from pydantic import AliasChoices, BeforeValidator, Field, field_validator

from talent96.schemas.base import CamelModel

JobType = Literal["Full-time", "Part-time", "Internship", "Contract"]


def _as_text(v):
    return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v


# clients send salary / experience as numbers too
Text = Annotated[str, BeforeValidator(_as_text)]


class JobPostIn(CamelModel):
    job_title: str = Field(min_length=1)
    company_name: str = Field(min_length=1)
    company_logo: str = ""
    salary: Text
    experience: Text
    location: str
    description: str
    job_type: JobType = "Full-time"
    remote: bool = False
    skills: list[str] = Field(default_factory=list)
    recruiter_email: str | None = None
    openings: int = Field(default=1, ge=0)


class JobPostUpdateIn(CamelModel):
    job_title: str | None = None
    company_name: str | None = None
    company_logo: str | None = None
    salary: Text | None = None
    experience: Text | None = None
    location: str | None = None
    description: str | None = None
    job_type: JobType | None = None
    remote: bool | None = None
    skills: list[str] | None = None
    recruiter_email: str | None = None
    openings: int | None = Field(default=None, ge=0)


class UpdatePostByTitleIn(JobPostUpdateIn):
    old_title: str | None = None


class ApplicantOut(CamelModel):
    id: int
    user_id: int
    name: str | None = None
    email: str | None = None
    resume: str | None = None
    address: str | None = None
    profile_image: str | None = None
    application_status: str
    applied_at: datetime | None = None


class JobPostOut(CamelModel):
    id: int
    recruiter_id: int
    job_title: str = Field(
        validation_alias=AliasChoices("title", "jobTitle", "job_title"),
        serialization_alias="jobTitle",
    )
    company_name: str | None = None
    company_logo: str | None = None
    salary: str | None = None
    experience: str | None = None
    location: str | None = None
    description: str | None = None
    job_type: str | None = None
    remote: bool = False
    skills: list[str] = Field(default_factory=list)
    openings: int = 0
    posted_at: datetime | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def _no_skills(cls, v):
        return v or []


class JobPostDetailOut(JobPostOut):
    recruiter_email: str | None = None
    applicants: list[ApplicantOut] = Field(default_factory=list)


class ApplyIn(CamelModel):
    name: str | None = None
    email: str | None = None
    resume: str | None = None
    address: str | None = None
    profile_image: str | None = None


class StatusUpdateIn(CamelModel):
    status: str
    company_name: str | None = None
    company_logo: str | None = None


class StatusUpdateOut(CamelModel):
    message: str
    updated_applicant: ApplicantOut


class RecommendIn(CamelModel):
    designation: Any = None
    skills: list[Any] | None = None
    location: Any = None


class DesignationSearchIn(CamelModel):
    designation: list[str] | str = Field(default_factory=list)
    location: str = ""
    type: str = ""


class SaveJobIn(CamelModel):
    job_id: int


class RecruiterOpeningsOut(CamelModel):
    recruiter_id: int
    user_id: int
    full_name: str | None = None
    company_name: str | None = None
    job_count: int
    total_openings: int


class AllWithOpeningsOut(CamelModel):
    recruiters: list[RecruiterOpeningsOut]
    grand_total_openings: int


class JobSummaryOut(CamelModel):
    recruiter_name: str
    email: str
    profile_image: str | None = None
    company_name: str
    company_website: str
    email_verified: bool
    status: str
    job_title: str
    applicant_count: int
    job_type: str
    location: str
    salary: str
    experience: str
    openings: int
    posted_at: datetime | None = None
    skills: list[str] = Field(default_factory=list)
    description: str


class CountOut(CamelModel):
    count: int
