# talent96/schemas/user.py
from datetime import datetime
from typing import Any
from pydantic import AliasChoices, Field, field_validator

from talent96.schemas.base import CamelModel


class AccountOut(CamelModel):
    id: int
    email: str
    role: str


# ---------- job seeker ----------
class EducationIn(CamelModel):
    qualification: str | None = None
    board: str | None = None
    medium: str | None = None
    percentage: str | None = None
    year_of_passing: str | None = None
    course: str | None = None
    college: str | None = None
    grading: str | None = None
    cgpa: str | None = None
    course_type: str | None = None
    start_year: str | None = None
    end_year: str | None = None

    @field_validator("percentage", "year_of_passing", "cgpa", "start_year", "end_year", mode="before")
    @classmethod
    def _numbers_as_text(cls, v):
        return str(v) if isinstance(v, (int, float)) else v


class EducationUpdateIn(EducationIn):
    id: int


class EducationOut(EducationIn):
    id: int


class EmploymentIn(CamelModel):
    company: str | None = None
    job_title: str | None = None
    is_current_company: bool = False
    current_salary: dict | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_ongoing: bool = False
    pay_type: str | None = None
    experience: str | None = None
    projects: list[Any] = Field(default_factory=list)
    responsibilities: list[Any] = Field(default_factory=list)

    @field_validator("experience", mode="before")
    @classmethod
    def _experience_as_text(cls, v):
        return str(v) if isinstance(v, (int, float)) else v


class EmploymentUpdateIn(EmploymentIn):
    id: int


class EmploymentOut(EmploymentIn):
    id: int


class JobSeekerProfileOut(CamelModel):
    id: int
    user_id: int
    full_name: str | None = None
    mobile_number: str | None = None
    basic_details: dict = Field(default_factory=dict)
    professional_details: dict = Field(default_factory=dict)
    personal_details: dict = Field(default_factory=dict)
    skills: list[Any] = Field(default_factory=list)
    roles_summaries: list[Any] = Field(default_factory=list)
    resume: str | None = None
    profile_image: str | None = None
    email_verified: bool = False
    mobile_verified: bool = False
    education: list[EducationOut] = Field(default_factory=list)
    employment_details_list: list[EmploymentOut] = Field(
        default_factory=list,
        validation_alias=AliasChoices("employment", "employmentDetailsList", "employment_details_list"),
        serialization_alias="employmentDetailsList",
    )
    saved_jobs: list[int] = Field(default_factory=list)

    @field_validator("saved_jobs", mode="before")
    @classmethod
    def _saved_job_ids(cls, v):
        return [getattr(s, "job_post_id", s) for s in v or []]

    @field_validator("basic_details", "professional_details", "personal_details", mode="before")
    @classmethod
    def _empty_section(cls, v):
        return v or {}

    @field_validator("skills", "roles_summaries", mode="before")
    @classmethod
    def _empty_list(cls, v):
        return v or []


class BasicDetailsIn(CamelModel):
    location: str | None = None
    experiences: Any = None
    ctc: Any = None
    expected_ctc: Any = None
    notice_period: Any = None
    currently_serving_notice: bool = False
    notice_end_date: str | None = None


class ProfessionalDetailsIn(CamelModel):
    current_industry: str | None = None
    department: str | None = None
    designation: str | None = None


class PersonalDetailsIn(CamelModel):
    address: str | None = None
    disability: str | None = None
    dob: str | None = None
    gender: str | None = None
    marital_status: str | None = None
    languages: list[Any] | None = None


class SkillsIn(CamelModel):
    skills: list[Any] = Field(default_factory=list)


class RolesIn(CamelModel):
    summaries: Any = None


class UserDetailsOut(CamelModel):
    id: int
    full_name: str | None = None
    resume: str | None = None
    address: str = ""
    email: str = ""
    profile_image: str


class SeekerSummaryOut(CamelModel):
    user_id: int
    full_name: str | None = None
    profile_image: str | None = None
    designation: str | None = None


class SettingsOut(CamelModel):
    email: str
    mobile_number: str | None = None
    email_verified: bool = False
    mobile_verified: bool = False


# ---------- recruiter ----------
class RecruiterProfileOut(CamelModel):
    id: int
    user_id: int
    full_name: str | None = None
    phone_number: str | None = None
    email_verified: bool = False
    profile_image: str | None = None
    company_name: str | None = None
    company_website: str | None = None
    company_logo: str | None = None
    created_at: datetime | None = None


class RecruiterUpdateIn(CamelModel):
    full_name: str | None = None
    phone_number: str | None = None
    company_name: str | None = None
    company_website: str | None = None
    company_logo: str | None = None
    profile_image: str | None = None


class VerifiedOut(CamelModel):
    verified: bool
