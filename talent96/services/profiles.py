# talent96/services/profiles.py
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from talent96.core.errors import ForbiddenError, InvalidInputError, NotFoundError
from talent96.models.account import Account, ROLE_JOB_SEEKER, ROLE_RECRUITER
from talent96.models.recruiter import RecruiterProfile
from talent96.models.seeker import DEFAULT_SEEKER_IMAGE, Education, Employment, JobSeekerProfile
from talent96.schemas.user import (
    BasicDetailsIn, EducationIn, EducationUpdateIn, EmploymentIn, EmploymentUpdateIn,
    PersonalDetailsIn, ProfessionalDetailsIn, RecruiterUpdateIn,
)

logger = logging.getLogger(__name__)


# ---------- job seeker ----------
def find_seeker(db: Session, user_id: int) -> JobSeekerProfile | None:
    return db.execute(
        select(JobSeekerProfile).where(JobSeekerProfile.user_id == user_id)
    ).scalars().first()


def get_seeker(db: Session, user_id: int) -> JobSeekerProfile:
    profile = find_seeker(db, user_id)
    if profile is None:
        raise NotFoundError("User not found")
    return profile


def user_details(db: Session, user_id: int) -> dict:
    """The slice of a seeker profile used to fill an application."""
    profile = get_seeker(db, user_id)
    account = db.get(Account, user_id)
    return {
        "id": user_id,
        "full_name": profile.full_name,
        "resume": profile.resume,
        "address": (profile.personal_details or {}).get("address") or "",
        "email": account.email if account else "",
        "profile_image": profile.profile_image or DEFAULT_SEEKER_IMAGE,
    }


def update_basic(db: Session, user_id: int, data: BasicDetailsIn) -> JobSeekerProfile:
    profile = get_seeker(db, user_id)
    profile.basic_details = {
        **(profile.basic_details or {}),
        "location": data.location,
        "experience": data.experiences,
        "ctc": data.ctc,
        "expectedCtc": data.expected_ctc,
        "noticePeriod": data.notice_period,
        "currentlyServingNotice": data.currently_serving_notice,
        "noticeEndDate": data.notice_end_date if data.currently_serving_notice else None,
    }
    db.commit()
    return profile


def update_professional(db: Session, user_id: int, data: ProfessionalDetailsIn) -> JobSeekerProfile:
    profile = get_seeker(db, user_id)
    profile.professional_details = {
        "currentIndustry": data.current_industry or "",
        "department": data.department or "",
        "designation": data.designation or "",
    }
    db.commit()
    return profile


def update_personal(db: Session, user_id: int, data: PersonalDetailsIn) -> JobSeekerProfile:
    profile = get_seeker(db, user_id)
    profile.personal_details = {
        "address": data.address,
        "isDisabled": data.disability == "yes",
        "dateOfBirth": data.dob,
        "gender": data.gender,
        "maritalStatus": data.marital_status,
        "languages": data.languages or [],
    }
    db.commit()
    return profile


def update_skills(db: Session, user_id: int, skills: list) -> JobSeekerProfile:
    profile = get_seeker(db, user_id)
    profile.skills = list(skills)
    db.commit()
    return profile


def update_roles(db: Session, user_id: int, summaries) -> JobSeekerProfile:
    if not isinstance(summaries, list):
        raise InvalidInputError("Summaries must be an array")
    profile = get_seeker(db, user_id)
    profile.roles_summaries = list(summaries)
    db.commit()
    return profile


def add_education(db: Session, user_id: int, data: EducationIn) -> Education:
    profile = get_seeker(db, user_id)
    entry = Education(**data.model_dump())
    profile.education.append(entry)
    db.commit()
    return entry


def update_education(db: Session, user_id: int, data: EducationUpdateIn) -> Education:
    """Replaces every field of the entry; omitted fields are cleared."""
    profile = get_seeker(db, user_id)
    entry = next((e for e in profile.education if e.id == data.id), None)
    if entry is None:
        raise NotFoundError("Education not found")
    for key, value in data.model_dump(exclude={"id"}).items():
        setattr(entry, key, value)
    db.commit()
    return entry


def add_employment(db: Session, user_id: int, data: EmploymentIn) -> Employment:
    profile = get_seeker(db, user_id)
    entry = Employment(**data.model_dump())
    profile.employment.append(entry)
    db.commit()
    return entry


def update_employment(db: Session, user_id: int, data: EmploymentUpdateIn) -> Employment:
    profile = get_seeker(db, user_id)
    entry = next((e for e in profile.employment if e.id == data.id), None)
    if entry is None:
        raise NotFoundError("Employment not found")
    for key, value in data.model_dump(exclude={"id"}).items():
        setattr(entry, key, value)
    db.commit()
    return entry


def _own_profile(db: Session, caller_id: int, user_id: int) -> JobSeekerProfile:
    if caller_id != user_id:
        raise ForbiddenError("Unauthorized access")
    return get_seeker(db, user_id)


def delete_education(db: Session, caller_id: int, user_id: int, education_id: int) -> JobSeekerProfile:
    profile = _own_profile(db, caller_id, user_id)
    entry = next((e for e in profile.education if e.id == education_id), None)
    if entry is None:
        raise NotFoundError("Education entry not found")
    profile.education.remove(entry)
    db.commit()
    return profile


def delete_employment(db: Session, caller_id: int, user_id: int, employment_id: int) -> JobSeekerProfile:
    profile = _own_profile(db, caller_id, user_id)
    entry = next((e for e in profile.employment if e.id == employment_id), None)
    if entry is None:
        raise NotFoundError("Employment entry not found")
    profile.employment.remove(entry)
    db.commit()
    return profile


def applicant_profile(db: Session, user_id: int) -> tuple[JobSeekerProfile, str]:
    """Seeker profile plus login email, as shown to a recruiter."""
    profile = find_seeker(db, user_id)
    if profile is None:
        raise NotFoundError("Applicant profile not found")
    account = db.get(Account, user_id)
    if account is None:
        raise NotFoundError("Applicant auth record not found")
    return profile, account.email


def list_seekers(db: Session) -> list[dict]:
    rows = db.execute(select(JobSeekerProfile).order_by(JobSeekerProfile.id)).scalars().all()
    return [
        {
            "user_id": p.user_id,
            "full_name": p.full_name,
            "profile_image": p.profile_image,
            "designation": (p.professional_details or {}).get("designation"),
        }
        for p in rows
    ]


def account_settings(db: Session, user_id: int) -> dict:
    """Email and verification flags; the password hash never leaves the server."""
    account = db.get(Account, user_id)
    if account is None:
        raise NotFoundError("User not found")

    if account.role == ROLE_JOB_SEEKER:
        profile = find_seeker(db, user_id)
        mobile = profile.mobile_number if profile else None
    elif account.role == ROLE_RECRUITER:
        profile = find_recruiter(db, user_id)
        mobile = profile.phone_number if profile else None
    else:
        profile, mobile = None, None
    if profile is None:
        raise NotFoundError("Profile not found")

    return {
        "email": account.email,
        "mobile_number": mobile,
        "email_verified": bool(profile.email_verified),
        "mobile_verified": bool(getattr(profile, "mobile_verified", False)),
    }


def seeker_email_verified(db: Session, user_id: int) -> bool:
    profile = find_seeker(db, user_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return bool(profile.email_verified)


# ---------- recruiter ----------
def find_recruiter(db: Session, user_id: int) -> RecruiterProfile | None:
    return db.execute(
        select(RecruiterProfile).where(RecruiterProfile.user_id == user_id)
    ).scalars().first()


def get_recruiter(db: Session, user_id: int) -> RecruiterProfile:
    recruiter = find_recruiter(db, user_id)
    if recruiter is None:
        raise NotFoundError("Recruiter not found")
    return recruiter


def recruiter_profile(db: Session, user_id: int) -> tuple[RecruiterProfile, str]:
    recruiter = find_recruiter(db, user_id)
    account = db.get(Account, user_id)
    if recruiter is None or account is None:
        raise NotFoundError("Recruiter or User not found")
    return recruiter, account.email


def update_recruiter(db: Session, user_id: int, data: RecruiterUpdateIn) -> RecruiterProfile:
    recruiter = find_recruiter(db, user_id)
    if recruiter is None:
        raise NotFoundError("Recruiter profile not found")
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(recruiter, key, value)
    db.commit()
    logger.info(f"Updated recruiter profile {recruiter.id}")
    return recruiter


def recruiter_email_verified(db: Session, user_id: int) -> bool:
    recruiter = find_recruiter(db, user_id)
    if recruiter is None:
        raise NotFoundError("Recruiter not found")
    return bool(recruiter.email_verified)
