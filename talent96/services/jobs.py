# talent96/services/jobs.py
"""
Job posts, applications and saved jobs.

Posts belong to one recruiter profile; applicants belong to one post and are
unique per (post, user). Recommendation and search read every post in scan
order (recruiter id, then post id) and filter in memory.
"""
import logging
import re

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session, selectinload

from talent96.db.base import utcnow
from talent96.core.errors import ConflictError, InvalidInputError, NotFoundError
from talent96.matching.predicates import JobView
from talent96.matching.recommend import SeekerCriteria, recommend
from talent96.matching.search import SearchCriteria, search_by_designation, search_jobs
from talent96.models.account import Account
from talent96.models.notification import Notification
from talent96.models.recruiter import (
    DECISION_STATUSES, STATUS_APPLIED, Applicant, JobPost, RecruiterProfile,
)
from talent96.models.seeker import SavedJob
from talent96.schemas.job import ApplyIn, JobPostIn, JobPostUpdateIn
from talent96.services.notifications import create_notification
from talent96.services.profiles import find_seeker, get_recruiter, get_seeker

logger = logging.getLogger(__name__)

COMPANY_NOT_PROVIDED = "Company not provided"
PLACEHOLDER_LOGO = "https://placehold.co/48x48"
DEFAULT_COMPANY_NAME = "Our Company"
LATEST_LIMIT = 10

# request field -> JobPost attribute
POST_FIELDS = {
    "job_title": "title",
    "company_name": "company_name",
    "company_logo": "company_logo",
    "salary": "salary",
    "experience": "experience",
    "location": "location",
    "description": "description",
    "job_type": "job_type",
    "remote": "remote",
    "skills": "skills",
    "recruiter_email": "recruiter_email",
    "openings": "openings",
}


# ---------- lookups ----------
def all_posts(db: Session) -> list[JobPost]:
    """Every post in scan order."""
    return db.execute(
        select(JobPost)
        .join(RecruiterProfile, JobPost.recruiter_id == RecruiterProfile.id)
        .options(selectinload(JobPost.recruiter))
        .order_by(RecruiterProfile.id, JobPost.id)
    ).scalars().all()


def get_post(db: Session, job_id: int) -> JobPost:
    post = db.get(JobPost, job_id)
    if post is None:
        raise NotFoundError("Job not found")
    return post


def own_post(recruiter: RecruiterProfile, job_id: int) -> JobPost:
    post = next((p for p in recruiter.job_posts if p.id == job_id), None)
    if post is None:
        raise NotFoundError("Job not found")
    return post


def resolved_company(post: JobPost) -> str:
    """Recruiter's company name wins over the one typed into the post."""
    recruiter_company = (post.recruiter.company_name or "").strip() if post.recruiter else ""
    return recruiter_company or post.company_name or COMPANY_NOT_PROVIDED


# ---------- recruiter job management ----------
def create_post(db: Session, user_id: int, data: JobPostIn) -> JobPost:
    recruiter = get_recruiter(db, user_id)
    values = {POST_FIELDS[k]: v for k, v in data.model_dump().items()}
    if not values.get("recruiter_email"):
        account = db.get(Account, user_id)
        values["recruiter_email"] = account.email if account else ""
    post = JobPost(**values)
    recruiter.job_posts.append(post)
    db.commit()
    logger.info(f"Recruiter {recruiter.id} posted job {post.id}")
    return post


def _apply_updates(post: JobPost, data: JobPostUpdateIn) -> None:
    for key, value in data.model_dump(exclude_unset=True).items():
        attr = POST_FIELDS.get(key)
        if attr is not None and value is not None:
            setattr(post, attr, value)


def update_post(db: Session, user_id: int, job_id: int, data: JobPostUpdateIn) -> JobPost:
    recruiter = get_recruiter(db, user_id)
    post = own_post(recruiter, job_id)
    _apply_updates(post, data)
    db.commit()
    return post


def update_post_by_title(db: Session, user_id: int, old_title: str | None, data: JobPostUpdateIn) -> JobPost:
    """Edit the first post titled ``old_title``; the post is re-dated as new."""
    if not old_title:
        raise InvalidInputError("Old job title is required")
    recruiter = get_recruiter(db, user_id)
    post = next((p for p in recruiter.job_posts if p.title == old_title), None)
    if post is None:
        raise NotFoundError("Job not found with the given title")
    _apply_updates(post, data)
    post.posted_at = utcnow()
    db.commit()
    return post


def delete_post(db: Session, user_id: int, job_id: int) -> None:
    recruiter = get_recruiter(db, user_id)
    post = own_post(recruiter, job_id)
    recruiter.job_posts.remove(post)
    db.commit()
    logger.info(f"Recruiter {recruiter.id} deleted job {job_id}")


def my_posts(db: Session, user_id: int) -> list[JobPost]:
    return list(get_recruiter(db, user_id).job_posts)


def list_applicants(db: Session, user_id: int, job_id: int) -> list[Applicant]:
    recruiter = get_recruiter(db, user_id)
    return list(own_post(recruiter, job_id).applicants)


# ---------- applications ----------
def apply(db: Session, user_id: int, job_id: int, data: ApplyIn) -> Applicant:
    """
    File one application. Missing applicant fields are taken from the
    caller's seeker profile; a second application to the same post is a
    conflict and leaves the post untouched.
    """
    values = data.model_dump()
    profile = find_seeker(db, user_id)
    if profile is not None:
        account = db.get(Account, user_id)
        defaults = {
            "name": profile.full_name,
            "email": account.email if account else None,
            "resume": profile.resume,
            "address": (profile.personal_details or {}).get("address"),
            "profile_image": profile.profile_image,
        }
        values = {k: values.get(k) or defaults.get(k) for k in values}
    if not all(values.values()):
        raise InvalidInputError("Update your profile")

    post = get_post(db, job_id)
    if any(a.user_id == user_id for a in post.applicants):
        raise ConflictError("Already applied")

    applicant = Applicant(user_id=user_id, **values)
    post.applicants.append(applicant)
    db.commit()
    logger.info(f"User {user_id} applied to job {job_id}")
    return applicant


def has_applied(db: Session, user_id: int, job_id: int) -> bool:
    get_post(db, job_id)
    return db.execute(
        select(Applicant.id).where(Applicant.job_post_id == job_id, Applicant.user_id == user_id)
    ).first() is not None


def applied_posts(db: Session, user_id: int) -> list[JobPost]:
    return db.execute(
        select(JobPost)
        .join(Applicant, Applicant.job_post_id == JobPost.id)
        .where(Applicant.user_id == user_id)
        .order_by(JobPost.recruiter_id, JobPost.id)
    ).scalars().all()


def applied_count(db: Session, user_id: int) -> int:
    return db.execute(
        select(func.count(Applicant.id)).where(Applicant.user_id == user_id)
    ).scalar_one()


def set_applicant_status(
    db: Session,
    user_id: int,
    job_id: int,
    applicant_user_id: int,
    status: str,
    company_name: str | None = None,
    company_logo: str | None = None,
) -> tuple[Applicant, Notification]:
    """
    Move an applicant from ``applied`` to shortlist / maybe / reject and
    notify them. Only the recruiter owning the post can do this, and a
    decision cannot be changed afterwards.
    """
    if status not in DECISION_STATUSES:
        raise InvalidInputError('Invalid status. Must be "shortlist", "maybe", or "reject".')

    recruiter = get_recruiter(db, user_id)
    post = own_post(recruiter, job_id)
    applicant = next((a for a in post.applicants if a.user_id == applicant_user_id), None)
    if applicant is None:
        raise NotFoundError("Applicant not found for this job")
    if applicant.application_status != STATUS_APPLIED:
        raise ConflictError(f"Applicant already marked as {applicant.application_status}")

    applicant.application_status = status

    company_name = company_name or recruiter.company_name or DEFAULT_COMPANY_NAME
    company_logo = company_logo or recruiter.company_logo or None
    notification = create_notification(
        db,
        user_id=applicant.user_id,
        type="application_status",
        title="Application Status Updated",
        message=f"You have been {status} for the position: {post.title}",
        job_id=post.id,
        metadata={
            "status": status,
            "companyName": company_name,
            "companyLogo": company_logo,
        },
        company_name=company_name,
        company_logo=company_logo,
    )
    db.commit()
    db.refresh(notification)
    logger.info(f"Applicant {applicant_user_id} on job {job_id} -> {status}")
    return applicant, notification


# ---------- saved jobs ----------
def save_job(db: Session, user_id: int, job_id: int) -> list[int]:
    profile = get_seeker(db, user_id)
    get_post(db, job_id)
    if not any(s.job_post_id == job_id for s in profile.saved_jobs):
        profile.saved_jobs.append(SavedJob(job_post_id=job_id))
        db.commit()
    return [s.job_post_id for s in profile.saved_jobs]


def unsave_job(db: Session, user_id: int, job_id: int) -> list[int]:
    profile = get_seeker(db, user_id)
    for saved in [s for s in profile.saved_jobs if s.job_post_id == job_id]:
        profile.saved_jobs.remove(saved)
    db.commit()
    return [s.job_post_id for s in profile.saved_jobs]


def saved_job_ids(db: Session, user_id: int) -> list[int]:
    profile = find_seeker(db, user_id)
    if profile is None:
        return []
    return [s.job_post_id for s in profile.saved_jobs]


def saved_posts(db: Session, user_id: int) -> list[JobPost]:
    ids = saved_job_ids(db, user_id)
    if not ids:
        return []
    return db.execute(
        select(JobPost).where(JobPost.id.in_(ids)).order_by(JobPost.recruiter_id, JobPost.id)
    ).scalars().all()


# ---------- matching ----------
def recommended_posts(db: Session, designation=None, skills=None, location=None) -> list[JobPost]:
    criteria = SeekerCriteria.from_raw(designation, location, skills)
    views = [JobView.from_post(p) for p in all_posts(db)]
    picked = recommend(views, criteria)
    logger.info(
        f"Recommended {len(picked)} job(s) "
        f"({'input match' if criteria.has_input else 'no input'})"
    )
    return [v.source for v in picked]


def search_posts(db: Session, criteria: SearchCriteria) -> list[tuple[JobPost, str]]:
    """Returns ``(post, resolved company name)`` pairs."""
    views = [JobView.from_post(p, company_name=resolved_company(p)) for p in all_posts(db)]
    return [(v.source, v.company_name) for v in search_jobs(views, criteria)]


def search_posts_by_designation(db: Session, designation, location: str = "", category: str = "") -> list[JobPost]:
    views = [JobView.from_post(p) for p in all_posts(db)]
    try:
        found = search_by_designation(views, designation, location, category)
    except re.error as e:
        raise InvalidInputError(f"Invalid search term: {e}")
    return [v.source for v in found]


# ---------- listings / aggregates ----------
def latest_posts(db: Session, limit: int = LATEST_LIMIT) -> list[JobPost]:
    return db.execute(
        select(JobPost).order_by(desc(JobPost.posted_at), desc(JobPost.id)).limit(limit)
    ).scalars().all()


def total_posts(db: Session) -> int:
    return db.execute(select(func.count(JobPost.id))).scalar_one()


def openings_by_recruiter(db: Session) -> dict:
    recruiters = db.execute(
        select(RecruiterProfile)
        .options(selectinload(RecruiterProfile.job_posts))
        .order_by(RecruiterProfile.id)
    ).scalars().all()
    rows = []
    for r in recruiters:
        rows.append({
            "recruiter_id": r.id,
            "user_id": r.user_id,
            "full_name": r.full_name,
            "company_name": r.company_name,
            "job_count": len(r.job_posts),
            "total_openings": sum(p.openings or 0 for p in r.job_posts),
        })
    return {
        "recruiters": rows,
        "grand_total_openings": sum(r["total_openings"] for r in rows),
    }


def posts_summary(db: Session) -> list[dict]:
    """Every post flattened with its recruiter, newest first."""
    out = []
    for post in all_posts(db):
        r = post.recruiter
        account = db.get(Account, r.user_id)
        out.append({
            "recruiter_name": r.full_name or "Unknown",
            "email": account.email if account else "N/A",
            "profile_image": r.profile_image,
            "company_name": post.company_name or r.company_name or "N/A",
            "company_website": r.company_website or "N/A",
            "email_verified": bool(r.email_verified),
            "status": "Verified" if r.email_verified else "Pending",
            "job_title": post.title or "No Job Title",
            "applicant_count": len(post.applicants),
            "job_type": post.job_type or "N/A",
            "location": post.location or "N/A",
            "salary": post.salary or "N/A",
            "experience": post.experience or "N/A",
            "openings": post.openings or 0,
            "posted_at": post.posted_at,
            "skills": post.skills or [],
            "description": post.description or "N/A",
        })
    out.sort(key=lambda row: (row["posted_at"] is not None, row["posted_at"]), reverse=True)
    return out
