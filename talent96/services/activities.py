# talent96/services/activities.py
from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from talent96.models.account import Account
from talent96.models.recruiter import Applicant, JobPost, RecruiterProfile
from talent96.models.seeker import JobSeekerProfile

RECENT_ACTIVITY_LIMIT = 50


def summary(db: Session) -> dict:
    def count(stmt) -> int:
        return db.execute(stmt).scalar_one()

    latest = db.execute(
        select(JobPost, RecruiterProfile.full_name)
        .join(RecruiterProfile, JobPost.recruiter_id == RecruiterProfile.id)
        .order_by(desc(JobPost.posted_at), desc(JobPost.id))
        .limit(1)
    ).first()

    return {
        "recruiters": count(select(func.count(RecruiterProfile.id))),
        "job_seekers": count(select(func.count(JobSeekerProfile.id))),
        "job_posts": count(select(func.count(JobPost.id))),
        "total_applications": count(select(func.count(Applicant.id))),
        "active_recruiters": count(select(func.count(func.distinct(JobPost.recruiter_id)))),
        "latest_job": None if latest is None else {
            "job_title": latest[0].title,
            "posted_at": latest[0].posted_at,
            "recruiter": latest[1],
        },
    }


def recent_registrations(db: Session, limit: int = RECENT_ACTIVITY_LIMIT) -> list[dict]:
    accounts = db.execute(
        select(Account).order_by(desc(Account.created_at), desc(Account.id)).limit(limit)
    ).scalars().all()
    return [
        {
            "id": a.id,
            "role": a.role,
            "user_name": a.email,
            "action": "Registered",
            "details": None,
            "timestamp": a.created_at,
        }
        for a in accounts
    ]
