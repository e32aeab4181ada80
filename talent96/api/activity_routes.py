# talent96/api/activity_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talent96.db.session import get_db
from talent96.services import activities

router = APIRouter(prefix="/api/activities", tags=["Activities"])

@router.get("/summary")
def summary(db: Session = Depends(get_db)):
    """Platform-wide counters for the admin dashboard"""
    data = activities.summary(db)
    latest = data["latest_job"]
    return {
        "recruiters": data["recruiters"],
        "jobSeekers": data["job_seekers"],
        "jobPosts": data["job_posts"],
        "totalApplications": data["total_applications"],
        "activeRecruiters": data["active_recruiters"],
        "latestJob": None if latest is None else {
            "jobTitle": latest["job_title"],
            "postedAt": latest["posted_at"],
            "recruiter": latest["recruiter"],
        },
    }

@router.get("")
def recent_activity(db: Session = Depends(get_db)):
    return [
        {
            "id": row["id"],
            "role": row["role"],
            "userName": row["user_name"],
            "action": row["action"],
            "details": row["details"],
            "timestamp": row["timestamp"],
        }
        for row in activities.recent_registrations(db)
    ]
