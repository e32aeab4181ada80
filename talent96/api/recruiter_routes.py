# talent96/api/recruiter_routes.py
"""
Recruiter profile, job posts, applications, saved jobs and job search.

Fixed paths are registered before the ``/{job_id}`` ones so they are never
captured as a job id.
"""
from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from talent96.auth.deps import CurrentUser, get_current_user
from talent96.db.session import get_db
from talent96.matching.search import SearchCriteria
from talent96.schemas.job import (
    AllWithOpeningsOut, ApplicantOut, ApplyIn, CountOut, DesignationSearchIn, JobPostDetailOut, JobPostIn,
    JobPostOut, JobPostUpdateIn, JobSummaryOut, RecommendIn, SaveJobIn, StatusUpdateIn,
    StatusUpdateOut, UpdatePostByTitleIn,
)
from talent96.schemas.user import JobSeekerProfileOut, RecruiterProfileOut, RecruiterUpdateIn, VerifiedOut
from talent96.services import jobs, profiles
from talent96.services.notifications import to_payload
from talent96.services.realtime import NotificationHub, get_hub

router = APIRouter(prefix="/api/recruiters", tags=["Recruiters"])


# ---------- recruiter profile ----------
@router.get("/profile")
def get_profile(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    recruiter, email = profiles.recruiter_profile(db, user.id)
    out = RecruiterProfileOut.model_validate(recruiter).model_dump(mode="json", by_alias=True)
    return {**out, "email": email}

@router.put("/update-data")
def update_profile(payload: RecruiterUpdateIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    recruiter = profiles.update_recruiter(db, user.id, payload)
    return {"message": "Profile updated successfully", "profile": RecruiterProfileOut.model_validate(recruiter)}

@router.get("/check-email-verified/{user_id}", response_model=VerifiedOut)
def check_email_verified(user_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return VerifiedOut(verified=profiles.recruiter_email_verified(db, user_id))


# ---------- job posts ----------
@router.post("/create", status_code=201)
def create_job(payload: JobPostIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    post = jobs.create_post(db, user.id, payload)
    return {"message": "Job posted successfully", "job": JobPostDetailOut.model_validate(post)}

@router.put("/update-post")
def update_job_by_title(
    payload: UpdatePostByTitleIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Edit a post found by its current title."""
    post = jobs.update_post_by_title(db, user.id, payload.old_title, payload)
    return {"message": "Job updated successfully", "job": JobPostDetailOut.model_validate(post)}

@router.get("/my-jobs")
def my_jobs(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"jobs": [JobPostDetailOut.model_validate(p) for p in jobs.my_posts(db, user.id)]}

@router.get("/job-applicants/{job_id}")
def job_applicants(job_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"applicants": [ApplicantOut.model_validate(a) for a in jobs.list_applicants(db, user.id, job_id)]}

@router.get("/applicant/{user_id}")
def applicant_details(user_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    profile, email = profiles.applicant_profile(db, user_id)
    out = JobSeekerProfileOut.model_validate(profile).model_dump(mode="json", by_alias=True)
    return {"applicant": {**out, "email": email}}


# ---------- listings ----------
@router.get("/all-with-openings", response_model=AllWithOpeningsOut)
def all_with_openings(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return jobs.openings_by_recruiter(db)

@router.get("/count")
def count_jobs(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"total": jobs.total_posts(db)}

@router.get("/latest", response_model=list[JobPostOut])
def latest_jobs(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return jobs.latest_posts(db)

@router.get("/summary", response_model=list[JobSummaryOut])
def jobs_summary(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return jobs.posts_summary(db)


# ---------- matching / search ----------
@router.post("/recommended", response_model=list[JobPostOut])
def recommended(payload: RecommendIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Recall-oriented suggestions from designation, skills and location."""
    return jobs.recommended_posts(db, payload.designation, payload.skills, payload.location)

@router.post("/search-jobs", response_model=list[JobPostOut])
def search_jobs_by_designation(payload: DesignationSearchIn, db: Session = Depends(get_db)):
    return jobs.search_posts_by_designation(db, payload.designation, payload.location, payload.type)

@router.get("/jobs", response_model=list[JobPostOut])
def search_jobs(
    search: str = "",
    location: str = "",
    experience: str = "",
    job_type: str = Query("", alias="jobType"),
    salary: str = "",
    company: str = "",
    db: Session = Depends(get_db),
):
    criteria = SearchCriteria(
        search=search,
        location=location,
        experience=experience,
        job_type=job_type,
        salary=salary,
        company=company,
    )
    return [
        JobPostOut.model_validate(post).model_copy(update={"company_name": company_name})
        for post, company_name in jobs.search_posts(db, criteria)
    ]


# ---------- applications ----------
@router.get("/applied/count", response_model=CountOut)
def applied_count(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return CountOut(count=jobs.applied_count(db, user.id))

@router.get("/applied-jobs", response_model=list[JobPostOut])
def applied_jobs(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return [
        JobPostOut.model_validate(post).model_copy(update={
            "company_name": post.company_name or jobs.COMPANY_NOT_PROVIDED,
            "company_logo": post.company_logo or jobs.PLACEHOLDER_LOGO,
        })
        for post in jobs.applied_posts(db, user.id)
    ]


# ---------- saved jobs ----------
@router.post("/save-job")
def save_job(payload: SaveJobIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    saved = jobs.save_job(db, user.id, payload.job_id)
    return {"message": "Job saved successfully", "savedJobs": saved}

@router.delete("/unsave-job/{job_id}")
def unsave_job(job_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    saved = jobs.unsave_job(db, user.id, job_id)
    return {"message": "Job unsaved successfully", "updatedSavedJobs": saved}

@router.get("/saved-jobs", response_model=list[int])
def saved_jobs(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return jobs.saved_job_ids(db, user.id)

@router.post("/saved-jobs/details", response_model=list[JobPostOut])
def saved_job_details(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return jobs.saved_posts(db, user.id)


# ---------- per-job routes ----------
@router.put("/{job_id}")
def update_job(
    job_id: int,
    payload: JobPostUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    post = jobs.update_post(db, user.id, job_id, payload)
    return {"message": "Job updated successfully", "job": JobPostDetailOut.model_validate(post)}

@router.delete("/{job_id}")
def delete_job(job_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    jobs.delete_post(db, user.id, job_id)
    return {"message": "Job post deleted successfully"}

@router.post("/{job_id}/apply", status_code=201)
def apply(job_id: int, payload: ApplyIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    jobs.apply(db, user.id, job_id, payload)
    return {"message": "Application submitted successfully"}

@router.get("/{job_id}/is-applied")
def is_applied(job_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"applied": jobs.has_applied(db, user.id, job_id)}

@router.put("/{job_id}/applicants/{applicant_id}/status", response_model=StatusUpdateOut)
def update_applicant_status(
    job_id: int,
    applicant_id: int,
    payload: StatusUpdateIn,
    background_tasks: BackgroundTasks,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    hub: NotificationHub = Depends(get_hub),
):
    """Decide on an applicant and notify them; ``applicant_id`` is the applicant's user id."""
    applicant, notification = jobs.set_applicant_status(
        db, user.id, job_id, applicant_id, payload.status, payload.company_name, payload.company_logo,
    )
    background_tasks.add_task(hub.push, applicant.user_id, to_payload(notification))
    return StatusUpdateOut(
        message=f"Applicant {applicant.application_status} successfully",
        updated_applicant=ApplicantOut.model_validate(applicant),
    )
