# talent96/api/user_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talent96.auth.deps import CurrentUser, get_current_user
from talent96.db.session import get_db
from talent96.schemas.user import (
    BasicDetailsIn, EducationIn, EducationOut, EducationUpdateIn, EmploymentIn, EmploymentOut,
    EmploymentUpdateIn, JobSeekerProfileOut, PersonalDetailsIn, ProfessionalDetailsIn, RolesIn,
    SeekerSummaryOut, SettingsOut, SkillsIn, UserDetailsOut, VerifiedOut,
)
from talent96.services import profiles

router = APIRouter(prefix="/api/users", tags=["Users"])


def _updated(message: str, profile) -> dict:
    return {"message": message, "user": JobSeekerProfileOut.model_validate(profile)}


@router.post("/userdata", response_model=JobSeekerProfileOut)
def userdata(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Full profile of the calling job seeker"""
    return profiles.get_seeker(db, user.id)

@router.post("/userdetails", response_model=UserDetailsOut)
def userdetails(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return profiles.user_details(db, user.id)

@router.get("/basic-details")
def basic_details(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    profile = profiles.get_seeker(db, user.id)
    return {"user": {"fullName": profile.full_name, "basicDetails": profile.basic_details or {}}}

@router.put("/update-basic")
def update_basic(payload: BasicDetailsIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return _updated("Basic details updated", profiles.update_basic(db, user.id, payload))

@router.put("/update-professional")
def update_professional(
    payload: ProfessionalDetailsIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return _updated("Professional details updated", profiles.update_professional(db, user.id, payload))

@router.put("/update-personal")
def update_personal(payload: PersonalDetailsIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return _updated("Personal details updated", profiles.update_personal(db, user.id, payload))

@router.put("/update-skills")
def update_skills(payload: SkillsIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return _updated("Skills updated", profiles.update_skills(db, user.id, payload.skills))

@router.put("/update-roles")
def update_roles(payload: RolesIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return _updated("Roles updated", profiles.update_roles(db, user.id, payload.summaries))

# ---------- education / employment ----------
@router.post("/add-education", status_code=201)
def add_education(payload: EducationIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    entry = profiles.add_education(db, user.id, payload)
    return {"message": "Education added", "education": EducationOut.model_validate(entry)}

@router.put("/update-education")
def update_education(payload: EducationUpdateIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    entry = profiles.update_education(db, user.id, payload)
    return {"message": "Education updated", "education": EducationOut.model_validate(entry)}

@router.post("/add-employment", status_code=201)
def add_employment(payload: EmploymentIn, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    entry = profiles.add_employment(db, user.id, payload)
    return {"message": "Employment added", "employment": EmploymentOut.model_validate(entry)}

@router.put("/update-employment")
def update_employment(
    payload: EmploymentUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    entry = profiles.update_employment(db, user.id, payload)
    return {"message": "Employment updated", "employment": EmploymentOut.model_validate(entry)}

@router.delete("/employment/{user_id}/{employment_id}")
def delete_employment(
    user_id: int,
    employment_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    profile = profiles.delete_employment(db, user.id, user_id, employment_id)
    return {"message": "Employment entry deleted successfully", "profile": JobSeekerProfileOut.model_validate(profile)}

@router.delete("/education/{user_id}/{education_id}")
def delete_education(
    user_id: int,
    education_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    profile = profiles.delete_education(db, user.id, user_id, education_id)
    return {"message": "Education entry deleted successfully", "profile": JobSeekerProfileOut.model_validate(profile)}

# ---------- listings / settings ----------
@router.get("/all", response_model=list[SeekerSummaryOut])
def all_seekers(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return profiles.list_seekers(db)

@router.post("/settings", response_model=SettingsOut)
def account_settings(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return profiles.account_settings(db, user.id)

@router.get("/check-email-verified/{user_id}", response_model=VerifiedOut)
def check_email_verified(user_id: int, db: Session = Depends(get_db)):
    return VerifiedOut(verified=profiles.seeker_email_verified(db, user_id))
