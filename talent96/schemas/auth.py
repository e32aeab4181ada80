# talent96/schemas/auth.py
from typing import Literal
from pydantic import EmailStr, Field

from talent96.schemas.base import CamelModel
from talent96.schemas.user import AccountOut

Role = Literal["jobSeeker", "recruiter", "admin"]


class RegisterIn(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)
    role: Role
    full_name: str | None = None
    mobile_number: str | None = None
    # recruiter only
    company_name: str | None = None
    company_website: str | None = None
    # seeker only
    resume: str | None = None
    profile_image: str | None = None


class LoginIn(CamelModel):
    email: str
    password: str
    role: Role


class LoginOut(CamelModel):
    token: str
    user: AccountOut
    profile: dict | None = None


class ChangePasswordIn(CamelModel):
    current_password: str | None = None
    new_password: str | None = None


class EmailIn(CamelModel):
    email: str | None = None


class OtpIn(CamelModel):
    email: str | None = None
    otp: str | None = None


class ResetPasswordIn(OtpIn):
    new_password: str = Field(min_length=1)


class MessageOut(CamelModel):
    message: str
    success: bool = True
