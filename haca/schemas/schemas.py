"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, EmailStr, Field, HttpUrl, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    admin = "admin"


class School(str, Enum):
    coding = "Coding"
    marketing = "Marketing"
    design = "Design"


class Batch(str, Enum):
    c1 = "C1"
    c2 = "C2"
    c3 = "C3"
    c4 = "C4"
    m1 = "M1"
    m2 = "M2"
    m3 = "M3"
    d1 = "D1"
    d2 = "D2"
    d3 = "D3"


class ApprovalStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    role: str
    is_admin: bool = False

class UserResponse(BaseModel):
    user_id: int
    email: str
    role: str
    is_admin: bool
    is_active: bool
    created_at: datetime


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentRegistrationRequest(BaseModel):
    """
    Registration form.

    Every rule here runs before any account or profile is created,
    so a rejected form leaves no trace in storage.
    """
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str
    confirm_password: str
    batch: Batch
    school: School
    years_of_experience: int = Field(0, ge=0)
    linkedin_url: HttpUrl
    resume_url: Optional[HttpUrl] = None
    skills: str

    @field_validator("skills")
    @classmethod
    def skills_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Skills required: please enter at least one skill")
        return value

    @field_validator("resume_url", mode="before")
    @classmethod
    def blank_resume_is_none(cls, value):
        return value or None

    @model_validator(mode="after")
    def check_passwords(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        if len(self.password) < 6:
            raise ValueError("Password too short: must be at least 6 characters long")
        return self

class RegistrationResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    student_id: int
    status: ApprovalStatus
    skills_linked: List[str] = []
    skills_failed: List[str] = []
    message: str


# ============================================================
# ADMIN SCHEMAS
# ============================================================

class StatusUpdate(BaseModel):
    status: ApprovalStatus


# ============================================================
# SKILL SCHEMAS
# ============================================================

class SkillAnalysisRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=2000)

class SkillAnalysisResponse(BaseModel):
    analysis: str
    cached: bool = False


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

