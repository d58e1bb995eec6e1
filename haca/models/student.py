from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from haca.schemas.schemas import ApprovalStatus, Batch, School


class Skill(BaseModel):
    skill_id: int
    skill_name: str


class Student(BaseModel):
    student_id: int
    user_id: int
    name: str
    batch: Batch
    school: School
    skills: List[Skill] = []
    years_of_experience: int = 0
    linkedin_url: str
    resume_url: Optional[str] = None
    status: ApprovalStatus
    created_at: datetime


class StudentListResponse(BaseModel):
    """Admin view: every student grouped by approval status."""
    pending: List[Student] = []
    approved: List[Student] = []
    rejected: List[Student] = []
    counts: Dict[str, int] = {}
