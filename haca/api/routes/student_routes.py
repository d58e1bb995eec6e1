"""
Student Routes

POST /students/register - Create account + pending profile + skills
GET /students/me - Get own profile (student dashboard)
GET /students - List approved students (recruiters)
GET /students/search?q= - Ranked search over approved students
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from haca.core.auth import get_current_student
from haca.models.student import Student
from haca.services.registration_service import get_registration_service
from haca.services.search_service import search_students
from haca.services.student_service import get_student_service
from haca.schemas.schemas import StudentRegistrationRequest, RegistrationResponse

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("/register", response_model=RegistrationResponse, status_code=201)
async def register_student(data: StudentRegistrationRequest):
    """
    Register a student.

    Creates the account, signs it in, stores the profile as 'pending'
    and links skills. Skills that fail to save are listed in
    `skills_failed`; the registration still succeeds.
    """
    service = get_registration_service()
    return service.register(data)


@router.get("/me", response_model=Student)
async def get_my_profile(student: dict = Depends(get_current_student)):
    """Get current student's profile with skills and approval status."""
    profile = get_student_service().get_student(student["student_id"])
    if not profile:
        raise HTTPException(status_code=404, detail="No profile found")
    return profile


@router.get("", response_model=List[Student])
async def list_approved_students():
    """All approved students, newest first."""
    return get_student_service().list_approved()


@router.get("/search", response_model=List[Student])
async def search(q: str = Query("", max_length=500, description="e.g. 'C4 coding student who knows AWS'")):
    """
    Free-text candidate search.

    Only approved students are considered. A blank query returns all of
    them.
    """
    candidates = get_student_service().list_approved()
    return search_students(q, candidates)
