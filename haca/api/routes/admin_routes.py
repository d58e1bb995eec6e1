"""
Admin Routes

GET /admin/students - All students grouped by status, with counts
PUT /admin/students/{id}/approve - Approve a student
PUT /admin/students/{id}/reject - Reject a student
PUT /admin/students/{id}/status - Set any status

After a status change clients refetch GET /admin/students.
"""

from fastapi import APIRouter, Depends

from haca.core.auth import get_current_admin
from haca.models.student import StudentListResponse
from haca.services.student_service import get_student_service
from haca.schemas.schemas import ApprovalStatus, StatusUpdate, MessageResponse

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/students", response_model=StudentListResponse)
async def list_students(admin: dict = Depends(get_current_admin)):
    return get_student_service().list_grouped()


@router.put("/students/{student_id}/approve", response_model=MessageResponse)
async def approve_student(student_id: int, admin: dict = Depends(get_current_admin)):
    get_student_service().update_status(student_id, ApprovalStatus.approved)
    return MessageResponse(message="The student profile has been approved successfully")


@router.put("/students/{student_id}/reject", response_model=MessageResponse)
async def reject_student(student_id: int, admin: dict = Depends(get_current_admin)):
    get_student_service().update_status(student_id, ApprovalStatus.rejected)
    return MessageResponse(message="The student profile has been rejected")


@router.put("/students/{student_id}/status", response_model=MessageResponse)
async def set_student_status(
    student_id: int,
    update: StatusUpdate,
    admin: dict = Depends(get_current_admin)
):
    get_student_service().update_status(student_id, update.status)
    return MessageResponse(message=f"Status updated to '{update.status.value}'")
