"""
Student Service - read student profiles and move them between statuses.

Students are never deleted. The only write here is the status column,
which admins flip between pending, approved and rejected.
"""

import logging
from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy import text

from haca.db.postgres import get_db_session, execute_raw_sql
from haca.models.student import Skill, Student, StudentListResponse
from haca.schemas.schemas import ApprovalStatus

logger = logging.getLogger(__name__)

STUDENT_COLUMNS = """
    student_id, user_id, name, batch, school, years_of_experience,
    linkedin_url, resume_url, status, created_at
"""


class StudentService:
    """
    Loads students with their skills attached.
    """

    def _load_skills(self, db, student_ids: List[int]) -> Dict[int, List[Skill]]:
        """Fetch skills for many students in one query."""
        if not student_ids:
            return {}

        params = {f"id{i}": sid for i, sid in enumerate(student_ids)}
        placeholders = ", ".join(f":{key}" for key in params)
        result = db.execute(
            text(f"""
                SELECT ss.student_id, sk.skill_id, sk.skill_name
                FROM student_skills ss JOIN skills sk ON ss.skill_id = sk.skill_id
                WHERE ss.student_id IN ({placeholders})
                ORDER BY sk.skill_name
            """),
            params
        )

        skills: Dict[int, List[Skill]] = {sid: [] for sid in student_ids}
        for student_id, skill_id, skill_name in result.fetchall():
            skills[student_id].append(Skill(skill_id=skill_id, skill_name=skill_name))
        return skills

    def _to_students(self, db, rows) -> List[Student]:
        rows = [dict(row._mapping) for row in rows]
        skills = self._load_skills(db, [r["student_id"] for r in rows])
        return [Student(**r, skills=skills.get(r["student_id"], [])) for r in rows]

    def list_students(self, status: Optional[ApprovalStatus] = None) -> List[Student]:
        """All students newest first, optionally only one status."""
        sql = f"SELECT {STUDENT_COLUMNS} FROM students"
        params = {}

        if status:
            sql += " WHERE status = :status"
            params["status"] = status.value

        sql += " ORDER BY created_at DESC, student_id DESC"

        with get_db_session() as db:
            result = db.execute(text(sql), params)
            return self._to_students(db, result.fetchall())

    def list_approved(self) -> List[Student]:
        """Everything recruiters are allowed to see."""
        return self.list_students(ApprovalStatus.approved)

    def list_grouped(self) -> StudentListResponse:
        students = self.list_students()
        grouped = {s.value: [] for s in ApprovalStatus}
        for student in students:
            grouped[student.status.value].append(student)

        return StudentListResponse(
            pending=grouped["pending"],
            approved=grouped["approved"],
            rejected=grouped["rejected"],
            counts={key: len(value) for key, value in grouped.items()}
        )

    def get_student(self, student_id: int) -> Optional[Student]:
        with get_db_session() as db:
            result = db.execute(
                text(f"SELECT {STUDENT_COLUMNS} FROM students WHERE student_id = :id"),
                {"id": student_id}
            )
            students = self._to_students(db, result.fetchall())
        return students[0] if students else None

    def update_status(self, student_id: int, status: ApprovalStatus) -> None:
        """
        Set a student's approval status.

        Only the status column changes. Raises HTTPException(404) for an
        unknown id, in which case nothing is written.
        """
        with get_db_session() as db:
            result = db.execute(
                text("UPDATE students SET status = :status WHERE student_id = :id"),
                {"id": student_id, "status": status.value}
            )
            if result.rowcount == 0:
                raise HTTPException(status_code=404, detail="Student not found")

        logger.info("Student %s status set to %s", student_id, status.value)

    def list_skill_names(self) -> List[str]:
        rows = execute_raw_sql("SELECT skill_name FROM skills ORDER BY skill_name")
        return [r["skill_name"] for r in rows]


def get_student_service() -> StudentService:
    """Get student service instance."""
    return StudentService()
