"""
Student Registration - turn a submitted form into an account, a pending
student profile and its skill links.

STEPS:
1. Create account
2. Sign in (issues the token the client keeps)
3. Insert student row with status 'pending'
4. Find-or-create each skill and link it to the student

Each step runs in its own database session; there is no transaction
spanning them. If step 3 fails the account from step 1 stays behind.
Step 4 is best-effort: a failing skill is logged and skipped and the
registration still succeeds.
"""

import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from haca.db.postgres import get_db_session
from haca.schemas.schemas import (
    ApprovalStatus, RegistrationResponse, StudentRegistrationRequest, UserRole
)
from haca.services.account_service import create_user, authenticate_user

logger = logging.getLogger(__name__)


def parse_skill_names(raw: str) -> List[str]:
    """
    Split comma-separated skills.

    Names are trimmed and blanks dropped; case is kept as typed.
    Repeats collapse to the first occurrence.
    """
    names = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return names


class RegistrationService:

    def register(self, data: StudentRegistrationRequest) -> RegistrationResponse:
        logger.info("Starting registration for %s", data.email)

        # 1. Create user account
        user_id = create_user(data.email, data.password, UserRole.student)

        # 2. Sign in; the profile belongs to this session's account
        try:
            session = authenticate_user(data.email, data.password)
        except HTTPException as e:
            logger.error("Sign in after account creation failed for %s: %s", data.email, e.detail)
            raise HTTPException(
                status_code=e.status_code,
                detail=f"Account created but sign in failed: {e.detail}"
            )

        # 3. Create student profile
        try:
            student_id = self._insert_student(user_id, data)
        except Exception as e:
            logger.warning("Account %s left without a student profile", user_id)
            logger.error("Student profile creation error: %s", e)
            raise HTTPException(status_code=500, detail=f"Failed to create student profile. {e}")

        logger.info("Student profile %s created for user %s", student_id, user_id)

        # 4. Add skills
        linked, failed = [], []
        for skill_name in parse_skill_names(data.skills):
            try:
                skill_id = self._find_or_create_skill(skill_name)
                self._link_skill(student_id, skill_id)
                linked.append(skill_name)
            except Exception as e:
                # Skip this skill rather than failing the whole registration
                logger.error("Skill '%s' not added for student %s: %s", skill_name, student_id, e)
                failed.append(skill_name)

        return RegistrationResponse(
            access_token=session["access_token"],
            user_id=user_id,
            student_id=student_id,
            status=ApprovalStatus.pending,
            skills_linked=linked,
            skills_failed=failed,
            message="Your profile has been submitted for admin approval"
        )

    def _insert_student(self, user_id: int, data: StudentRegistrationRequest) -> int:
        with get_db_session() as db:
            result = db.execute(
                text("""
                    INSERT INTO students (user_id, name, batch, school, years_of_experience,
                                          linkedin_url, resume_url, status)
                    VALUES (:user_id, :name, :batch, :school, :years_of_experience,
                            :linkedin_url, :resume_url, :status)
                    RETURNING student_id
                """),
                {
                    "user_id": user_id,
                    "name": data.name,
                    "batch": data.batch.value,
                    "school": data.school.value,
                    "years_of_experience": data.years_of_experience,
                    "linkedin_url": str(data.linkedin_url),
                    "resume_url": str(data.resume_url) if data.resume_url else None,
                    "status": ApprovalStatus.pending.value
                }
            )
            return result.fetchone()[0]

    def _lookup_skill(self, skill_name: str) -> Optional[int]:
        with get_db_session() as db:
            result = db.execute(
                text("SELECT skill_id FROM skills WHERE skill_name = :name"),
                {"name": skill_name}
            )
            row = result.fetchone()
        return row[0] if row else None

    def _find_or_create_skill(self, skill_name: str) -> int:
        """
        Exact, case-sensitive lookup; insert when missing.

        If another registration inserts the same name between the lookup
        and the insert, the unique constraint rejects ours and the
        existing row is used.
        """
        skill_id = self._lookup_skill(skill_name)
        if skill_id is not None:
            return skill_id

        try:
            with get_db_session() as db:
                result = db.execute(
                    text("INSERT INTO skills (skill_name) VALUES (:name) RETURNING skill_id"),
                    {"name": skill_name}
                )
                skill_id = result.fetchone()[0]
        except IntegrityError:
            skill_id = self._lookup_skill(skill_name)
            if skill_id is None:
                raise
            logger.info("Skill %s created concurrently, reusing id=%s", skill_name, skill_id)
            return skill_id

        logger.info("New skill created: %s (id=%s)", skill_name, skill_id)
        return skill_id

    def _link_skill(self, student_id: int, skill_id: int) -> None:
        with get_db_session() as db:
            db.execute(
                text("INSERT INTO student_skills (student_id, skill_id) VALUES (:student_id, :skill_id)"),
                {"student_id": student_id, "skill_id": skill_id}
            )


def get_registration_service() -> RegistrationService:
    """Get registration service instance."""
    return RegistrationService()
