"""
Account Service - create accounts and sign users in.

Used by the login route, the student registration workflow and the
admin bootstrap. Each call runs in its own database session.
"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import text

from haca.core.auth import hash_password, verify_password, create_access_token
from haca.db.postgres import get_db_session
from haca.schemas.schemas import UserRole

logger = logging.getLogger(__name__)


def get_user_by_email(email: str) -> Optional[dict]:
    with get_db_session() as db:
        result = db.execute(
            text("SELECT user_id, email, password_hash, role, is_active FROM users WHERE email = :email"),
            {"email": email}
        )
        row = result.fetchone()

    if not row:
        return None
    return {
        "user_id": row[0], "email": row[1], "password_hash": row[2],
        "role": row[3], "is_active": bool(row[4])
    }


def create_user(email: str, password: str, role: UserRole = UserRole.student) -> int:
    """
    Create an account and return its user_id.

    Raises HTTPException(400) when the email is taken.
    """
    with get_db_session() as db:
        # Check email exists
        result = db.execute(
            text("SELECT user_id FROM users WHERE email = :email"),
            {"email": email}
        )
        if result.fetchone():
            raise HTTPException(status_code=400, detail="Email already registered")

        result = db.execute(
            text("""
                INSERT INTO users (email, password_hash, role)
                VALUES (:email, :password_hash, :role)
                RETURNING user_id
            """),
            {
                "email": email,
                "password_hash": hash_password(password),
                "role": role.value
            }
        )
        user_id = result.fetchone()[0]

    logger.info("Created %s account %s (user_id=%s)", role.value, email, user_id)
    return user_id


def authenticate_user(email: str, password: str) -> dict:
    """
    Check credentials and issue a token.

    The role is resolved here, once, and carried in the token's
    `role` claim for every later request.
    """
    user = get_user_by_email(email)

    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not user["is_active"]:
        raise HTTPException(status_code=403, detail="Account deactivated")

    if not verify_password(password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    role = user["role"]
    token = create_access_token(data={"sub": str(user["user_id"]), "role": role})

    return {
        "access_token": token,
        "user_id": user["user_id"],
        "role": role,
        "is_admin": role == UserRole.admin.value
    }
