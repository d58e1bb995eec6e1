"""
Authentication Routes

POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info

Student accounts are created through POST /students/register;
the admin account through scripts/setup_admin.py.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text

from haca.db.postgres import get_db_session
from haca.core.auth import get_current_user
from haca.services.account_service import authenticate_user
from haca.schemas.schemas import LoginRequest, TokenResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    session = authenticate_user(request.email, request.password)
    return TokenResponse(**session)


@router.get("/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    with get_db_session() as db:
        result = db.execute(
            text("SELECT user_id, email, is_active, created_at FROM users WHERE user_id = :id"),
            {"id": user["user_id"]}
        )
        row = result.fetchone()

    return UserResponse(
        user_id=row[0], email=row[1], role=user["role"], is_admin=user["is_admin"],
        is_active=row[2], created_at=row[3]
    )
