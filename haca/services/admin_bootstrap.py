"""
Admin Bootstrap - make sure the admin account exists.

Run out-of-band (scripts/setup_admin.py), never per request.
Safe to run any number of times:
1. Create missing tables
2. Create the admin user if the email is unknown
3. Add the admin_login lookup row if missing
"""

import logging

from fastapi import HTTPException
from sqlalchemy import text

from haca.core.config import get_settings
from haca.db.postgres import engine, get_db_session
from haca.db.schema import create_tables
from haca.schemas.schemas import UserRole
from haca.services.account_service import create_user, get_user_by_email

logger = logging.getLogger(__name__)


def ensure_admin() -> dict:
    """
    Returns {"user_id", "created"} for the admin account.

    Raises HTTPException(400) if the admin email belongs to a non-admin
    account, which needs manual attention.
    """
    settings = get_settings()
    create_tables(engine)

    created = False
    user = get_user_by_email(settings.admin_email)
    if user is None:
        user_id = create_user(settings.admin_email, settings.admin_password, UserRole.admin)
        created = True
    elif user["role"] != UserRole.admin.value:
        raise HTTPException(
            status_code=400,
            detail=f"{settings.admin_email} is registered as {user['role']}, not admin"
        )
    else:
        user_id = user["user_id"]

    with get_db_session() as db:
        result = db.execute(
            text("SELECT admin_id FROM admin_login WHERE user_id = :id"),
            {"id": user_id}
        )
        if not result.fetchone():
            db.execute(
                text("""
                    INSERT INTO admin_login (username, email, user_id)
                    VALUES (:username, :email, :user_id)
                """),
                {"username": settings.admin_username, "email": settings.admin_email, "user_id": user_id}
            )

    if created:
        logger.info("Admin account %s created", settings.admin_email)
    else:
        logger.info("Admin account %s already present", settings.admin_email)

    return {"user_id": user_id, "created": created}
