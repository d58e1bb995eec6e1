"""
Table definitions.

Queries elsewhere are written as raw SQL with text(); these definitions
exist so the schema can be created (and recreated in tests) with
metadata.create_all().
"""

from sqlalchemy import (
    Boolean, Column, DateTime, ForeignKey, Integer, MetaData, String, Table, func, true
)

metadata = MetaData()

users = Table(
    "users", metadata,
    Column("user_id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), unique=True, nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="student"),
    Column("is_active", Boolean, nullable=False, server_default=true()),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
)

students = Table(
    "students", metadata,
    Column("student_id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.user_id"), unique=True, nullable=False),
    Column("name", String(100), nullable=False),
    Column("batch", String(4), nullable=False),
    Column("school", String(20), nullable=False),
    Column("years_of_experience", Integer, nullable=False, server_default="0"),
    Column("linkedin_url", String(500), nullable=False),
    Column("resume_url", String(500)),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
)

skills = Table(
    "skills", metadata,
    Column("skill_id", Integer, primary_key=True, autoincrement=True),
    # Case-sensitive: "react" and "React" are different rows
    Column("skill_name", String(100), unique=True, nullable=False),
)

student_skills = Table(
    "student_skills", metadata,
    Column("student_id", Integer, ForeignKey("students.student_id"), primary_key=True),
    Column("skill_id", Integer, ForeignKey("skills.skill_id"), primary_key=True),
)

admin_login = Table(
    "admin_login", metadata,
    Column("admin_id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(50), unique=True, nullable=False),
    Column("email", String(255), nullable=False),
    Column("user_id", Integer, ForeignKey("users.user_id"), nullable=False),
)


def create_tables(bind) -> None:
    """Create any missing tables."""
    metadata.create_all(bind=bind)
