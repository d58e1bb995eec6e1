"""
Models module - Pydantic records for students and skills.

Services build these from database rows; routes return them as-is.
"""
from haca.models.student import Skill, Student, StudentListResponse

__all__ = ["Skill", "Student", "StudentListResponse"]
