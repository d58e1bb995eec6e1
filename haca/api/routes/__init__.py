"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from haca.api.routes.auth_routes import router as auth_router
from haca.api.routes.student_routes import router as student_router
from haca.api.routes.admin_routes import router as admin_router
from haca.api.routes.skill_routes import router as skill_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(student_router)
api_router.include_router(admin_router)
api_router.include_router(skill_router)
