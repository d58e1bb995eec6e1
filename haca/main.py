"""
HACA Placement Platform - Main Application

FastAPI backend with:
- PostgreSQL for accounts, student profiles and skills
- MongoDB for cached AI skill analyses
- OpenAI-compatible AI for skill analysis text
- JWT authentication

Run: uvicorn haca.main:app --reload
Admin account: python scripts/setup_admin.py
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from haca.api.routes import api_router
from haca.core.config import get_settings
from haca.db.mongodb import init_mongo_indexes
from haca.db.postgres import engine
from haca.db.schema import create_tables

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="HACA Placement Platform",
    description="""
    Students register profiles, admins approve them, recruiters search them.

    ## Features
    - **Authentication**: JWT-based auth for students and admins
    - **Students**: Registration with skills, profile dashboard
    - **Admin**: Approve or reject student profiles
    - **Recruiters**: Free-text candidate search over approved students
    - **AI**: Skill market analysis (display only)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create missing tables and MongoDB indexes on startup."""
    create_tables(engine)

    try:
        init_mongo_indexes()
    except Exception as e:
        logger.warning("MongoDB index initialization failed: %s", e)


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "HACA Placement Platform"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from haca.db.postgres import test_postgres_connection
    from haca.db.mongodb import test_mongo_connection

    return {
        "status": "healthy",
        "database": "connected" if test_postgres_connection() else "disconnected",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
