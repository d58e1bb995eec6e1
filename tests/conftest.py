import os

# Settings are read once at import time; point them at SQLite first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"
os.environ["AI_API_KEY"] = ""
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from haca.db.postgres import engine
from haca.db.schema import metadata
from haca.main import app
from haca.services.admin_bootstrap import ensure_admin
from haca.core.config import get_settings


@pytest.fixture(autouse=True)
def test_db():
    # Create the tables
    metadata.create_all(bind=engine)
    yield
    # Drop the tables
    metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


def registration_form(**overrides):
    form = {
        "name": "Asha Menon",
        "email": "asha@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "batch": "C4",
        "school": "Coding",
        "years_of_experience": 3,
        "linkedin_url": "https://linkedin.com/in/asha",
        "resume_url": "",
        "skills": "React, AWS",
    }
    form.update(overrides)
    return form


@pytest.fixture
def register(client):
    """Register a student and return the response JSON."""
    def _register(**overrides):
        response = client.post("/api/students/register", json=registration_form(**overrides))
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def admin_headers(client):
    ensure_admin()
    settings = get_settings()
    response = client.post(
        "/api/auth/login",
        json={"email": settings.admin_email, "password": settings.admin_password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
