"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: Internal records (Student, Skill) shared by services
- Schemas: API contract (what client sends/receives)
"""
