"""
HACA Placement Platform
Student registration, admin approval and recruiter search.

Architecture:
- PostgreSQL: Accounts, student profiles, skills
- MongoDB: Cached AI skill analyses
- OpenAI-compatible AI: Skill analysis text only (never used for ranking)
"""

__version__ = "1.0.0"
