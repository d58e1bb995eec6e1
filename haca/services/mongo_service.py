"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. skill_analyses - AI analysis text, one document per distinct input
"""

from datetime import datetime
from typing import Optional
from pymongo.collection import Collection

from haca.db.mongodb import get_collection, COLLECTIONS


def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


# ============================================================
# SKILL ANALYSES COLLECTION
# Caches AI output so the same text is never analyzed twice
# ============================================================

class SkillAnalysisCacheService:
    """
    Handles cached skill analysis documents.
    """

    def __init__(self, collection: Collection = None):
        self.collection: Collection = (
            collection if collection is not None
            else get_collection(COLLECTIONS["skill_analyses"])
        )

    def get_by_hash(self, text_hash: str) -> Optional[dict]:
        """Fetch a cached analysis by text hash."""
        doc = self.collection.find_one({"text_hash": text_hash})
        return serialize_doc(doc)

    def store(self, text_hash: str, skills_text: str, analysis: str, model: str) -> None:
        """
        Insert or replace the analysis for a text hash.

        Document shape:
        {
            "text_hash": "md5 of normalized text",
            "text": "React, AWS",
            "analysis": "...",
            "model": "gemini-2.0-flash",
            "created_at": datetime
        }
        """
        self.collection.update_one(
            {"text_hash": text_hash},
            {"$set": {
                "text": skills_text,
                "analysis": analysis,
                "model": model,
                "created_at": datetime.utcnow()
            }},
            upsert=True
        )
