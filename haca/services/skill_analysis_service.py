"""
Skill Analysis Service - AI commentary on a student's skills.

Flow: normalize text -> MongoDB cache lookup -> AI call -> cache store.

The cache is an optimization only. If MongoDB is down the analysis is
still produced; the failure is logged.
"""

import hashlib
import logging
from typing import Tuple

from pymongo.errors import PyMongoError

from haca.services.ai_client import AIClient, get_ai_client
from haca.services.mongo_service import SkillAnalysisCacheService

logger = logging.getLogger(__name__)


def normalize_text(skills_text: str) -> str:
    """Collapse whitespace so trivially different inputs share a cache entry."""
    return " ".join(skills_text.split())


def compute_text_hash(skills_text: str) -> str:
    return hashlib.md5(skills_text.encode()).hexdigest()


class SkillAnalysisService:

    def __init__(self, ai_client: AIClient = None, cache: SkillAnalysisCacheService = None):
        self.ai_client = ai_client or get_ai_client()
        self.cache = cache

    def _get_cache(self) -> SkillAnalysisCacheService:
        if self.cache is None:
            self.cache = SkillAnalysisCacheService()
        return self.cache

    def analyze(self, skills_text: str) -> Tuple[str, bool]:
        """
        Returns (analysis, cached).

        AI failures propagate to the caller.
        """
        normalized = normalize_text(skills_text)
        text_hash = compute_text_hash(normalized)

        try:
            doc = self._get_cache().get_by_hash(text_hash)
            if doc:
                return doc["analysis"], True
        except PyMongoError as e:
            logger.warning("Skill analysis cache lookup failed: %s", e)

        analysis = self.ai_client.analyze_skills(normalized)

        try:
            self._get_cache().store(text_hash, normalized, analysis, self.ai_client.model)
        except PyMongoError as e:
            logger.warning("Skill analysis cache store failed: %s", e)

        return analysis, False


def get_skill_analysis_service() -> SkillAnalysisService:
    """Get skill analysis service instance."""
    return SkillAnalysisService()
