"""
Skill Routes

GET /skills - All known skill names
POST /skills/analyze - AI analysis of a skills description
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from haca.services.skill_analysis_service import get_skill_analysis_service
from haca.services.student_service import get_student_service
from haca.schemas.schemas import SkillAnalysisRequest, SkillAnalysisResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills", tags=["Skills"])


@router.get("", response_model=List[str])
async def list_skills():
    return get_student_service().list_skill_names()


@router.post("/analyze", response_model=SkillAnalysisResponse)
def analyze_skills(request: SkillAnalysisRequest):
    """
    Get AI insights on job market demand for the given skills.

    Display only; has no effect on search ranking. Plain def so the
    blocking AI call runs in the threadpool.
    """
    service = get_skill_analysis_service()
    try:
        analysis, cached = service.analyze(request.text)
    except Exception as e:
        logger.error("Error in skill analysis: %s", e)
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error occurred")

    return SkillAnalysisResponse(analysis=analysis, cached=cached)
