"""
Hackathon listing endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Query
from skillhive.core.models import HackathonMode, HackathonStatus
from backend.schemas.response.hackathon import HackathonListResponse
from backend.services.hackathon_service import hackathon_service

router = APIRouter()


@router.get("/hackathons", response_model=HackathonListResponse)
async def list_hackathons(
    user_id: Optional[str] = Query(None, description="Mark enrollment state for this user"),
    q: str = Query("", max_length=200, description="Substring of title or description"),
    status: Optional[HackathonStatus] = Query(None),
    mode: Optional[HackathonMode] = Query(None),
    skill: Optional[str] = Query(None, description="Required skill tag"),
):
    """
    List hackathons ordered by start date.

    Filters combine with AND. An unknown status or mode is rejected with 422.
    """
    result = await hackathon_service.list_hackathons(
        user_id=user_id, query=q, status=status, mode=mode, skill=skill
    )
    return HackathonListResponse(success=True, **result)
