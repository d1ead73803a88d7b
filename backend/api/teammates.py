"""
Teammate matching endpoints.
"""

from fastapi import APIRouter, Request
from backend.middleware.logging import bind_user_context
from backend.schemas.request.recommendation import MatchTeammatesRequest
from backend.schemas.response.teammate import TeammateMatchResponse
from backend.services.teammate_service import teammate_service

router = APIRouter()


@router.post("/teammates/match", response_model=TeammateMatchResponse)
async def match_teammates(request: MatchTeammatesRequest, http_request: Request):
    """Rank other users by shared skills, highest match first."""
    bind_user_context(http_request, request.user_id)
    result = await teammate_service.match_teammates(
        user_id=request.user_id, query=request.query, education=request.education
    )
    return TeammateMatchResponse(success=True, **result)
