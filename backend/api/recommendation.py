"""
Recommendation API endpoints.

This module provides the hackathon recommendation endpoint.
"""

from fastapi import APIRouter, Request
from backend.middleware.logging import bind_user_context
from backend.schemas.request.recommendation import RecommendHackathonsRequest
from backend.schemas.response.hackathon import RecommendationsResponse
from backend.services.hackathon_service import hackathon_service

router = APIRouter()


@router.post("/recommend", response_model=RecommendationsResponse)
async def recommend_hackathons(request: RecommendHackathonsRequest, http_request: Request):
    """
    Get hackathon recommendations for a user.

    Returns at most six open hackathons sharing a skill with the user and not
    yet joined.

    Raises:
        ProfileNotFoundException: If the user has no profile (404)
    """
    bind_user_context(http_request, request.user_id)
    result = await hackathon_service.recommend(request.user_id)
    return RecommendationsResponse(success=True, **result)
