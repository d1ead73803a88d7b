"""
Profile API endpoints.
"""

from fastapi import APIRouter, Request
from backend.middleware.logging import bind_user_context
from backend.schemas.response.profile import ProfileResponse
from backend.services.profile_service import profile_service

router = APIRouter()


@router.get("/profiles/{user_id}", response_model=ProfileResponse)
async def get_profile(user_id: str, request: Request):
    """
    Get a user's profile with skill labels.

    Raises:
        ProfileNotFoundException: If the profile does not exist (404)
    """
    bind_user_context(request, user_id)
    result = await profile_service.get_profile(user_id)
    return ProfileResponse(success=True, **result)
