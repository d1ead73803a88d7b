"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Request
from backend.middleware.logging import bind_user_context
from backend.schemas.response.dashboard import DashboardResponse
from backend.services.dashboard_service import dashboard_service

router = APIRouter()


@router.get("/dashboard/{user_id}", response_model=DashboardResponse)
async def get_dashboard(user_id: str, request: Request):
    """Enrolled hackathons with progress, their count, and recommendations."""
    bind_user_context(request, user_id)
    result = await dashboard_service.get_dashboard(user_id)
    return DashboardResponse(success=True, **result)
