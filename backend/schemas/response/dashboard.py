"""
Response schemas for the dashboard API.
"""
from typing import List, Optional
from pydantic import BaseModel, Field
from backend.schemas.response.hackathon import HackathonItem, HackathonRecommendation
from backend.schemas.response.profile import SkillTag


class DashboardProfile(BaseModel):
    id: str
    name: str
    education: str
    email: Optional[str] = None
    skills: List[SkillTag] = Field(default_factory=list)


class EnrolledHackathon(HackathonItem):
    """An enrolled hackathon with timeline figures."""

    progress_percent: float = Field(..., ge=0, le=100, description="Elapsed share of the event")
    status_text: str = Field(..., description="'Starts in N days', 'N days left' or 'Completed'")


class DashboardResponse(BaseModel):
    """Response schema for the dashboard summary."""

    success: bool = Field(True, description="Indicates successful operation")
    user_id: str
    profile: Optional[DashboardProfile] = None
    enrolled: List[EnrolledHackathon] = Field(default_factory=list)
    enrolled_count: int = 0
    recommendations: List[HackathonRecommendation] = Field(default_factory=list)
