"""
Response schemas for hackathon listings and recommendations.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class HackathonItem(BaseModel):
    """A hackathon as returned by the store."""

    id: str
    title: str
    description: str = ""
    skills_required: List[str] = Field(default_factory=list)
    start_date: str = Field(..., description="ISO-8601 start timestamp")
    end_date: str = Field(..., description="ISO-8601 end timestamp")
    mode: str
    status: str
    prize_pool: Optional[str] = None
    organizer: Optional[str] = None
    location: Optional[str] = None
    max_team_size: Optional[int] = None
    image_url: Optional[str] = None


class HackathonListItem(HackathonItem):
    """A listing entry with the user's enrollment state."""

    is_enrolled: bool = Field(False, description="Whether the user is enrolled")


class HackathonListResponse(BaseModel):
    """Response schema for the hackathon listing."""

    success: bool = Field(True, description="Indicates successful operation")
    hackathons: List[HackathonListItem] = Field(default_factory=list)
    total: int = Field(..., description="Number of hackathons returned")


class HackathonRecommendation(BaseModel):
    """A recommended hackathon with its overlap."""

    hackathon: HackathonItem
    match_percentage: int = Field(..., ge=0, le=100, description="Display percentage")
    matching_skills: List[str] = Field(
        default_factory=list, description="Required skills the user has"
    )


class RecommendationsResponse(BaseModel):
    """Response schema for hackathon recommendations."""

    success: bool = Field(True, description="Indicates successful operation")
    user_id: str = Field(..., description="ID of the acting user")
    recommendations: List[HackathonRecommendation] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "user_id": "u-001",
                "recommendations": [
                    {
                        "hackathon": {
                            "id": "h-101",
                            "title": "AI Sprint",
                            "description": "Build with ML",
                            "skills_required": ["python", "machine-learning"],
                            "start_date": "2026-11-01T00:00:00",
                            "end_date": "2026-11-03T00:00:00",
                            "mode": "Online",
                            "status": "Upcoming",
                        },
                        "match_percentage": 50,
                        "matching_skills": ["python"],
                    }
                ],
            }
        }
    }
