"""
Response schemas for teammate matching.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class TeammateProfile(BaseModel):
    id: str
    name: str
    education: str
    skills: List[str] = Field(default_factory=list)
    email: Optional[str] = None


class TeammateMatch(BaseModel):
    """A candidate with the skills shared with the user."""

    profile: TeammateProfile
    match_percentage: int = Field(..., ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list)


class TeammateMatchResponse(BaseModel):
    """Response schema for the teammate shortlist."""

    success: bool = Field(True, description="Indicates successful operation")
    user_id: str
    matches: List[TeammateMatch] = Field(default_factory=list)
    total: int = Field(..., description="Number of matches returned")
