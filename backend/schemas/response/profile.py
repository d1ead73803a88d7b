"""
Response schemas for the profile API.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class SkillTag(BaseModel):
    """A skill tag with its display label."""
    value: str = Field(..., description="Skill tag")
    label: str = Field(..., description="Display label; the tag itself when unknown")


class ProfileResponse(BaseModel):
    """Response schema for a user profile."""

    success: bool = Field(True, description="Indicates successful operation")
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    education: str = Field(..., description="Education level")
    email: Optional[str] = Field(None, description="Contact email")
    skills: List[SkillTag] = Field(default_factory=list, description="Declared skills")
