"""
Response schemas for the enrollment API.
"""
from typing import List
from pydantic import BaseModel, Field


class EnrollmentListResponse(BaseModel):
    """Hackathon IDs a user is enrolled in."""

    success: bool = Field(True, description="Indicates successful operation")
    user_id: str
    hackathon_ids: List[str] = Field(default_factory=list)
    total: int


class CreateEnrollmentResponse(BaseModel):
    """Response schema for a successful enrollment."""

    success: bool = Field(True, description="Indicates successful operation")
    user_id: str
    hackathon_id: str
    outcome: str = Field(..., description="Always 'success' for a 201 response")
    enrolled_ids: List[str] = Field(default_factory=list, description="All enrolled hackathon IDs")
    message: str = Field("Successfully enrolled", description="Success message")
