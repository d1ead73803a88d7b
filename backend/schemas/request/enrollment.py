"""
Request schemas for the enrollment API.
"""

from pydantic import BaseModel, Field, field_validator


class CreateEnrollmentRequest(BaseModel):
    """Request schema for enrolling in a hackathon."""

    user_id: str = Field(..., min_length=1, description="ID of the acting user")
    hackathon_id: str = Field(..., min_length=1, description="Hackathon to join")

    @field_validator("user_id", "hackathon_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only identifiers."""
        if not v.strip():
            raise ValueError("Identifier must not be blank")
        return v.strip()

    model_config = {
        "json_schema_extra": {"examples": [{"user_id": "u-001", "hackathon_id": "h-101"}]}
    }
