"""
Request schemas for the recommendation and teammate APIs.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator
from skillhive.core.models import EducationLevel


def _strip_user_id(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("user_id must not be blank")
    return v


class RecommendHackathonsRequest(BaseModel):
    """Request schema for hackathon recommendations."""

    user_id: str = Field(
        ..., min_length=1, description="ID of the acting user", examples=["u-001"]
    )

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        return _strip_user_id(v)

    model_config = {"json_schema_extra": {"examples": [{"user_id": "u-001"}]}}


class MatchTeammatesRequest(BaseModel):
    """Request schema for the teammate shortlist."""

    user_id: str = Field(..., min_length=1, description="ID of the acting user")
    query: str = Field(
        default="", max_length=200, description="Substring of a candidate's name or skills"
    )
    education: Optional[EducationLevel] = Field(
        default=None, description="Only keep candidates with this education level"
    )

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        return _strip_user_id(v)

    model_config = {
        "json_schema_extra": {
            "examples": [{"user_id": "u-001", "query": "react", "education": "Undergraduate"}]
        }
    }
