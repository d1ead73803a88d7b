"""
Unit tests for request schemas.
"""
import pytest
from pydantic import ValidationError

from skillhive.core.models import EducationLevel
from backend.schemas.request import (
    CreateEnrollmentRequest,
    MatchTeammatesRequest,
    RecommendHackathonsRequest,
)


class TestRecommendHackathonsRequest:

    def test_valid(self):
        assert RecommendHackathonsRequest(user_id=" u1 ").user_id == "u1"

    @pytest.mark.parametrize("user_id", ["", "   "])
    def test_blank_rejected(self, user_id):
        with pytest.raises(ValidationError):
            RecommendHackathonsRequest(user_id=user_id)


class TestMatchTeammatesRequest:

    def test_defaults(self):
        request = MatchTeammatesRequest(user_id="u1")
        assert request.query == ""
        assert request.education is None

    def test_education_parsed(self):
        request = MatchTeammatesRequest(user_id="u1", education="PhD")
        assert request.education == EducationLevel.PHD

    def test_unknown_education_rejected(self):
        with pytest.raises(ValidationError):
            MatchTeammatesRequest(user_id="u1", education="Kindergarten")


class TestCreateEnrollmentRequest:

    def test_valid(self):
        request = CreateEnrollmentRequest(user_id="u1", hackathon_id=" h1 ")
        assert request.hackathon_id == "h1"

    def test_missing_hackathon(self):
        with pytest.raises(ValidationError):
            CreateEnrollmentRequest(user_id="u1")

    def test_blank_hackathon(self):
        with pytest.raises(ValidationError):
            CreateEnrollmentRequest(user_id="u1", hackathon_id="  ")
