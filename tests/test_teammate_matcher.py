"""
Tests for TeammateMatcher.
"""

import pytest

from skillhive import match_teammates
from skillhive.core.teammate_matcher import TeammateMatcher
from tests.factories import make_profile


@pytest.fixture
def matcher():
    return TeammateMatcher()


class TestScore:

    def test_small_candidate_fully_covered_scores_hundred(self, matcher):
        result = matcher.score(make_profile("c1", ["python"]), ["python", "react", "go"])
        assert result.matching_skills == ("python",)
        assert result.match_percentage == 100

    def test_denominator_is_smaller_set(self, matcher):
        candidate = make_profile("c1", ["python", "react", "go", "rust"])
        result = matcher.score(candidate, ["python", "java", "react"])
        # 2 common over min(4, 3)
        assert result.match_percentage == 67

    def test_duplicates_do_not_inflate(self, matcher):
        candidate = make_profile("c1", ["python", "python", "go"])
        result = matcher.score(candidate, ["python", "python"])
        assert result.match_percentage == 100
        assert result.matching_skills == ("python",)

    def test_common_skills_follow_candidate_order(self, matcher):
        candidate = make_profile("c1", ["rust", "go", "python"])
        assert matcher.score(candidate, ["python", "rust"]).matching_skills == ("rust", "python")


class TestMatch:

    def test_candidate_without_skills_excluded(self, matcher):
        candidates = [make_profile("c1", [])]
        assert matcher.match(["python", "react"], candidates) == []

    def test_zero_overlap_excluded(self, matcher, sample_profiles):
        results = matcher.match(["java"], sample_profiles)
        assert [r.item.id for r in results] == ["u3"]

    def test_sorted_descending(self, matcher, sample_profiles):
        results = matcher.match(["python", "react"], sample_profiles)
        percentages = [r.match_percentage for r in results]
        assert percentages == sorted(percentages, reverse=True)

    def test_ties_keep_fetch_order(self, matcher):
        candidates = [
            make_profile("a", ["python", "go"]),
            make_profile("b", ["python"]),
            make_profile("c", ["go", "rust"]),
            make_profile("d", ["python", "go"]),
        ]
        results = matcher.match(["python", "go"], candidates)
        # a, b and d score 100; c scores 50
        assert [r.item.id for r in results] == ["a", "b", "d", "c"]

    def test_excludes_current_user(self, matcher, sample_profiles):
        results = matcher.match(["python"], sample_profiles, exclude_user_id="u2")
        assert "u2" not in [r.item.id for r in results]

    def test_user_without_skills_matches_nobody(self, matcher, sample_profiles):
        assert matcher.match([], sample_profiles) == []

    def test_idempotent(self, matcher, sample_profiles):
        first = matcher.match(["python", "react"], sample_profiles)
        assert first == matcher.match(["python", "react"], sample_profiles)

    def test_percentages_in_range(self, matcher, sample_profiles):
        for result in matcher.match(["python", "react", "flutter", "rust"], sample_profiles):
            assert isinstance(result.match_percentage, int)
            assert 0 < result.match_percentage <= 100


def test_module_level_match_excludes_self(sample_profiles):
    me = sample_profiles[0]
    results = match_teammates(me, sample_profiles)
    ids = [r.item.id for r in results]
    assert me.id not in ids
    assert ids[0] == "u2"
