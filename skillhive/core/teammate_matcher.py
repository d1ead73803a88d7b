"""
Teammate matching

Scores other profiles by skill overlap with the current user. The
percentage is normalized by the smaller of the two skill sets, so a
candidate whose few skills are all shared scores 100.
"""

from typing import Iterable, Optional

from skillhive.core.logging_config import LoggerMixin
from skillhive.core.models import MatchResult, Profile
from skillhive.core.skills import match_percentage, overlap, unique_skills


class TeammateMatcher(LoggerMixin):
    """Skill-overlap teammate matcher"""

    def score(self, candidate: Profile, user_skills: Iterable[str]) -> MatchResult[Profile]:
        """
        Score one candidate

        Args:
            candidate: Candidate profile
            user_skills: The current user's skill tags

        Returns:
            MatchResult with the common skills in the candidate's order
        """
        skills = unique_skills(user_skills)
        common = overlap(candidate.skills, skills)
        denominator = min(len(candidate.skills), len(skills))
        return MatchResult(
            item=candidate,
            match_percentage=match_percentage(len(common), denominator),
            matching_skills=common,
        )

    def match(
        self,
        user_skills: Iterable[str],
        candidates: Iterable[Profile],
        exclude_user_id: Optional[str] = None,
    ) -> list[MatchResult[Profile]]:
        """
        Rank candidates by match percentage

        Args:
            user_skills: The current user's skill tags
            candidates: Other profiles in fetch order
            exclude_user_id: The current user's ID, dropped if present

        Returns:
            Every candidate with at least one common skill, highest match
            first; ties keep fetch order
        """
        skills = unique_skills(user_skills)

        scored = [
            self.score(candidate, skills)
            for candidate in candidates
            if candidate.id != exclude_user_id
        ]
        matches = [result for result in scored if result.matching_skills]
        # list.sort is stable, so equal percentages keep fetch order
        matches.sort(key=lambda r: r.match_percentage, reverse=True)

        self.logger.debug(
            "teammates_matched",
            candidates=len(scored),
            matched=len(matches),
        )
        return matches
