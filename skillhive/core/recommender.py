"""
Hackathon recommendation

Filters open hackathons down to the ones that share at least one skill with
the user and have not been joined yet, then keeps the first N.
"""

from typing import Iterable, Optional

from skillhive.core.config import DEFAULT_CONFIG, MatchingParams
from skillhive.core.errors import InvalidParameterError
from skillhive.core.logging_config import LoggerMixin
from skillhive.core.models import Hackathon, HackathonStatus, MatchResult
from skillhive.core.skills import match_percentage, overlap


class HackathonRecommender(LoggerMixin):
    """Skill-based hackathon recommender"""

    def __init__(
        self,
        limit: Optional[int] = None,
        rank_by_match_strength: Optional[bool] = None,
        params: MatchingParams = DEFAULT_CONFIG.matching,
    ):
        """
        Args:
            limit: Maximum number of recommendations (None uses params)
            rank_by_match_strength: Sort survivors by number of matching
                skills before truncating (None uses params, off by default)
            params: Matching parameters
        """
        self.limit = params.recommendation_limit if limit is None else limit
        if self.limit < 0:
            raise InvalidParameterError("limit", self.limit, "must be non-negative")
        self.rank_by_match_strength = (
            params.rank_by_match_strength
            if rank_by_match_strength is None
            else rank_by_match_strength
        )
        self.active_statuses = frozenset(
            HackathonStatus.parse(status) for status in params.active_statuses
        )

    def score(self, hackathon: Hackathon, user_skills: Iterable[str]) -> MatchResult[Hackathon]:
        """
        Annotate a hackathon with the user's matching skills.

        The percentage is relative to the hackathon's required skills and is
        for display only; it never affects filtering.
        """
        matching = overlap(hackathon.skills_required, user_skills)
        return MatchResult(
            item=hackathon,
            match_percentage=match_percentage(len(matching), len(hackathon.skills_required)),
            matching_skills=matching,
        )

    def recommend(
        self,
        user_skills: Iterable[str],
        hackathons: Iterable[Hackathon],
        enrolled_ids: Iterable[str] = (),
    ) -> list[MatchResult[Hackathon]]:
        """
        Recommend hackathons for a skill set

        Args:
            user_skills: The current user's skill tags
            hackathons: Hackathon snapshot in fetch order
            enrolled_ids: IDs the user is already enrolled in

        Returns:
            At most ``limit`` results, in fetch order unless ranking is enabled
        """
        skills = tuple(user_skills)
        enrolled = set(enrolled_ids)

        candidates = []
        for hackathon in hackathons:
            if hackathon.id in enrolled:
                continue
            if hackathon.status not in self.active_statuses:
                continue
            result = self.score(hackathon, skills)
            if not result.matching_skills:
                continue
            candidates.append(result)

        if self.rank_by_match_strength:
            candidates.sort(key=lambda r: len(r.matching_skills), reverse=True)

        recommendations = candidates[: self.limit]

        self.logger.debug(
            "hackathons_recommended",
            eligible=len(candidates),
            returned=len(recommendations),
            enrolled=len(enrolled),
        )
        return recommendations
