import logging
import random

from .errors import NoCandidateError, NoTeamError
from .registry import TeamRegistry

logger = logging.getLogger(__name__)

MAX_REVIEWERS = 2

_system_random = random.SystemRandom()


class ReviewerSelector:
    """
    Выбор ревьюверов при создании PR: активные участники команды автора,
    кроме самого автора, не больше двух.
    """

    @classmethod
    def select_reviewers(cls, team_name: str, author_id: str, rng=None) -> list:
        if not team_name:
            raise NoTeamError(f"author '{author_id}' has no team")

        candidates = [
            user.id for user in TeamRegistry.list_active_team_members(team_name, exclude_user_id=author_id)
        ]
        logger.debug("reviewer pool team=%s size=%d", team_name, len(candidates))
        if not candidates:
            raise NoCandidateError(f"no available reviewers in team '{team_name}'")

        if len(candidates) <= MAX_REVIEWERS:
            return candidates

        rng = rng or _system_random
        return rng.sample(candidates, MAX_REVIEWERS)
