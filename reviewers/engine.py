import logging

from django.db import transaction

from .errors import (
    AlreadyMergedError,
    InternalConsistencyError,
    NoCandidateError,
    NoTeamError,
    ReviewerNotAssignedError,
    operation,
)
from .models import PullRequest
from .registry import TeamRegistry
from .selector import ReviewerSelector
from .store import PullRequestStore

logger = logging.getLogger(__name__)


class AssignmentEngine:
    """
    Создание, переназначение и мерж PR. Каждая операция - одна транзакция.
    """

    @classmethod
    @operation('engine.pull_request.Create')
    @transaction.atomic
    def create_pull_request(cls, pr_id: str, pr_name: str, author_id: str, created_at=None, rng=None) -> PullRequest:
        team_name = TeamRegistry.get_team_of(author_id)
        logger.debug("author team author_id=%s team=%s", author_id, team_name)

        reviewer_ids = ReviewerSelector.select_reviewers(team_name, author_id, rng=rng)
        for reviewer_id in reviewer_ids:
            logger.info("reviewer selected pr_id=%s user_id=%s", pr_id, reviewer_id)

        PullRequestStore.insert(pr_id, pr_name, author_id, reviewer_ids, created_at=created_at)

        logger.info("pull request created pr_id=%s reviewers_count=%d", pr_id, len(reviewer_ids))
        return PullRequestStore.get(pr_id)

    @classmethod
    @operation('engine.pull_request.Merge')
    @transaction.atomic
    def merge_pull_request(cls, pr_id: str) -> PullRequest:
        updated = PullRequestStore.mark_merged(pr_id)
        pr = PullRequestStore.get(pr_id)

        if updated:
            logger.info("pull request merged pr_id=%s", pr_id)
        elif pr.status != PullRequest.Status.MERGED:
            raise InternalConsistencyError(f"PR '{pr_id}' is {pr.status}, not OPEN")

        return pr

    @classmethod
    @operation('engine.pull_request.Reassign')
    @transaction.atomic
    def reassign_reviewer(cls, pr_id: str, old_user_id: str) -> tuple:
        pr = PullRequestStore.get_for_update(pr_id)

        if pr.is_merged:
            raise AlreadyMergedError(f"PR '{pr_id}' is already merged")

        if old_user_id not in PullRequestStore.assigned_reviewer_ids(pr_id):
            raise ReviewerNotAssignedError(f"user '{old_user_id}' is not a reviewer of PR '{pr_id}'")

        team_name = TeamRegistry.get_team_of(pr.author_id)
        if not team_name:
            raise NoTeamError(f"author '{pr.author_id}' has no team")

        new_user_id = PullRequestStore.find_replacement(team_name, pr.author_id, old_user_id, pr_id)
        if new_user_id is None:
            raise NoCandidateError(f"no replacement for '{old_user_id}' in team '{team_name}'")

        PullRequestStore.replace_reviewer(pr_id, old_user_id, new_user_id)

        logger.info("reviewer reassigned pr_id=%s old=%s new=%s", pr_id, old_user_id, new_user_id)
        return PullRequestStore.get(pr_id), new_user_id
