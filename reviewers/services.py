from .engine import AssignmentEngine
from .models import PullRequest, Team, User
from .registry import TeamRegistry


class TeamService:
    """
    Сервис для управления командами
    """

    @classmethod
    def create_team_with_members(cls, team_name: str, members_data: list) -> Team:
        return TeamRegistry.create_team(team_name, members_data)

    @classmethod
    def get_team_with_members(cls, team_name: str) -> Team:
        return TeamRegistry.get_team(team_name)


class UserService:
    """
    Сервис для управления пользователями
    """

    @classmethod
    def set_user_active_status(cls, user_id: str, is_active: bool = True) -> User:
        return TeamRegistry.set_user_active(user_id, is_active)

    @classmethod
    def get_user_review_assignments(cls, user_id: str) -> list:
        return TeamRegistry.get_user_review_assignments(user_id)


class PullRequestService:
    """
    Сервис для управления Pull Request'ами
    """

    @classmethod
    def create_pull_request(cls, pr_id: str, pr_name: str, author_id: str, created_at=None, rng=None) -> PullRequest:
        return AssignmentEngine.create_pull_request(pr_id, pr_name, author_id, created_at=created_at, rng=rng)

    @classmethod
    def merge_pull_request(cls, pr_id: str) -> PullRequest:
        return AssignmentEngine.merge_pull_request(pr_id)

    @classmethod
    def reassign_reviewer(cls, pr_id: str, old_user_id: str) -> tuple:
        return AssignmentEngine.reassign_reviewer(pr_id, old_user_id)
