import logging

from django.db import IntegrityError, transaction

from .errors import (
    EmptyTeamError,
    MemberNotFoundError,
    NotFoundError,
    TeamAlreadyExistsError,
    operation,
)
from .models import PullRequest, Team, User

logger = logging.getLogger(__name__)


class TeamRegistry:
    """
    Реестр команд и пользователей.
    Пользователи заводятся извне, реестр только привязывает их к командам.
    """

    @classmethod
    @operation('registry.team.Create')
    @transaction.atomic
    def create_team(cls, team_name: str, members_data: list) -> Team:
        if Team.objects.filter(name=team_name).exists():
            raise TeamAlreadyExistsError(f"team '{team_name}' already exists")

        if not members_data:
            raise EmptyTeamError(f"team '{team_name}' has no members")

        try:
            # savepoint: параллельный team/add с тем же именем упадет на unique
            with transaction.atomic():
                team = Team.objects.create(name=team_name)
        except IntegrityError as e:
            raise TeamAlreadyExistsError(f"team '{team_name}' already exists") from e

        for member_data in members_data:
            cls._bind_member(team, member_data)

        logger.info("team created team=%s members=%d", team_name, len(members_data))
        return team

    @classmethod
    def _bind_member(cls, team: Team, member_data: dict) -> User:
        user_id = member_data['user_id']

        updated = User.objects.filter(id=user_id).update(
            team=team,
            username=member_data['username'],
            is_active=member_data['is_active'],
        )
        if updated == 0:
            raise MemberNotFoundError(f"user '{user_id}' not found")

        return User.objects.get(id=user_id)

    @classmethod
    @operation('registry.team.Get')
    def get_team(cls, team_name: str) -> Team:
        try:
            return Team.objects.prefetch_related('members').get(name=team_name)
        except Team.DoesNotExist:
            raise NotFoundError(f"team '{team_name}' not found")

    @classmethod
    @operation('registry.user.SetIsActive')
    @transaction.atomic
    def set_user_active(cls, user_id: str, is_active: bool = True) -> User:
        updated = User.objects.filter(id=user_id).update(is_active=is_active)
        if updated == 0:
            raise NotFoundError(f"user '{user_id}' not found")

        logger.info("user activity changed user_id=%s is_active=%s", user_id, is_active)
        return User.objects.select_related('team').get(id=user_id)

    @classmethod
    def get_team_of(cls, user_id: str):
        """Имя команды пользователя или None, если команды нет"""
        team_name = User.objects.filter(id=user_id).values_list('team', flat=True).first()
        if team_name is None and not User.objects.filter(id=user_id).exists():
            raise NotFoundError(f"user '{user_id}' not found")
        return team_name

    @classmethod
    def list_active_team_members(cls, team_name: str, exclude_user_id: str) -> list:
        return list(
            User.objects.filter(team_id=team_name, is_active=True)
            .exclude(id=exclude_user_id)
            .order_by('id')
        )

    @classmethod
    @operation('registry.user.GetReview')
    def get_user_review_assignments(cls, user_id: str) -> list:
        if not User.objects.filter(id=user_id).exists():
            raise NotFoundError(f"user '{user_id}' not found")
        return list(PullRequest.objects.filter(reviewers__id=user_id).order_by('created_at', 'id'))
