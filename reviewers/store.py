from django.db import IntegrityError, transaction
from django.utils import timezone

from .errors import AlreadyExistsError, NotFoundError
from .models import PullRequest, ReviewerAssignment, User


class PullRequestStore:
    """
    Операции над PR и связями PR-ревьювер.
    Методы рассчитаны на вызов внутри транзакции движка.
    """

    @classmethod
    def exists(cls, pr_id: str) -> bool:
        return PullRequest.objects.filter(id=pr_id).exists()

    @classmethod
    def insert(cls, pr_id: str, pr_name: str, author_id: str, reviewer_ids: list, created_at=None) -> PullRequest:
        if cls.exists(pr_id):
            raise AlreadyExistsError(f"PR '{pr_id}' already exists")

        try:
            # savepoint: параллельная вставка того же id упадет на первичном ключе
            with transaction.atomic():
                pr = PullRequest.objects.create(
                    id=pr_id,
                    name=pr_name,
                    author_id=author_id,
                    status=PullRequest.Status.OPEN,
                    created_at=created_at or timezone.now(),
                )
        except IntegrityError as e:
            raise AlreadyExistsError(f"PR '{pr_id}' already exists") from e

        ReviewerAssignment.objects.bulk_create(
            [ReviewerAssignment(pull_request=pr, user_id=user_id) for user_id in reviewer_ids]
        )
        return pr

    @classmethod
    def get(cls, pr_id: str) -> PullRequest:
        try:
            return PullRequest.objects.prefetch_related('reviewers').get(id=pr_id)
        except PullRequest.DoesNotExist:
            raise NotFoundError(f"PR '{pr_id}' not found")

    @classmethod
    def get_for_update(cls, pr_id: str) -> PullRequest:
        """Загружает PR с блокировкой строки до конца транзакции"""
        try:
            return PullRequest.objects.select_for_update().get(id=pr_id)
        except PullRequest.DoesNotExist:
            raise NotFoundError(f"PR '{pr_id}' not found")

    @classmethod
    def mark_merged(cls, pr_id: str) -> int:
        return PullRequest.objects.filter(
            id=pr_id,
            status=PullRequest.Status.OPEN,
        ).update(status=PullRequest.Status.MERGED, merged_at=timezone.now())

    @classmethod
    def assigned_reviewer_ids(cls, pr_id: str) -> set:
        return set(
            ReviewerAssignment.objects.filter(pull_request_id=pr_id).values_list('user_id', flat=True)
        )

    @classmethod
    def find_replacement(cls, team_name: str, author_id: str, old_user_id: str, pr_id: str):
        """Первый по id подходящий кандидат или None"""
        assigned = ReviewerAssignment.objects.filter(pull_request_id=pr_id).values('user_id')
        return (
            User.objects.filter(team_id=team_name, is_active=True)
            .exclude(id=author_id)
            .exclude(id=old_user_id)
            .exclude(id__in=assigned)
            .order_by('id')
            .values_list('id', flat=True)
            .first()
        )

    @classmethod
    def replace_reviewer(cls, pr_id: str, old_user_id: str, new_user_id: str):
        ReviewerAssignment.objects.filter(pull_request_id=pr_id, user_id=old_user_id).delete()
        ReviewerAssignment.objects.bulk_create(
            [ReviewerAssignment(pull_request_id=pr_id, user_id=new_user_id)],
            ignore_conflicts=True,
        )
