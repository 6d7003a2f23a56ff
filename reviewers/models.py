from django.db import models
from django.utils import timezone


class Team(models.Model):
    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'teams'


class User(models.Model):
    id = models.CharField(max_length=50, primary_key=True)
    username = models.CharField(max_length=100)
    # Команда хранится прямо у пользователя: один пользователь - одна команда
    team = models.ForeignKey(
        Team,
        to_field='name',
        db_column='team_name',
        on_delete=models.SET_NULL,
        related_name='members',
        null=True,
        blank=True,
    )
    is_active = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.username} ({self.id})"

    class Meta:
        db_table = 'users'
        ordering = ['id']


class PullRequest(models.Model):
    class Status(models.TextChoices):
        OPEN = 'OPEN', 'Open'
        MERGED = 'MERGED', 'Merged'

    id = models.CharField(max_length=100, primary_key=True)
    name = models.CharField(max_length=200)
    author = models.ForeignKey(User, on_delete=models.PROTECT, related_name='authored_prs')
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.OPEN)
    reviewers = models.ManyToManyField(
        User,
        through='ReviewerAssignment',
        related_name='assigned_prs',
        blank=True,
    )
    created_at = models.DateTimeField(default=timezone.now)
    merged_at = models.DateTimeField(null=True, blank=True)

    @property
    def reviewer_ids(self):
        return sorted(self.reviewers.values_list('id', flat=True))

    @property
    def is_merged(self):
        return self.status == self.Status.MERGED

    def __str__(self):
        return f"{self.name} ({self.id})"

    class Meta:
        db_table = 'pull_requests'


class ReviewerAssignment(models.Model):
    pull_request = models.ForeignKey(PullRequest, on_delete=models.CASCADE, related_name='assignments')
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name='review_assignments')

    def __str__(self):
        return f"{self.pull_request_id} -> {self.user_id}"

    class Meta:
        db_table = 'pull_request_reviewers'
        constraints = [
            models.UniqueConstraint(fields=['pull_request', 'user'], name='unique_pull_request_reviewer'),
        ]
