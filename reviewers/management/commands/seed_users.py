import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from reviewers.models import Team, User

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Заводит тестовые команды и пользователей и раскладывает пользователей по командам'

    def add_arguments(self, parser):
        parser.add_argument('--teams', type=int, default=3)
        parser.add_argument('--users', type=int, default=30)
        parser.add_argument('--per-team', type=int, default=10)
        parser.add_argument('--active', action='store_true', help='Сразу сделать пользователей активными')

    @transaction.atomic
    def handle(self, *args, **options):
        teams = [
            Team.objects.get_or_create(name=f"team-{i}")[0]
            for i in range(1, options['teams'] + 1)
        ]
        users_created = 0
        for i in range(1, options['users'] + 1):
            _, created = User.objects.get_or_create(
                id=f"u{i}",
                defaults={'username': f"user{i}", 'is_active': options['active']},
            )
            users_created += created

        if teams:
            # раскладываем пользователей блоками по per_team человек
            for i, user in enumerate(User.objects.filter(team__isnull=True).order_by('id')):
                user.team = teams[(i // options['per_team']) % len(teams)]
                user.save(update_fields=['team'])

        logger.info("seed finished teams=%d users_created=%d", len(teams), users_created)
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(teams)} teams, {users_created} new users"))
