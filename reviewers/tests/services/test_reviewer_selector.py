import random
from collections import Counter

from django.test import TestCase

from reviewers.errors import NoCandidateError, NoTeamError
from reviewers.models import Team, User
from reviewers.selector import MAX_REVIEWERS, ReviewerSelector


class ReviewerSelectorTest(TestCase):
    def setUp(self):
        self.team = Team.objects.create(name="backend")
        self.author = User.objects.create(id="a", username="Author", is_active=True, team=self.team)

    def _add_members(self, count, is_active=True):
        for i in range(1, count + 1):
            User.objects.create(id=f"m{i}", username=f"Member {i}", is_active=is_active, team=self.team)

    def test_empty_team_name(self):
        """Тест что автор без команды - ошибка, а не пустой список"""
        with self.assertRaises(NoTeamError):
            ReviewerSelector.select_reviewers(None, "a")

        with self.assertRaises(NoTeamError):
            ReviewerSelector.select_reviewers("", "a")

    def test_no_candidates(self):
        """Тест когда в команде только автор и неактивные"""
        self._add_members(3, is_active=False)

        with self.assertRaises(NoCandidateError):
            ReviewerSelector.select_reviewers("backend", "a")

    def test_small_pool_selected_entirely(self):
        """Тест что при двух кандидатах выбираются оба"""
        self._add_members(2)

        reviewers = ReviewerSelector.select_reviewers("backend", "a", rng=random.Random(1))

        self.assertEqual(sorted(reviewers), ["m1", "m2"])

    def test_large_pool_selects_two(self):
        """Тест что из большой команды выбирается ровно два ревьювера"""
        self._add_members(6)

        reviewers = ReviewerSelector.select_reviewers("backend", "a", rng=random.Random(1))

        self.assertEqual(len(reviewers), MAX_REVIEWERS)
        self.assertEqual(len(set(reviewers)), 2)
        self.assertNotIn("a", reviewers)

    def test_default_random_source(self):
        """Тест выбора без переданного источника случайности"""
        self._add_members(4)

        reviewers = ReviewerSelector.select_reviewers("backend", "a")

        self.assertEqual(len(reviewers), 2)
        self.assertTrue(set(reviewers) <= {"m1", "m2", "m3", "m4"})

    def test_selection_is_uniform(self):
        """Тест что каждый кандидат выбирается примерно одинаково часто"""
        self._add_members(4)
        rng = random.Random(2024)

        counter = Counter()
        draws = 1200
        for _ in range(draws):
            counter.update(ReviewerSelector.select_reviewers("backend", "a", rng=rng))

        # каждый из 4 кандидатов ожидается в половине выборок
        for member_id in ["m1", "m2", "m3", "m4"]:
            self.assertGreater(counter[member_id], 450)
            self.assertLess(counter[member_id], 750)
