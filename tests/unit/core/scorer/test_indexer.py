#!/usr/bin/env python3
"""
Unit tests for baseline construction (skill ID allocation and level map).
"""

import unittest

from core.scorer import build_baseline
from tests.fixtures.instances import example_instance, make_instance


class TestBuildBaseline(unittest.TestCase):
    """Unit tests for build_baseline."""

    def setUp(self):
        self.baseline = build_baseline(example_instance())

    def test_01_worker_and_job_ids_follow_input_order(self):
        """Worker and job IDs are positions in the input."""
        self.assertEqual(self.baseline.worker_ids, {"Anna": 0, "Bob": 1, "Maria": 2})
        self.assertEqual(self.baseline.job_ids, {"Logging": 0, "WebServer": 1, "WebChat": 2})
        self.assertEqual([w.id for w in self.baseline.workers], [0, 1, 2])
        self.assertEqual([j.id for j in self.baseline.jobs], [0, 1, 2])

    def test_02_job_skills_allocated_before_worker_only_skills(self):
        """Job role skills get the low IDs; CSS (worker-only) comes last."""
        self.assertEqual(
            self.baseline.skill_ids,
            {"C++": 0, "HTML": 1, "Python": 2, "CSS": 3}
        )
        self.assertEqual(self.baseline.skill_names, ["C++", "HTML", "Python", "CSS"])

    def test_03_roles_keep_order_and_levels(self):
        web_server = self.baseline.jobs[1]
        self.assertEqual(web_server.roles, [(1, 3), (0, 2)])
        self.assertEqual(web_server.days_to_completion, 7)
        self.assertEqual(web_server.base_score, 10)
        self.assertEqual(web_server.deadline, 7)

    def test_04_worker_only_skill_levels_are_not_retained(self):
        """Bob's CSS reserves an ID but never enters the level map."""
        bob = self.baseline.workers[1]
        self.assertEqual(bob.skills, [1, 3])
        self.assertEqual(bob.levels, {1: 5})
        self.assertNotIn((1, 3), self.baseline.levels)
        self.assertEqual(
            self.baseline.levels,
            {(0, 0): 2, (1, 1): 5, (2, 2): 3}
        )

    def test_05_everyone_available_at_zero(self):
        self.assertEqual(self.baseline.availability, [0, 0, 0])

    def test_06_skill_shared_only_by_workers_stays_unrecorded(self):
        """A skill two workers share but no job needs is still not recorded."""
        baseline = build_baseline(make_instance(
            workers=[("A", [("Go", 4)]), ("B", [("Go", 2)])],
            jobs=[("J", 1, 1, 1, [("Rust", 1)])]
        ))
        self.assertEqual(baseline.skill_ids, {"Rust": 0, "Go": 1})
        self.assertEqual(baseline.levels, {})
        self.assertEqual(baseline.workers[1].skills, [1])

    def test_07_identical_input_gives_identical_ids(self):
        again = build_baseline(example_instance())
        self.assertEqual(again.skill_ids, self.baseline.skill_ids)
        self.assertTrue(again.same_static(self.baseline))

    def test_08_clone_shares_static_and_copies_run_state(self):
        clone = self.baseline.clone()
        self.assertIs(clone.workers, self.baseline.workers)
        self.assertIs(clone.job_ids, self.baseline.job_ids)
        self.assertIsNot(clone.levels, self.baseline.levels)
        self.assertIsNot(clone.availability, self.baseline.availability)

        clone.levels[(0, 0)] = 99
        clone.availability[0] = 42
        self.assertEqual(self.baseline.level_of(0, 0), 2)
        self.assertEqual(self.baseline.availability[0], 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
