#!/usr/bin/env python3
"""
Unit tests for the scoring API endpoints.
Runs the FastAPI app with the instance registry pointed at the example instance.
"""

import unittest

from fastapi.testclient import TestClient

from core.scorer import ScoringService
from web.backend.app import app
from web.backend.dependencies import get_instance_registry
from web.backend.services.instance_service import InstanceRegistry
from tests.fixtures.instances import EXAMPLE_INSTANCE, EXAMPLE_PLAN, EXAMPLE_SCORE


class TestScoringAPI(unittest.TestCase):
    """Tests for /api/v1/instances endpoints."""

    def setUp(self):
        self.registry = InstanceRegistry(
            {"a": str(EXAMPLE_INSTANCE), "missing": "/nonexistent/x.in.txt"},
            ScoringService()
        )
        app.dependency_overrides[get_instance_registry] = lambda: self.registry
        self.client = TestClient(app)
        self.plan = EXAMPLE_PLAN.read_text()

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_01_valid_submission(self):
        response = self.client.post("/api/v1/instances/a/score", json={"submission": self.plan})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["score"], EXAMPLE_SCORE)
        self.assertTrue(data["valid"])
        self.assertIsNone(data["message"])
        self.assertIsNone(data["timeline"])

    def test_02_timeline_on_request(self):
        response = self.client.post(
            "/api/v1/instances/a/score",
            json={"submission": self.plan, "details": True}
        )

        timeline = response.json()["timeline"]
        self.assertEqual([entry["job"] for entry in timeline], ["WebServer", "Logging", "WebChat"])
        self.assertEqual(timeline[1], {"job": "Logging", "start": 7, "end": 12, "lateness": 7, "score": 3})

    def test_03_rejected_submission_is_not_an_http_error(self):
        response = self.client.post(
            "/api/v1/instances/a/score",
            json={"submission": "1\nWebChat\nAnna Bob\n"}
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertFalse(data["valid"])
        self.assertEqual(data["score"], 0)
        self.assertIn("worker Anna level in Python is 0 vs 3 required", data["message"])

    def test_04_disable_checks_per_request(self):
        response = self.client.post(
            "/api/v1/instances/a/score",
            json={"submission": "1\nWebChat\nAnna Bob\n", "disable_checks": True}
        )

        self.assertEqual(response.json()["score"], 20)
        self.assertTrue(response.json()["valid"])

    def test_05_malformed_submission(self):
        response = self.client.post("/api/v1/instances/a/score", json={"submission": "three\n"})

        data = response.json()
        self.assertFalse(data["valid"])
        self.assertTrue(data["message"].startswith("line 1:"))

    def test_06_unknown_instance(self):
        response = self.client.post("/api/v1/instances/zzz/score", json={"submission": self.plan})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "InstanceNotFoundException")
        self.assertFalse(response.json()["success"])

    def test_07_unloadable_instance(self):
        response = self.client.post("/api/v1/instances/missing/score", json={"submission": self.plan})

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["type"], "InstanceUnavailableException")

    def test_08_batch(self):
        response = self.client.post(
            "/api/v1/instances/a/score/batch",
            json={"submissions": [
                {"submission": self.plan},
                {"submission": "1\nFoo\nAnna\n"},
                {"submission": self.plan},
            ]}
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["instance"], "a")
        self.assertEqual(data["total_score"], 2 * EXAMPLE_SCORE)
        self.assertEqual(data["valid_count"], 2)
        self.assertEqual(data["results"][1]["message"], "unknown job Foo")

    def test_09_empty_batch_is_rejected(self):
        response = self.client.post("/api/v1/instances/a/score/batch", json={"submissions": []})
        self.assertEqual(response.status_code, 422)

    def test_10_list_instances(self):
        self.registry = InstanceRegistry({"a": str(EXAMPLE_INSTANCE)}, ScoringService())

        response = self.client.get("/api/v1/instances")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["instances"],
            [{"name": "a", "workers": 3, "jobs": 3, "skills": 4}]
        )

    def test_11_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")


if __name__ == '__main__':
    unittest.main()
