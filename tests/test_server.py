"""Tests for the JSON layout API."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fastapi.testclient import TestClient

from venn_layout.web.server import RULES_ENV, _rules, app
from tests.venn_fixture import make_venn_dict


class TestLayoutAPI(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_layout(self):
        resp = self.client.post("/api/layout", json=make_venn_dict())
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["method"], "sat")
        self.assertEqual([c["name"] for c in body["circles"]], ["Research", "Industry", "Policy"])
        alpha = next(o for o in body["organizations"] if o["name"] == "alpha")
        self.assertEqual((alpha["x"], alpha["y"]), (280, 400))
        self.assertIn("variables", body["stats"])

    def test_ring_uses_canvas_size(self):
        doc = {
            "categories": [{"name": "A", "color": "#111"}],
            "organizations": [{"name": "o", "categories": ["A"]}],
        }
        resp = self.client.post("/api/layout?width=600&height=300", json=doc)
        self.assertEqual(resp.status_code, 200)
        circle = resp.json()["circles"][0]
        self.assertAlmostEqual(circle["x"], 450)
        self.assertAlmostEqual(circle["y"], 150)

    def test_invalid_document(self):
        doc = make_venn_dict()
        doc["organizations"].append({"name": "zeta", "categories": ["Nowhere"]})
        resp = self.client.post("/api/layout", json=doc)
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"], ["Organization 'zeta': unknown category 'Nowhere'"])

    def test_malformed_body(self):
        resp = self.client.post("/api/layout", json={"organizations": []})
        self.assertEqual(resp.status_code, 422)


    def test_mistyped_name(self):
        doc = make_venn_dict()
        doc["categories"][0]["name"] = 5
        resp = self.client.post("/api/layout", json=doc)
        self.assertEqual(resp.status_code, 422)


class TestRulesFile(unittest.TestCase):

    def setUp(self):
        _rules.cache_clear()
        self.addCleanup(_rules.cache_clear)
        self.client = TestClient(app)

    def _post_with_rules(self, content: str):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "rules.json"
            path.write_text(content, encoding="utf-8")
            with mock.patch.dict(os.environ, {RULES_ENV: str(path)}):
                return self.client.post("/api/layout", json=make_venn_dict())

    def test_override_applied(self):
        resp = self._post_with_rules('{"min_org_separation": 1000}')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["method"], "fallback")

    def test_bad_rules_file_reported(self):
        resp = self._post_with_rules('{"spacing": 3}')
        self.assertEqual(resp.status_code, 500)
        self.assertIn("unknown layout rule 'spacing'", resp.json()["detail"])


if __name__ == "__main__":
    unittest.main()
