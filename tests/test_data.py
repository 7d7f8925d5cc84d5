"""Tests for input document parsing, validation and serialization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from venn_layout.pipeline.data import (
    Category, Organization, VennData, DataError,
    parse_venn_data, load_venn_data, validate_venn_data, venn_data_to_dict,
)
from tests.venn_fixture import make_venn_data, make_venn_dict


class TestParse(unittest.TestCase):

    def test_fixture_dict(self):
        data = parse_venn_data(make_venn_dict())
        self.assertEqual([c.name for c in data.categories], ["Research", "Industry", "Policy"])
        self.assertEqual(data.categories[0].r, 120.0)
        self.assertTrue(all(c.has_geometry for c in data.categories))
        self.assertEqual(data.organizations[1].categories, ["Research", "Industry"])
        self.assertEqual(data.organizations[0].url, "https://alpha.example")
        self.assertIsNone(data.organizations[0].careers)

    def test_defaults(self):
        data = parse_venn_data({"categories": [{"name": "A"}]})
        self.assertEqual(data.categories[0].color, "#888888")
        self.assertFalse(data.categories[0].has_geometry)
        self.assertEqual(data.organizations, [])

    def test_missing_categories(self):
        with self.assertRaises(DataError):
            parse_venn_data({"organizations": []})

    def test_missing_org_name(self):
        with self.assertRaises(DataError):
            parse_venn_data({"categories": [{"name": "A"}], "organizations": [{"categories": ["A"]}]})

    def test_non_numeric_geometry(self):
        with self.assertRaises(DataError):
            parse_venn_data({"categories": [{"name": "A", "x": "left", "y": 0, "r": 5}]})

    def test_not_a_dict(self):
        with self.assertRaises(DataError):
            parse_venn_data(["categories"])

    def test_numeric_names_rejected(self):
        with self.assertRaisesRegex(DataError, r"categories\[0\]\.name"):
            parse_venn_data({"categories": [{"name": 5}]})
        with self.assertRaisesRegex(DataError, r"organizations\[0\]\.name"):
            parse_venn_data({"categories": [{"name": "A"}], "organizations": [{"name": 7}]})

    def test_non_string_color(self):
        with self.assertRaisesRegex(DataError, "color"):
            parse_venn_data({"categories": [{"name": "A", "color": 255}]})

    def test_categories_string_not_split_into_letters(self):
        doc = {"categories": [{"name": "AB"}], "organizations": [{"name": "o", "categories": "AB"}]}
        with self.assertRaisesRegex(DataError, "expected a list"):
            parse_venn_data(doc)

    def test_non_string_category_reference(self):
        doc = {"categories": [{"name": "A"}], "organizations": [{"name": "o", "categories": ["A", 3]}]}
        with self.assertRaisesRegex(DataError, r"organizations\[0\]\.categories\[1\]"):
            parse_venn_data(doc)

    def test_boolean_geometry_rejected(self):
        with self.assertRaises(DataError):
            parse_venn_data({"categories": [{"name": "A", "x": True, "y": 0, "r": 5}]})

    def test_category_entry_not_an_object(self):
        with self.assertRaisesRegex(DataError, "expected an object"):
            parse_venn_data({"categories": ["Research"]})


class TestLoad(unittest.TestCase):

    def test_load_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "data.json"
            path.write_text(json.dumps(make_venn_dict()), encoding="utf-8")
            data = load_venn_data(path)
        self.assertEqual(len(data.organizations), 5)

    def test_bad_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "data.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaisesRegex(DataError, "parse error"):
                load_venn_data(path)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaisesRegex(DataError, "read error"):
                load_venn_data(Path(tmpdir) / "nope.json")


class TestValidate(unittest.TestCase):

    def test_fixture_valid(self):
        self.assertEqual(validate_venn_data(make_venn_data()), [])

    def test_no_categories(self):
        errors = validate_venn_data(VennData(categories=[]))
        self.assertEqual(len(errors), 1)
        self.assertIn("at least one category", errors[0])

    def test_duplicate_and_empty_category(self):
        data = VennData(categories=[Category("A", "#1"), Category("A", "#2"), Category(" ", "#3")])
        errors = validate_venn_data(data)
        self.assertIn("Duplicate category name 'A'", errors)
        self.assertIn("Category 2: name must not be empty", errors)

    def test_partial_geometry(self):
        data = VennData(categories=[Category("A", "#1", x=1.0, y=2.0)])
        errors = validate_venn_data(data)
        self.assertTrue(any("needs all of x, y, r" in e for e in errors))

    def test_non_positive_radius(self):
        data = VennData(categories=[Category("A", "#1", x=0.0, y=0.0, r=0.0)])
        self.assertIn("Category 'A': r must be > 0", validate_venn_data(data))

    def test_mixed_geometry(self):
        data = VennData(categories=[
            Category("A", "#1", x=0.0, y=0.0, r=10.0),
            Category("B", "#2"),
        ])
        errors = validate_venn_data(data)
        self.assertTrue(any(e.startswith("Only 1 of 2 categories") for e in errors))

    def test_unknown_category_reference(self):
        data = VennData(
            categories=[Category("A", "#1")],
            organizations=[Organization("o", ["A", "Z"])],
        )
        self.assertEqual(validate_venn_data(data), ["Organization 'o': unknown category 'Z'"])

    def test_duplicate_and_empty_org(self):
        data = VennData(
            categories=[Category("A", "#1")],
            organizations=[Organization("o", ["A"]), Organization("o", []), Organization("", [])],
        )
        errors = validate_venn_data(data)
        self.assertIn("Duplicate organization name 'o'", errors)
        self.assertIn("Organization 2: name must not be empty", errors)


class TestSerialize(unittest.TestCase):

    def test_round_trip_through_dict(self):
        original = make_venn_data()
        restored = parse_venn_data(json.loads(json.dumps(venn_data_to_dict(original))))
        self.assertEqual(restored, original)

    def test_optional_fields_omitted(self):
        d = venn_data_to_dict(VennData(
            categories=[Category("A", "#1")],
            organizations=[Organization("o", ["A"])],
        ))
        self.assertEqual(d["categories"][0], {"name": "A", "color": "#1"})
        self.assertEqual(d["organizations"][0], {"name": "o", "categories": ["A"]})


if __name__ == "__main__":
    unittest.main()
