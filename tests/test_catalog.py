import unittest
from pathlib import Path
import tempfile

# Catalog invariants: unique keys, non-empty choices, stable ordering and the
# fixed progress denominator derived from the question count.
from readiness.catalog import (
    CONTACT_FIELDS,
    Question,
    QuestionCatalog,
    QuestionSection,
    SelectionMode,
    catalog_from_dict,
    default_catalog,
    load_catalog,
)
from readiness.errors import CatalogError


class TestDefaultCatalog(unittest.TestCase):
    def test_question_keys_in_order(self):
        catalog = default_catalog()
        self.assertEqual(catalog.question_keys(), [f"q{i}" for i in range(1, 12)])

    def test_total_field_count_adds_four_contact_fields(self):
        # 11 questions + name, email, organization, contact
        self.assertEqual(default_catalog().total_field_count, 15)

    def test_only_tools_question_is_multiple(self):
        catalog = default_catalog()
        self.assertEqual(catalog.multiple_keys(), ["q6"])
        self.assertTrue(catalog.is_multiple("q6"))
        self.assertFalse(catalog.is_multiple("q1"))
        self.assertFalse(catalog.is_multiple("name"))

    def test_field_keys_start_with_contact_fields(self):
        keys = default_catalog().field_keys()
        self.assertEqual(tuple(keys[: len(CONTACT_FIELDS)]), CONTACT_FIELDS)
        self.assertEqual(keys[-1], "q11")

    def test_unknown_key_lookup(self):
        with self.assertRaises(KeyError):
            default_catalog().get("q99")


class TestCatalogInvariants(unittest.TestCase):
    def test_duplicate_keys_rejected(self):
        q = Question("q1", "Prompt", ("Yes", "No"))
        with self.assertRaises(CatalogError):
            QuestionCatalog([QuestionSection("A", (q,)), QuestionSection("B", (q,))])

    def test_empty_choices_rejected(self):
        with self.assertRaises(CatalogError):
            QuestionCatalog([QuestionSection("A", (Question("q1", "Prompt", ()),))])

    def test_contact_field_key_reserved(self):
        with self.assertRaises(CatalogError):
            QuestionCatalog([QuestionSection("A", (Question("email", "Prompt", ("x",)),))])

    def test_catalog_from_dict(self):
        catalog = catalog_from_dict(
            {
                "sections": [
                    {
                        "title": "Only",
                        "questions": [
                            {"key": "tools", "prompt": "Tools?", "choices": ["A", "B"], "mode": "multiple"},
                            {"key": "ready", "prompt": "Ready?", "choices": ["Yes", "No"]},
                        ],
                    }
                ]
            }
        )
        self.assertEqual(catalog.question_keys(), ["tools", "ready"])
        self.assertIs(catalog.get("tools").mode, SelectionMode.MULTIPLE)
        self.assertEqual(catalog.total_field_count, 6)

    def test_load_catalog_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "catalog.yaml"
            path.write_text(
                "sections:\n"
                "  - title: Use Cases\n"
                "    questions:\n"
                "      - key: q1\n"
                "        prompt: Why AI?\n"
                "        choices: [Efficiency, Costs]\n",
                encoding="utf-8",
            )
            catalog = load_catalog(path)
        self.assertEqual(catalog.sections[0].title, "Use Cases")
        self.assertEqual(catalog.get("q1").choices, ("Efficiency", "Costs"))

    def test_load_catalog_rejects_bad_mode(self):
        with self.assertRaises(CatalogError):
            catalog_from_dict(
                {"sections": [{"title": "A", "questions": [{"key": "q1", "choices": ["x"], "mode": "ranked"}]}]}
            )


if __name__ == "__main__":
    unittest.main()
