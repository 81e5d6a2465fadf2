# tests/test_attribute_map.py
import unittest
from tests.fixtures import MetadataTestBase
from stackmeta.items.metadata import AttributeMap, ItemStackMetadata

class TestAttributeMap(unittest.TestCase):

    def setUp(self):
        self.attrs = AttributeMap()

    def test_set_reports_change(self):
        """Verify set returns True only when the stored value changes."""
        self.assertTrue(self.attrs.set("a", "1"))
        self.assertFalse(self.attrs.set("a", "1"))
        self.assertTrue(self.attrs.set("a", "2"))
        self.assertEqual(self.attrs.get("a"), "2")

    def test_empty_value_is_stored(self):
        """An empty value is a real entry, not a removal."""
        self.assertTrue(self.attrs.set("a", ""))
        self.assertTrue(self.attrs.contains("a"))
        self.assertFalse(self.attrs.set("a", ""))

    def test_get_missing(self):
        self.assertIsNone(self.attrs.get("missing"))
        self.assertEqual(self.attrs.get("missing", "x"), "x")

    def test_insertion_order(self):
        for name in ["zeta", "alpha", "mid"]:
            self.attrs.set(name, name.upper())
        self.attrs.set("alpha", "changed")

        self.assertEqual(self.attrs.keys(), ["zeta", "alpha", "mid"])
        self.assertEqual(list(self.attrs), [("zeta", "ZETA"), ("alpha", "changed"), ("mid", "MID")])

    def test_clear_and_modified_flag(self):
        self.assertFalse(self.attrs.modified)
        self.attrs.set("a", "1")
        self.assertTrue(self.attrs.modified)

        self.attrs.modified = False
        self.attrs.set("a", "1")
        self.assertFalse(self.attrs.modified, "Unchanged value should not mark modified.")

        self.attrs.clear()
        self.assertTrue(self.attrs.empty())
        self.assertEqual(len(self.attrs), 0)
        self.assertTrue(self.attrs.modified)

    def test_equality(self):
        other = AttributeMap()
        self.attrs.set("a", "1")
        other.set("a", "1")
        self.assertEqual(self.attrs, other)

        other.set("b", "2")
        self.assertNotEqual(self.attrs, other)

    def test_resolve_reference(self):
        """Verify '${name}' chains are followed two references deep and no further."""
        self.attrs.set("b", "${c}")
        self.attrs.set("c", "deep")
        self.attrs.set("x", "${y}")
        self.attrs.set("y", "${z}")
        self.attrs.set("z", "too deep")

        self.assertEqual(self.attrs.resolve("${b}"), "deep")
        self.assertEqual(self.attrs.resolve("${c}"), "deep")
        self.assertEqual(self.attrs.resolve("${x}"), "${z}")
        self.assertEqual(self.attrs.resolve("${missing}"), "")
        self.assertEqual(self.attrs.resolve("plain"), "plain")
        self.assertEqual(self.attrs.resolve("${"), "${")

    def test_resolve_empty_reference(self):
        """'${}' refers to the unnamed legacy attribute."""
        self.assertEqual(self.attrs.resolve("${}"), "")
        self.attrs.set("", "legacy")
        self.assertEqual(self.attrs.resolve("${}"), "legacy")


class TestMetadataQueries(MetadataTestBase):

    def test_get_string_resolves_references(self):
        self.meta.set_string("alias", "${description}")
        self.meta.set_string("description", "Shiny Pick")

        self.assertEqual(self.meta.get_string("alias"), "Shiny Pick")
        self.assertEqual(self.meta.get_raw("alias"), "${description}")

    def test_get_string_follows_two_references(self):
        self.meta.set_string("a", "${b}")
        self.meta.set_string("b", "${c}")
        self.meta.set_string("c", "v")

        self.assertEqual(self.meta.get_string("a"), "v")

    def test_get_string_default(self):
        self.assertEqual(self.meta.get_string("missing"), "")
        self.assertEqual(self.meta.get_string("missing", "fallback"), "fallback")
        self.assertIsNone(self.meta.get_raw("missing"))

    def test_metadata_equality(self):
        other = ItemStackMetadata()
        self.meta.set_string("a", "1")
        other.set_string("a", "1")

        self.assertEqual(self.meta, other)
        self.assertIn("a", self.meta)
        self.assertEqual(len(self.meta), 1)
