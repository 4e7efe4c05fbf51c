# python
"""
Utilities behavioral tests (Unset marker, coalesce, read-only fields).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argscan.utils import Unset, UnsetType, coalesce, field


class Holder:
    items = field("items")
    table = field("table")
    missing = field("missing")
    other = field("other")

    def __init__(self):
        self._items = ("a", "b")
        self._table = {"k": 1}
        self._missing = Unset
        self._other = self


class TestUnset(TestCase):
    """Behavioral tests for the Unset marker."""

    def testFalseyAndDistinctFromNone(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertEqual(repr(Unset), "Unset")

    def testUnionChecks(self):
        self.assertIsInstance(Unset, str | UnsetType)
        self.assertNotIsInstance(None, str | UnsetType)

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)


class TestField(TestCase):
    """Behavioral tests for field()."""

    def testSnapshots(self):
        holder = Holder()
        self.assertEqual(holder.items, ["a", "b"])
        holder.table["k"] = 2
        self.assertEqual(holder.table, {"k": 1})
        self.assertIsNone(holder.missing)
        self.assertIs(holder.other, holder)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            Holder().items = []

    def testPropertyName(self):
        self.assertEqual(Holder.items.fget.__name__, "items")


if __name__ == "__main__":
    unittest.main()
