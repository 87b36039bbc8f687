"""Tests for boolean clause composition."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SolrBuilder.core.clauses import (
    and_,
    is_valid_number,
    is_valid_string,
    not_,
    or_,
    prohibit,
    required,
    strict_string,
)
from SolrBuilder.core.fields import SolrField


class TestMultiClause(unittest.TestCase):
    def test_and_two_terms(self) -> None:
        self.assertEqual(and_("a", "b"), "(a AND b)")

    def test_and_with_list_expands_field_group(self) -> None:
        self.assertEqual(and_("a", ["b", "c"]), "(a:(b c))")

    def test_or_two_terms(self) -> None:
        self.assertEqual(or_("a", "b"), "(a OR b)")

    def test_or_with_list_expands_field_group(self) -> None:
        self.assertEqual(or_("a", ["b", "c"]), "(a:(b c))")

    def test_without_parentheses(self) -> None:
        self.assertEqual(and_("a", "b", False), "a AND b")
        self.assertEqual(or_("a", ["b", "c"], use_parentheses=False), "a:(b c)")

    def test_both_operands_invalid_returns_empty(self) -> None:
        self.assertEqual(and_("", "  "), "")
        self.assertEqual(or_(None, []), "")

    def test_nested_composition(self) -> None:
        inner = or_("a", "b")
        self.assertEqual(and_(inner, not_("c")), "((a OR b) AND (! c))")

    def test_field_catalog_member_as_left_operand(self) -> None:
        self.assertEqual(
            or_(SolrField.AUTH_TEMPLATE, ["news", "event"]),
            "(authtemplate:(news event))",
        )


class TestSingleClause(unittest.TestCase):
    def test_not(self) -> None:
        self.assertEqual(not_("a"), "(! a)")
        self.assertEqual(not_("a", False), "! a")

    def test_prohibit(self) -> None:
        self.assertEqual(prohibit("a"), "(- a)")

    def test_required(self) -> None:
        self.assertEqual(required("a", use_parentheses=False), "+ a")

    def test_invalid_clause_returns_empty(self) -> None:
        for func in (not_, prohibit, required):
            self.assertEqual(func(""), "")
            self.assertEqual(func("   "), "")
            self.assertEqual(func(None), "")


class TestStrictString(unittest.TestCase):
    def test_quotes_value(self) -> None:
        self.assertEqual(strict_string("a"), '"a"')

    def test_empty_value(self) -> None:
        self.assertEqual(strict_string(""), "")
        self.assertEqual(strict_string(42), "")

    def test_repeated_calls_are_identical(self) -> None:
        results = {and_("a", ["b", "c"]) for _ in range(5)}
        results |= {and_("a", ["b", "c"])}
        self.assertEqual(results, {"(a:(b c))"})
        self.assertEqual(strict_string("x"), strict_string("x"))


class TestValidators(unittest.TestCase):
    def test_valid_string(self) -> None:
        self.assertTrue(is_valid_string(" a "))
        self.assertFalse(is_valid_string(" "))
        self.assertFalse(is_valid_string(["a"]))

    def test_valid_number(self) -> None:
        self.assertTrue(is_valid_number(0))
        self.assertTrue(is_valid_number("10"))
        self.assertTrue(is_valid_number(5.0))
        self.assertFalse(is_valid_number(float("nan")))
        self.assertFalse(is_valid_number(float("inf")))
        self.assertFalse(is_valid_number(2.5))
        self.assertFalse(is_valid_number("ten"))
        self.assertFalse(is_valid_number(True))
        self.assertFalse(is_valid_number(None))


if __name__ == "__main__":
    unittest.main()
