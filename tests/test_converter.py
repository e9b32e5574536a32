import unittest

import pytest

from infix_notation import convert, convert_full, Notations
from infix_notation.notation.converter import get_conversion_cache, render
from infix_notation.parser.config import ParserConfig
from infix_notation.parser.error_handler import InputTooLongError, LexError, ParseError
from infix_notation.parser.expression_parser import parse_expression
from infix_notation.parser.parse_tree import Expr


def test_known_renderings(expected_results):
    for text, (parenthesized, postfix, prefix) in expected_results.items():
        assert convert(text) == Notations(parenthesized, postfix, prefix)


def test_as_dict():
    assert convert("a*b").as_dict() == {
        "parenthesized": "a*b",
        "postfix": "a b *",
        "prefix": "* a b",
    }


def test_render_respects_strip_setting():
    tree = parse_expression("a+b")
    assert render(tree, ParserConfig(strip_outer_parens=False)).parenthesized == "(a+b)"
    assert render(tree).parenthesized == "a+b"


@pytest.mark.parametrize("text,error", [
    ("a+", ParseError),
    ("a+(b", ParseError),
    ("a#b", LexError),
    ("", ParseError),
])
def test_convert_raises(text, error):
    with pytest.raises(error):
        convert(text)


def test_length_limit():
    config = ParserConfig(max_length=5)
    assert convert("a+b+c", config).postfix == "a b + c +"
    with pytest.raises(InputTooLongError) as excinfo:
        convert("a+b+cd", config)
    assert excinfo.value.length == 6
    assert excinfo.value.max_length == 5


class TestConvertFull(unittest.TestCase):
    def setUp(self):
        get_conversion_cache().clear()

    def test_success(self):
        result = convert_full("a^b^c")
        self.assertEqual(result["raw"], "a^b^c")
        self.assertIsInstance(result["parse_tree"], Expr)
        self.assertEqual(result["parenthesized"], "a^(b^c)")
        self.assertEqual(result["postfix"], "a b c ^ ^")
        self.assertEqual(result["prefix"], "^ a ^ b c")
        self.assertFalse(result["errors"], f"Errors found: {result['errors']}")

    def test_missing_operand(self):
        result = convert_full("a+")
        self.assertIsNone(result["parse_tree"])
        self.assertIsNone(result["postfix"])
        self.assertEqual(len(result["errors"]), 1)
        self.assertIn("Expected operand, got end of expression", result["errors"][0])
        self.assertIn("column 3", result["errors"][0])

    def test_unmatched_paren(self):
        result = convert_full("a+(b")
        self.assertTrue(any("Unmatched '('" in err for err in result["errors"]))

    def test_unknown_character(self):
        result = convert_full("a#b")
        self.assertTrue(any("Unrecognized character '#'" in err and "column 2" in err
                            for err in result["errors"]))

    def test_too_long(self):
        result = convert_full("a" * 20, ParserConfig(max_length=10))
        self.assertTrue(any("limit is 10" in err for err in result["errors"]))

    def test_caching(self):
        result1 = convert_full("a+b")
        result2 = convert_full("a+b")
        self.assertEqual(result1, result2)
        self.assertIs(result1["parse_tree"], result2["parse_tree"], "Expected cached tree to be reused")
        stats = get_conversion_cache().stats()
        self.assertEqual(stats["hits"], 1)
        self.assertEqual(stats["size"], 1)

    def test_cache_key_includes_config(self):
        stripped = convert_full("a+b")
        kept = convert_full("a+b", ParserConfig(strip_outer_parens=False))
        self.assertEqual(stripped["parenthesized"], "a+b")
        self.assertEqual(kept["parenthesized"], "(a+b)")

    def test_cache_can_be_disabled(self):
        config = ParserConfig(cache_results=False)
        result1 = convert_full("a+b", config)
        result2 = convert_full("a+b", config)
        self.assertIsNot(result1, result2)
        self.assertEqual(get_conversion_cache().stats()["size"], 0)

    def test_failures_are_cached_too(self):
        result1 = convert_full("a+")
        result2 = convert_full("a+")
        self.assertEqual(result1, result2)
        self.assertEqual(get_conversion_cache().stats()["hits"], 1)

    def test_mutating_a_result_leaves_the_cache_intact(self):
        first = convert_full("a+")
        first["errors"].clear()
        first["postfix"] = "tampered"
        second = convert_full("a+")
        self.assertEqual(len(second["errors"]), 1)
        self.assertIsNone(second["postfix"])
        self.assertIsNot(first["errors"], second["errors"])
