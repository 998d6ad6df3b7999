#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of sexptree.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Test suite for s-expression parsing.
"""

import copy
import io
import logging
import unittest

from sexptree.language.sexp.exception import SexpStructureError
from sexptree.language.sexp.lexer import SexpLexer
from sexptree.language.sexp.list import SexpList
from sexptree.language.sexp.parser import SexpParser
from sexptree.language.sexp.string import SexpString
from sexptree.language.token import Token


class TestSexpParser(unittest.TestCase):
    """
    Test suite for `SexpParser`.
    """

    def test_build(self):
        """
        Verify that a tree can be built directly from tokens.
        """
        tokens = [
            Token.comment(" leading"),
            Token.left_paren(),
            Token.atom("a"),
            Token.left_paren(),
            Token.comment(" inner"),
            Token.atom("b"),
            Token.right_paren(),
            Token.right_paren()
        ]
        sexp = SexpParser.build(tokens)
        self.assertEqual(
            sexp,
            SexpList([SexpString("a"),
                      SexpList([SexpString("b")])]))
        # any iterable of tokens is accepted
        self.assertEqual(SexpParser.build(iter(tokens)), sexp)

    def test_parse(self):
        """
        Verify basic parsing functionality.
        """
        sexp = SexpParser.parse("(a (b c) d)")
        self.assertIsInstance(sexp, SexpList)
        self.assertEqual(len(sexp), 3)
        self.assertEqual(sexp[0], SexpString("a"))
        self.assertEqual(sexp[1], SexpList([SexpString("b"), SexpString("c")]))
        self.assertEqual(sexp[1].depth, 1)
        self.assertEqual(sexp[2], SexpString("d"))
        self.assertEqual(sexp.depth, 2)
        self.assertEqual(str(sexp), "(a (b c) d)")
        self.assertEqual(
            str(SexpParser.parse('(expr \n  (v "literal")\n  (loc ([LOC])))')),
            '(expr (v "literal") (loc ([LOC])))')
        self.assertEqual(
            str(SexpParser.parse("(日本語能力!! ソﾊﾝｶｸ)")),
            "(日本語能力!! ソﾊﾝｶｸ)")

    def test_parse_empty_list(self):
        """
        Verify that empty lists parse at the root and when nested.
        """
        sexp = SexpParser.parse("()")
        self.assertEqual(len(sexp), 0)
        self.assertEqual(sexp.depth, 0)
        self.assertEqual(str(sexp), "()")
        sexp = SexpParser.parse("(() a ())")
        self.assertEqual(len(sexp), 3)
        self.assertEqual(sexp.depth, 1)
        self.assertEqual(sexp[0].depth, 0)
        self.assertEqual(str(sexp), "(() a ())")

    def test_parse_comments(self):
        """
        Verify that comments do not contribute to the tree.
        """
        sexp = SexpParser.parse("; header\n(a ; first\n b) ; trailer")
        self.assertEqual(sexp, SexpParser.parse("(a b)"))

    def test_missing_opening_parenthesis(self):
        """
        Verify that input must start with a list.
        """
        for text in ["", "   ", "; only a comment", "a)", "a", ")"]:
            with self.subTest(text=text):
                with self.assertRaises(SexpStructureError) as cm:
                    SexpParser.parse(text)
                self.assertIn("expected opening parenthesis", str(cm.exception))
        with self.assertRaises(SexpStructureError):
            SexpParser.build([])

    def test_missing_closing_parenthesis(self):
        """
        Verify that unterminated input fails without a partial result.
        """
        for text in ["(", "(a (b c)", "((a)", "(a ; )"]:
            with self.subTest(text=text):
                with self.assertRaises(SexpStructureError) as cm:
                    SexpParser.parse(text)
                self.assertIn(
                    "unbalanced expression, missing closing parenthesis",
                    str(cm.exception))
                self.assertIsNone(cm.exception.token)

    def test_structure_error(self):
        """
        Verify the details carried by structural errors.
        """
        with self.assertRaises(SexpStructureError) as cm:
            SexpParser.parse("\n  b (c)")
        error = cm.exception
        self.assertIsInstance(error, ValueError)
        self.assertEqual(error.token, Token.atom("b"))
        self.assertEqual(error.token.lineno, 2)
        self.assertEqual(error.token.column, 2)
        self.assertIn("line 2, column 2", str(error))
        with self.assertLogs("sexptree.language.sexp.parser", "ERROR"):
            with self.assertRaises(SexpStructureError):
                SexpParser.parse("(a")

    def test_trailing_content_ignored(self):
        """
        Verify that only the first s-expression is parsed.
        """
        self.assertEqual(
            SexpParser.parse("(a) (b)"),
            SexpList([SexpString("a")]))
        self.assertEqual(
            SexpParser.parse("(a))"),
            SexpList([SexpString("a")]))
        # trailing content is not even well-formed
        self.assertEqual(
            SexpParser.parse("(a) b ) ( c"),
            SexpList([SexpString("a")]))
        with self.assertLogs("sexptree.language.sexp.parser", "DEBUG") as cm:
            SexpParser.parse("(a) (b)")
        self.assertIn("Ignoring 3 tokens", cm.output[0])

    def test_trailing_content_not_read(self):
        """
        Verify that trailing tokens are only consumed for debug logging.
        """
        logger = logging.getLogger("sexptree.language.sexp.parser")
        old_level = logger.level
        logger.setLevel(logging.INFO)
        try:
            tokens = iter(SexpLexer.tokenize("(a) (b)"))
            self.assertEqual(
                SexpParser.build(tokens),
                SexpList([SexpString("a")]))
            self.assertEqual(next(tokens), Token.left_paren())
        finally:
            logger.setLevel(old_level)

    def test_round_trip(self):
        """
        Verify that printed trees parse back to equal trees.
        """
        texts = [
            "()",
            "(a)",
            "(a (b c) d)",
            "((a b) (c (d (e))) () f)",
            '(define (f x) "a string" (g "quoted \\" quote"))',
            "(  spaced\t(out\n)  )",
        ]
        for text in texts:
            with self.subTest(text=text):
                sexp = SexpParser.parse(text)
                self.assertEqual(SexpParser.parse(str(sexp)), sexp)
                self.assertEqual(
                    SexpParser.build(SexpLexer.tokenize(str(sexp))),
                    sexp)

    def test_equality(self):
        """
        Verify structural equality of parsed trees.
        """
        self.assertEqual(SexpParser.parse("(a b)"), SexpParser.parse("(a b)"))
        self.assertNotEqual(
            SexpParser.parse("(a b)"),
            SexpParser.parse("(b a)"))
        self.assertNotEqual(SexpParser.parse("(a b)"), SexpParser.parse("(a)"))
        self.assertNotEqual(
            SexpParser.parse("(a b)"),
            SexpParser.parse("((a b))"))

    def test_deep_nesting(self):
        """
        Verify that nesting depth is not limited by the call stack.
        """
        levels = 5000
        text = "(" * levels + ")" * levels
        sexp = SexpParser.parse(text)
        self.assertEqual(sexp.depth, levels - 1)
        self.assertEqual(sexp.num_nodes, levels)
        self.assertEqual(str(sexp), text)
        # deep trees are compared with assertTrue to keep failure
        # messages from printing them
        text = "(" * levels + "a" + ")" * levels
        sexp = SexpParser.parse(text)
        self.assertEqual(sexp.depth, levels)
        self.assertEqual(str(sexp), text)
        self.assertTrue(SexpParser.parse(str(sexp)) == sexp)
        self.assertFalse(
            SexpParser.parse("(" * levels + "b" + ")" * levels) == sexp)
        self.assertFalse(SexpParser.parse(text[1 :-1] + " ()") == sexp)
        copied = copy.deepcopy(sexp)
        self.assertTrue(copied == sexp)
        self.assertEqual(copied.depth, levels)
        self.assertEqual(
            sexp.pretty_format(),
            "".join("\n" + "  " * d + "(" for d in range(levels)).strip()
            + "a" + ")" * levels)
        self.assertEqual(
            sexp.pretty_format(max_depth=2),
            "(\n  ( ... ))")
        python_ds = sexp.to_python_ds()
        for _ in range(levels - 1):
            self.assertEqual(len(python_ds), 1)
            python_ds = python_ds[0]
        self.assertEqual(python_ds, ["a"])

    def test_parse_stream(self):
        """
        Verify that s-expressions can be read from text streams.
        """
        stream = io.StringIO("; config\n(server (port 80))\n")
        self.assertEqual(
            SexpParser.parse_stream(stream),
            SexpParser.parse("(server (port 80))"))

    def test_from_python_ds(self):
        """
        Verify conversion from nested Python lists of strings.
        """
        sexp = SexpParser.from_python_ds(["a", ["b", "c"], []])
        self.assertEqual(sexp, SexpParser.parse("(a (b c) ())"))
        self.assertEqual(sexp.depth, 2)
        self.assertEqual(sexp.to_python_ds(), ["a", ["b", "c"], []])
        self.assertEqual(SexpParser.from_python_ds("a"), SexpString("a"))


if __name__ == '__main__':
    unittest.main()
