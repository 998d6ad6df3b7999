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
Defines a parser of s-expressions.
"""
import logging
from typing import Iterable, List, NoReturn, Optional, TextIO, Union

from sexptree.language.sexp.exception import SexpStructureError
from sexptree.language.sexp.lexer import SexpLexer
from sexptree.language.sexp.list import SexpList
from sexptree.language.sexp.node import SexpNode
from sexptree.language.sexp.string import SexpString
from sexptree.language.token import Token
from sexptree.util.logging import default_log_level

logger = logging.getLogger(__name__)
logger.setLevel(default_log_level())


class SexpParser:
    """
    Namespace for methods that parse s-expressions.
    """

    @classmethod
    def _fail(cls, message: str, token: Optional[Token] = None) -> NoReturn:
        error = SexpStructureError(message, token)
        logger.error(str(error))
        raise error

    @classmethod
    def build(cls, tokens: Iterable[Token]) -> SexpList:
        """
        Build an s-expression tree from a sequence of tokens.

        The first non-comment token must open the root list.
        Parsing stops as soon as the root list is closed; any tokens
        after that point are ignored without error, so ``(a) (b)``
        yields just ``(a)``.
        Comments are discarded wherever they appear.

        Nested lists are tracked with an explicit stack, so arbitrarily
        deep input does not exhaust the interpreter's call stack.

        Parameters
        ----------
        tokens : Iterable[Token]
            A finite sequence of tokens, e.g., as produced by
            `SexpLexer.tokenize`.

        Returns
        -------
        SexpList
            The root list of the first complete s-expression.

        Raises
        ------
        SexpStructureError
            If the first non-comment token is not a left parenthesis or
            the sequence ends before the root list is closed.
        """
        stack: List[SexpList] = []
        current: Optional[SexpList] = None
        tokens = iter(tokens)
        for token in tokens:
            if token.is_comment():
                continue
            elif current is None:
                if not token.is_left_parenthesis():
                    cls._fail("expected opening parenthesis", token)
                current = SexpList()
            elif token.is_left_parenthesis():
                stack.append(current)
                current = SexpList()
            elif token.is_right_parenthesis():
                if not stack:
                    if logger.isEnabledFor(logging.DEBUG):
                        ignored = sum(1 for t in tokens if not t.is_comment())
                        if ignored:
                            logger.debug(
                                f"Ignoring {ignored} tokens after the end of "
                                "the first s-expression")
                    return current
                # fresh lists cannot form cycles
                parent = stack.pop()
                parent._append(current)
                current = parent
            else:
                current._append(SexpString(token.text))
            # end if
        # end for
        if current is None:
            cls._fail("expected opening parenthesis")
        cls._fail("unbalanced expression, missing closing parenthesis")

    @classmethod
    def from_python_ds(cls, python_ds: Union[str, Iterable]) -> SexpNode:
        """
        Convert an Python str/list s-expression to an `SexpNode`.

        Parameters
        ----------
        python_ds : Union[str, Iterable]
            A standalone term in an s-expression represented by Python
            lists and strings.

        Returns
        -------
        SexpNode
            An abstract, tree-structured representation of the given
            s-expression term.

        See Also
        --------
        SexpNode.to_python_ds : For the inverse operation.
        """
        if isinstance(python_ds, str):
            return SexpString(python_ds)
        else:
            return SexpList([cls.from_python_ds(child) for child in python_ds])
        # end if

    @classmethod
    def parse(cls, sexp_str: str) -> SexpList:
        """
        Parse a string of s-expression to a structured s-expression.

        Parameters
        ----------
        sexp_str : str
            A string whose first s-expression is a list.

        Returns
        -------
        SexpList
            The deserialized representation of the first s-expression.

        Raises
        ------
        SexpLexerError
            If the string cannot be tokenized.
        SexpStructureError
            If the tokens do not form a balanced list.

        See Also
        --------
        SexpParser.build : For the treatment of trailing content.
        """
        return cls.build(SexpLexer.tokenize(sexp_str))

    @classmethod
    def parse_stream(cls, stream: TextIO) -> SexpList:
        """
        Read a text stream to its end and parse its first s-expression.

        See Also
        --------
        SexpParser.parse
        """
        return cls.build(SexpLexer.tokenize_stream(stream))
