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
Defines a lexer that splits s-expression text into tokens.
"""
import logging
from typing import Iterator, List, TextIO

from sexptree.language.sexp.exception import SexpLexerError
from sexptree.language.token import Token, TokenConsts
from sexptree.util.logging import default_log_level

logger = logging.getLogger(__name__)
logger.setLevel(default_log_level())


class SexpLexer:
    """
    Namespace for methods that tokenize s-expressions.

    Tokens are delimited by whitespace and parentheses.
    A semicolon starts a comment that runs to the end of the line.
    A double quote starts an atom that runs to the next unescaped double
    quote; the quotes and any backslash escapes are kept in the atom's
    text.
    """

    c_lpar = TokenConsts.C_LPAR
    c_rpar = TokenConsts.C_RPAR
    c_comment = TokenConsts.C_COMMENT
    c_quote = TokenConsts.C_QUOTE
    c_escape = TokenConsts.C_ESCAPE

    @classmethod
    def iter_tokens(cls, text: str) -> Iterator[Token]:  # noqa: C901
        """
        Lazily split the given text into tokens.

        Parameters
        ----------
        text : str
            Text containing zero or more s-expressions.

        Yields
        ------
        Token
            The next token in the text.

        Raises
        ------
        SexpLexerError
            If a quoted atom is not terminated.
        """
        lineno = 1
        line_start = 0
        i = 0
        n = len(text)
        while i < n:
            c = text[i]
            column = i - line_start
            if c == "\n":
                lineno += 1
                line_start = i + 1
                i += 1
            elif c.isspace():
                i += 1
            elif c == cls.c_lpar:
                yield Token.left_paren(lineno, column)
                i += 1
            elif c == cls.c_rpar:
                yield Token.right_paren(lineno, column)
                i += 1
            elif c == cls.c_comment:
                end = text.find("\n", i)
                if end < 0:
                    end = n
                yield Token.comment(text[i + 1 : end], lineno, column)
                i = end
            elif c == cls.c_quote:
                start = i
                start_lineno = lineno
                i += 1
                escaped = False
                while i < n:
                    c = text[i]
                    if c == "\n":
                        lineno += 1
                        line_start = i + 1
                    if escaped:
                        escaped = False
                    elif c == cls.c_escape:
                        escaped = True
                    elif c == cls.c_quote:
                        break
                    i += 1
                # end while
                if i >= n:
                    error = SexpLexerError(
                        "Unterminated quoted atom",
                        start_lineno,
                        column)
                    logger.error(str(error))
                    raise error
                i += 1
                yield Token.atom(text[start : i], start_lineno, column)
            else:
                start = i
                while (i < n and not text[i].isspace()
                       and text[i] not in TokenConsts.DELIMITERS):
                    i += 1
                # end while
                yield Token.atom(text[start : i], lineno, column)
            # end if
        # end while

    @classmethod
    def tokenize(cls, text: str) -> List[Token]:
        """
        Split the given text into a list of tokens.

        See Also
        --------
        SexpLexer.iter_tokens
        """
        tokens = list(cls.iter_tokens(text))
        logger.debug(f"Lexed {len(tokens)} tokens from {len(text)} characters")
        return tokens

    @classmethod
    def tokenize_stream(cls, stream: TextIO) -> List[Token]:
        """
        Read a text stream to its end and split it into tokens.

        Parameters
        ----------
        stream : TextIO
            An open text stream.
            The caller remains responsible for closing it.

        Returns
        -------
        List[Token]
            The tokens of the stream's remaining content.
        """
        return cls.tokenize(stream.read())
