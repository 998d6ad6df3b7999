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
Abstractions for s-expression lexical tokens.
"""
from dataclasses import field
from enum import Enum, auto
from typing import Optional

from sexptree.util.dataclasses import immutable_dataclass


class TokenConsts:
    """
    Collects constants related to lexical tokenization.
    """

    C_LPAR = '('
    C_RPAR = ')'
    C_COMMENT = ';'
    C_QUOTE = '"'
    C_ESCAPE = '\\'

    DELIMITERS = frozenset((C_LPAR, C_RPAR, C_COMMENT, C_QUOTE))

    LOC_UNSET = -1


class TokenKind(Enum):
    """
    The kinds of tokens an s-expression lexer may produce.
    """

    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    COMMENT = auto()
    ATOM = auto()


@immutable_dataclass
class Token:
    """
    A single lexical token of an s-expression.

    Only comment and atom tokens carry text; parentheses have
    ``text=None``. Locations are ignored when comparing tokens.
    """

    kind: TokenKind
    text: Optional[str] = None
    lineno: int = field(default=TokenConsts.LOC_UNSET, compare=False)
    """
    The 1-based line on which the token starts, if known.
    """
    column: int = field(default=TokenConsts.LOC_UNSET, compare=False)
    """
    The 0-based column at which the token starts, if known.
    """

    def __post_init__(self) -> None:
        """
        Verify that text is present exactly when the kind requires it.
        """
        has_text = self.kind in (TokenKind.COMMENT, TokenKind.ATOM)
        if has_text and self.text is None:
            raise ValueError(f"{self.kind.name} tokens require text")
        elif not has_text and self.text is not None:
            raise ValueError(f"{self.kind.name} tokens cannot carry text")

    def __str__(self) -> str:
        """
        Get the source text this token stands for.
        """
        if self.kind == TokenKind.LEFT_PAREN:
            return TokenConsts.C_LPAR
        elif self.kind == TokenKind.RIGHT_PAREN:
            return TokenConsts.C_RPAR
        elif self.kind == TokenKind.COMMENT:
            return TokenConsts.C_COMMENT + self.text
        else:
            return self.text

    @property
    def location(self) -> str:
        """
        Get a human-readable location of the token.
        """
        if self.lineno == TokenConsts.LOC_UNSET:
            return "<unknown location>"
        return f"line {self.lineno}, column {self.column}"

    def is_left_parenthesis(self) -> bool:  # noqa: D102
        return self.kind == TokenKind.LEFT_PAREN

    def is_right_parenthesis(self) -> bool:  # noqa: D102
        return self.kind == TokenKind.RIGHT_PAREN

    def is_comment(self) -> bool:  # noqa: D102
        return self.kind == TokenKind.COMMENT

    def is_atom(self) -> bool:  # noqa: D102
        return self.kind == TokenKind.ATOM

    @classmethod
    def left_paren(cls, lineno: int = TokenConsts.LOC_UNSET,
                   column: int = TokenConsts.LOC_UNSET) -> 'Token':
        """
        Make a left parenthesis token.
        """
        return cls(TokenKind.LEFT_PAREN, None, lineno, column)

    @classmethod
    def right_paren(cls, lineno: int = TokenConsts.LOC_UNSET,
                    column: int = TokenConsts.LOC_UNSET) -> 'Token':
        """
        Make a right parenthesis token.
        """
        return cls(TokenKind.RIGHT_PAREN, None, lineno, column)

    @classmethod
    def comment(cls, text: str, lineno: int = TokenConsts.LOC_UNSET,
                column: int = TokenConsts.LOC_UNSET) -> 'Token':
        """
        Make a comment token holding `text` (without the delimiter).
        """
        return cls(TokenKind.COMMENT, text, lineno, column)

    @classmethod
    def atom(cls, text: str, lineno: int = TokenConsts.LOC_UNSET,
             column: int = TokenConsts.LOC_UNSET) -> 'Token':
        """
        Make an atom token holding `text`.
        """
        return cls(TokenKind.ATOM, text, lineno, column)
