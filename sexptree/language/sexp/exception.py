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
Defines exceptions related to s-expressions and their parsing.
"""
from typing import Optional, Tuple

from sexptree.language.token import Token


class IllegalSexpOperationException(Exception):
    """
    Exception type indicating illegal s-exp operations.
    """

    pass


class SexpTypeError(IllegalSexpOperationException, TypeError):
    """
    An operation was applied to the wrong kind of node.

    For example, asking an atom for its children.
    """

    pass


class SexpIndexError(IllegalSexpOperationException, IndexError):
    """
    A child index was outside the bounds of a list.
    """

    pass


class SexpParseError(ValueError):
    """
    Base class for failures to turn text or tokens into an s-expression.
    """

    pass


class SexpLexerError(SexpParseError):
    """
    The text could not be split into tokens.
    """

    def __init__(self, message: str, lineno: int, column: int):
        self.message = message
        self.lineno = lineno
        self.column = column
        super().__init__(message, lineno, column)

    def __reduce__(self) -> Tuple[type, Tuple[str, int, int]]:  # noqa: D105
        return SexpLexerError, (self.message, self.lineno, self.column)

    def __str__(self):  # noqa: D105
        return f"{self.message} (line {self.lineno}, column {self.column})"


class SexpStructureError(SexpParseError):
    """
    A token sequence is not a single balanced s-expression.
    """

    def __init__(self, message: str, token: Optional[Token] = None):
        self.message = message
        self.token = token
        super().__init__(message, token)

    def __reduce__(self) -> Tuple[type, Tuple[str, Optional[Token]]]:  # noqa: D105
        return SexpStructureError, (self.message, self.token)

    def __str__(self):  # noqa: D105
        if self.token is None:
            return self.message
        return f"{self.message} at {self.token.location}: '{self.token}'"
