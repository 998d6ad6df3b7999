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
Provides parsing utilities and abstractions for s-expressions.
"""

from .exception import (  # noqa: F401
    IllegalSexpOperationException,
    SexpIndexError,
    SexpLexerError,
    SexpParseError,
    SexpStructureError,
    SexpTypeError,
)
from .lexer import SexpLexer  # noqa: F401
from .list import SexpList  # noqa: F401
from .node import SexpNode  # noqa: F401
from .parser import SexpParser  # noqa: F401
from .string import SexpString  # noqa: F401


def new_atomic_sexp(content: str) -> SexpString:
    """
    Make an atom holding `content`.
    """
    return SexpString(content)


def new_non_atomic_sexp() -> SexpList:
    """
    Make an empty list to be filled with `SexpList.add`.
    """
    return SexpList()
