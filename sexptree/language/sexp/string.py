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
Defines leaf s-expression nodes with string content.
"""
from typing import Iterator, NoReturn

from sexptree.language.sexp.exception import SexpTypeError
from sexptree.language.sexp.node import SexpNode


class SexpString(SexpNode):
    """
    An atomic node containing a single string of content.

    The content is printed verbatim; any quoting belongs to the content
    itself.
    """

    def __init__(self, content: str = None) -> None:
        if content is not None and not isinstance(content, str):
            raise SexpTypeError(
                f"Atom content must be a string, not {type(content).__name__}")
        self._content = content if content is not None else ""

    def __bool__(self) -> bool:  # noqa: D105
        return True

    def __deepcopy__(self, memodict=None) -> 'SexpString':  # noqa: D105
        return SexpString(self._content)

    def __eq__(self, other: SexpNode) -> bool:  # noqa: D105
        if not isinstance(other, SexpNode):
            return NotImplemented
        else:
            return other.is_string() and other.get_content() == self._content

    def __iter__(self) -> Iterator['SexpNode']:  # noqa: D105
        raise SexpTypeError("Cannot iterate over children of an s-exp string")

    def __repr__(self) -> str:  # noqa: D105
        return f"SexpString({self._content!r})"

    def __str__(self) -> str:  # noqa: D105
        return self._content

    @property
    def depth(self) -> int:  # noqa: D102
        return 0

    @property
    def num_nodes(self) -> int:  # noqa: D102
        return 1

    @property
    def num_leaves(self) -> int:  # noqa: D102
        return 1

    def add(self, child: SexpNode) -> NoReturn:  # noqa: D102
        raise SexpTypeError("Cannot add a child to an s-exp string")

    def contains_str(self, s: str) -> bool:
        """
        Return whether `s` is equal to this node's content.
        """
        return self._content == s

    def get(self, index: int) -> NoReturn:  # noqa: D102
        raise SexpTypeError("Cannot get the children of an s-exp string")

    def get_content(self) -> str:  # noqa: D102
        return self._content

    def get_length(self) -> NoReturn:  # noqa: D102
        raise SexpTypeError("An s-exp string has no length")

    def is_string(self) -> bool:  # noqa: D102
        return True

    def pretty_format(self, *args, **kwargs) -> str:
        """
        Return the string content of this node.
        """
        return self._content

    def to_python_ds(self) -> str:
        """
        Return the string content of this node.
        """
        return self._content
