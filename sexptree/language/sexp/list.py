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
Defines internal, non-leaf s-expression nodes with branching subtrees.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from sexptree.language.sexp.exception import SexpTypeError
from sexptree.language.sexp.node import SexpNode, check_index, check_node
from sexptree.language.sexp.string import SexpString
from sexptree.language.token import TokenConsts


class SexpList(SexpNode):
    """
    An internal node of an s-expression tree with multiple branches.

    The depth of the list is maintained as children are added rather
    than recomputed from the subtree.
    Consequently, children must not be modified after being added, or
    the depth of their ancestors may become stale.

    Every traversal of the subtree uses an explicit stack, so the
    nesting depth of a tree is not limited by the interpreter's
    recursion limit.
    """

    pprint_newline = "\n"
    pprint_tab = "  "

    def __init__(self, children: Optional[Iterable[SexpNode]] = None) -> None:
        self._children: List[SexpNode] = []
        self._depth = 0
        if children is not None:
            for child in children:
                self.add(child)

    def __deepcopy__(self, memodict=None) -> 'SexpList':  # noqa: D105
        root = SexpList()
        stack: List[Tuple[SexpList, SexpList]] = [(self, root)]
        while stack:
            source, target = stack.pop()
            target._depth = source._depth
            for child in source._children:
                if child.is_list():
                    copied = SexpList()
                    stack.append((child, copied))
                else:
                    copied = SexpString(child.get_content())
                target._children.append(copied)
            # end for
        # end while
        return root

    def __eq__(self, other: SexpNode) -> bool:  # noqa: D105
        if not isinstance(other, SexpNode):
            return NotImplemented
        stack: List[Tuple[SexpNode, SexpNode]] = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left is right:
                continue
            elif left.is_list() != right.is_list():
                return False
            elif left.is_string():
                if left.get_content() != right.get_content():
                    return False
            elif len(left) != len(right):
                return False
            else:
                stack.extend(zip(left, right))
            # end if
        # end while
        return True

    def __iter__(self) -> Iterator[SexpNode]:  # noqa: D105
        return iter(self._children)

    def __repr__(self) -> str:  # noqa: D105
        return f"SexpList({self._children!r})"

    def __str__(self) -> str:  # noqa: D105
        pieces = []
        stack: List[Union[SexpNode, str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                pieces.append(item)
            elif item.is_list():
                pieces.append(TokenConsts.C_LPAR)
                stack.append(TokenConsts.C_RPAR)
                children = item.get_children()
                for i in reversed(range(len(children))):
                    stack.append(children[i])
                    if i > 0:
                        stack.append(" ")
                # end for
            else:
                pieces.append(item.get_content())
            # end if
        # end while
        return "".join(pieces)

    @property
    def depth(self) -> int:  # noqa: D102
        return self._depth

    @property
    def num_nodes(self) -> int:  # noqa: D102
        return len(self.flatten())

    @property
    def num_leaves(self) -> int:  # noqa: D102
        return sum(1 for node in self.flatten() if node.is_string())

    def _append(self, child: SexpNode) -> None:
        """
        Append a child without checking it.

        The child must be an `SexpNode` whose subtree does not contain
        this list.
        """
        self._depth = max(self._depth, child.depth + 1)
        self._children.append(child)

    def _is_within(self, sexp: SexpNode) -> bool:
        """
        Return whether this list is `sexp` or one of its descendants.
        """
        stack = [sexp]
        while stack:
            node = stack.pop()
            if node is self:
                return True
            stack.extend(c for c in node if c.is_list())
        # end while
        return False

    def add(self, child: SexpNode) -> None:  # noqa: D102
        child = check_node(child)
        if child.is_list() and self._is_within(child):
            raise SexpTypeError("Cannot add an s-exp list to its own subtree")
        self._append(child)

    def contains_str(self, s: str) -> bool:  # noqa: D102
        for node in self.flatten():
            if node.is_string() and node.contains_str(s):
                return True
            # end if
        # end for
        return False

    def get(self, index: int) -> SexpNode:  # noqa: D102
        return self._children[check_index(index, len(self._children))]

    def get_children(self) -> List[SexpNode]:  # noqa: D102
        return list(self._children)

    def get_length(self) -> int:  # noqa: D102
        return len(self._children)

    def is_list(self) -> bool:  # noqa: D102
        return True

    def pretty_format(
            self,
            max_depth: float = np.inf,
            depth: int = 0,
            strip: bool = True) -> str:  # noqa: D102
        formatted = self.pretty_format_iter(self, max_depth, depth)
        if strip:
            formatted = formatted.strip()
        return formatted

    def to_python_ds(self) -> list:  # noqa: D102
        root = []
        stack: List[Tuple[SexpList, list]] = [(self, root)]
        while stack:
            source, target = stack.pop()
            for child in source._children:
                if child.is_list():
                    converted = []
                    stack.append((child, converted))
                else:
                    converted = child.get_content()
                target.append(converted)
            # end for
        # end while
        return root

    @classmethod
    def pretty_format_iter(
            cls,
            sexp: SexpNode,
            max_depth: float,
            depth: int) -> str:
        """
        Pretty-print the given node's subtree.

        Each non-empty list begins on a new line indented once per
        enclosing list.

        Parameters
        ----------
        sexp : SexpNode
            A node.
        max_depth : float
            The maximum depth at which content should be printed.
            An ellipsis is printed in place of any non-empty list
            beyond the maximum depth.
        depth : int
            The depth of the given node `sexp` within the tree being
            printed, which determines its indentation.

        Returns
        -------
        str
            The pretty-printed format of the s-expression.
        """
        pieces = []
        stack: List[Union[str, Tuple[SexpNode, float, int]]] = [
            (sexp, max_depth, depth)
        ]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                pieces.append(item)
                continue
            # end if
            node, node_max_depth, node_depth = item
            if node.is_string():
                pieces.append(node.pretty_format())
            elif len(node) == 0:
                pieces.append(TokenConsts.C_LPAR + TokenConsts.C_RPAR)
            elif node_max_depth <= 0:
                pieces.append(" ... ")
            else:
                pieces.append(
                    cls.pprint_newline + node_depth * cls.pprint_tab
                    + TokenConsts.C_LPAR)
                stack.append(TokenConsts.C_RPAR)
                children = node.get_children()
                for i in reversed(range(len(children))):
                    stack.append(
                        (children[i],
                         node_max_depth - 1,
                         node_depth + 1))
                    if i > 0:
                        stack.append(" ")
                # end for
            # end if
        # end while
        return "".join(pieces)
