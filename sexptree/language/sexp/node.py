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
Defines an abstract representation of s-expressions as nodes in trees.

A node is either an atom (`SexpString`) holding a single string or a
list (`SexpList`) holding an ordered sequence of child nodes.
Each list exclusively owns its children.

Trees are not synchronized.
Concurrent reads (comparison, iteration, printing) of a finished tree
are safe, but callers must not call `add` on any node of a tree while
another thread is accessing that tree.
"""

import abc
from typing import Iterator, List, Optional, Union

import numpy as np

from sexptree.language.sexp.exception import SexpIndexError, SexpTypeError


class SexpNode(abc.ABC):
    """
    Abstract class of a node in an s-exp represented as a tree.
    """

    @abc.abstractmethod
    def __deepcopy__(self, memodict=None) -> 'SexpNode':  # noqa: D105
        ...

    def __getitem__(self, index: int) -> 'SexpNode':
        """
        Get the `index`-th child of this node.

        Negative indices count from the end of the list, as they would
        for a Python list.

        Parameters
        ----------
        index : int
            The index of the requested child.

        Returns
        -------
        SexpNode
            The requested child node.

        Raises
        ------
        SexpTypeError
            If the node has no children, i.e., it is an atom.
        SexpIndexError
            If the index is out of bounds.
        """
        if isinstance(index, (int, np.integer)) and index < 0:
            index += self.get_length()
        return self.get(index)

    @abc.abstractmethod
    def __eq__(self, other: 'SexpNode') -> bool:  # noqa: D105
        ...

    @abc.abstractmethod
    def __iter__(self) -> Iterator['SexpNode']:
        """
        Iterate over the immediate children of this node in order.

        Raises
        ------
        SexpTypeError
            If this node is an atom.
        """
        ...

    def __len__(self) -> int:
        """
        Get the number of immediate children.

        Returns
        -------
        int
            The number of immediate children of this node.

        Raises
        ------
        SexpTypeError
            If this node is an atom.
        """
        return self.get_length()

    @abc.abstractmethod
    def __repr__(self) -> str:  # noqa: D105
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """
        Get a compact representation of this subtree as an s-expression.
        """
        ...

    @property
    def content(self) -> str:
        """
        Get the content of the SexpString, or throw exception.

        Returns
        -------
        str
            The content of the node if it is a string.

        Raises
        ------
        SexpTypeError
            If the content is None, i.e. the node is not a string.
        """
        content = self.get_content()
        if content is None:
            raise SexpTypeError("Cannot get the content of an s-exp list.")
        else:
            return content
        # end if

    @property
    @abc.abstractmethod
    def depth(self) -> int:
        """
        Get the depth of the s-expression rooted at this node.

        The depth is the length of the longest path from this node to a
        leaf.
        Atoms and empty lists have depth 0.

        Returns
        -------
        int
            The depth of the tree rooted at this `SexpNode`.
        """
        ...

    @property
    @abc.abstractmethod
    def num_nodes(self) -> int:
        """
        Get the number of nodes in this node's subtree.

        Returns
        -------
        int
            The number of nodes in the tree rooted at this `SexpNode`.
        """
        ...

    @property
    @abc.abstractmethod
    def num_leaves(self) -> int:
        """
        Get the number of leaves in this node's subtree.

        Returns
        -------
        int
            The number of leaves in the tree rooted at this `SexpNode`.
        """
        ...

    @abc.abstractmethod
    def add(self, child: 'SexpNode') -> None:
        """
        Append a child to the end of this list.

        Parameters
        ----------
        child : SexpNode
            The node to append.
            It should not already belong to another tree.

        Raises
        ------
        SexpTypeError
            If this node is an atom or `child` is not an `SexpNode`.
        """
        ...

    @abc.abstractmethod
    def contains_str(self, s: str) -> bool:
        """
        Return whether the given string is in in this node's subtree.

        Returns
        -------
        bool
            True if any atom in this subtree has content `s`.
        """
        ...

    def flatten(self) -> List["SexpNode"]:
        """
        Flatten the s-expression tree according to a preorder traversal.

        Returns
        -------
        list of SexpNode
            The nodes contained in this s-expression tree in preorder
            (each node appears before any children).
        """
        node_list = []
        stack = [self]
        while stack:
            node = stack.pop()
            node_list.append(node)
            if node.is_list():
                stack.extend(reversed(node.get_children()))
        return node_list

    @abc.abstractmethod
    def get(self, index: int) -> 'SexpNode':
        """
        Get the `index`-th child of this list.

        Parameters
        ----------
        index : int
            The index of the requested child in ``[0, len(self))``.

        Returns
        -------
        SexpNode
            The requested child node.

        Raises
        ------
        SexpTypeError
            If this node is an atom.
        SexpIndexError
            If the index is out of bounds.
        """
        ...

    def get_children(self) -> Optional[List["SexpNode"]]:
        """
        Get the children of this (list) node.

        Returns
        -------
        list of SexpNode or None
            A copy of this node's children if this is a list node,
            otherwise None.
        """
        return None

    def get_content(self) -> Optional[str]:
        """
        Get the content of this (string) node.

        Returns
        -------
        str or None
            The node's content if this is a string node, otherwise None.
        """
        return None

    def get_depth(self) -> int:
        """
        Get the depth of this node.

        See Also
        --------
        SexpNode.depth
        """
        return self.depth

    @abc.abstractmethod
    def get_length(self) -> int:
        """
        Get the number of immediate children.

        Raises
        ------
        SexpTypeError
            If this node is an atom.
        """
        ...

    def is_atomic(self) -> bool:
        """
        Check if this node is an atom.

        Returns
        -------
        bool
            True if this node is an atom, False otherwise.
        """
        return self.is_string()

    def is_list(self) -> bool:
        """
        Check if this node is a list.

        Returns
        -------
        bool
            True if this node is a list, False otherwise.
        """
        return False

    def is_string(self) -> bool:
        """
        Check if this node is a string.

        Returns
        -------
        bool
            True if this node is a string, False otherwise.
        """
        return False

    @abc.abstractmethod
    def pretty_format(self, max_depth: float = np.inf) -> str:
        """
        Format this s-expression into a human-readable string.

        Each non-empty list starts on a new line, indented by two spaces
        for each enclosing list.

        Parameters
        ----------
        max_depth : float, optional
            Lists nested more than `max_depth` levels below this node
            are elided, by default unbounded.

        Returns
        -------
        str
            A pretty human-readable string for this s-expression.
        """
        ...

    def serialize(self) -> str:
        """
        Convert this node's subtree to an s-expression.

        Returns
        -------
        str
            An s-expression corresponding to this node's subtree.
        """
        return self.__str__()

    @abc.abstractmethod
    def to_python_ds(self) -> Union[str, list]:
        """
        Convert this s-expression to Python lists and strings.
        """
        ...

    @classmethod
    def deserialize(cls, data: str) -> 'SexpNode':
        """
        Parse the given s-expression into an `SexpNode`.

        Parameters
        ----------
        data : str
            A serialized s-expression.

        Returns
        -------
        SexpNode
            The parsed, deserialized s-expression.
        """
        from sexptree.language.sexp.parser import SexpParser
        return SexpParser.parse(data)


def check_node(obj: object) -> SexpNode:
    """
    Ensure that the given object is an `SexpNode`.

    Raises
    ------
    SexpTypeError
        If `obj` is not an `SexpNode`.
    """
    if not isinstance(obj, SexpNode):
        raise SexpTypeError(
            f"Expected an s-exp node, got {type(obj).__name__}")
    return obj


def check_index(index: object, length: int) -> int:
    """
    Ensure that `index` is a valid child index for a list of `length`.

    Raises
    ------
    SexpTypeError
        If `index` is not an integer.
    SexpIndexError
        If `index` is not in ``[0, length)``.
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise SexpTypeError(
            f"Child indices must be integers, not {type(index).__name__}")
    index = int(index)
    if index < 0 or index >= length:
        raise SexpIndexError(
            f"Cannot get child ({index}), "
            f"this list only has {length} children.")
    return index
