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
Utilities for working with dataclasses.
"""
from dataclasses import dataclass
from typing import Callable, Type, TypeVar

_T = TypeVar('_T')


def immutable_dataclass(*args, **kwargs) -> Callable[[Type[_T]], Type[_T]]:
    """
    Make an immutable, hashable dataclass.

    A wrapper around the dataclass decorator to be used in its place.

    Examples
    --------
    >>> @immutable_dataclass
    ... class Example:
    ...     example: int
    ...
    >>> ex = Example(0)
    >>> ex.example = 5
    Traceback (most recent call last):
      File "<stdin>", line 1, in <module>
      File "<string>", line 4, in __setattr__
    dataclasses.FrozenInstanceError: cannot assign to field 'example'
    """
    kwargs.update({
        'frozen': True,
        'eq': True
    })
    return dataclass(*args, **kwargs)
