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
Test suite for logging utilities.
"""
import logging
import unittest
from unittest.mock import patch

from sexptree.util.debug import Debug
from sexptree.util.logging import default_log_level


class TestLogging(unittest.TestCase):
    """
    Tests for sexptree.util.logging functions.
    """

    def test_default_log_level(self):
        """
        Verify that the default level follows the debugging flag.
        """
        with patch.object(Debug, "is_debug", False):
            self.assertEqual(default_log_level(), logging.INFO)
        with patch.object(Debug, "is_debug", True):
            self.assertEqual(default_log_level(), logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
