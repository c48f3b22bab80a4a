"""
Unit tests for locating the NordVPN client.
"""

import unittest
import tempfile
from pathlib import Path
from unittest.mock import patch

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from nordvpn.cli_finder import find_nordvpn


class TestFindNordvpn(unittest.TestCase):
    """Test cases for find_nordvpn"""

    @patch("nordvpn.cli_finder.shutil.which")
    def test_bare_name_searched_on_path(self, mock_which):
        mock_which.return_value = "/usr/bin/nordvpn"

        self.assertEqual(find_nordvpn("nordvpn"), Path("/usr/bin/nordvpn"))
        mock_which.assert_called_once_with("nordvpn")

    @patch("nordvpn.cli_finder.shutil.which")
    def test_bare_name_not_found(self, mock_which):
        mock_which.return_value = None

        self.assertIsNone(find_nordvpn("nordvpn"))

    @patch("nordvpn.cli_finder.shutil.which")
    def test_explicit_path(self, mock_which):
        with tempfile.TemporaryDirectory() as temp_dir:
            binary = Path(temp_dir) / "nordvpn"
            binary.write_text("#!/bin/sh\n")

            self.assertEqual(find_nordvpn(str(binary)), binary)
            self.assertIsNone(find_nordvpn(str(Path(temp_dir) / "missing")))

        mock_which.assert_not_called()


if __name__ == '__main__':
    unittest.main()
