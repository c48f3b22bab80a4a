"""
Unit tests for application settings.
"""

import unittest
import tempfile
from pathlib import Path

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config.app_settings import AppSettings


class TestAppSettings(unittest.TestCase):
    """Test cases for AppSettings"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_dir = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_settings(self, text: str) -> None:
        (self.config_dir / "settings.yaml").write_text(text)

    def test_defaults_without_file(self):
        settings = AppSettings(self.config_dir)

        self.assertEqual(settings.get_nordvpn_binary(), "nordvpn")
        self.assertEqual(settings.get_poll_delays(), (1, 30))
        self.assertFalse(settings.get_refresh_after_action())

    def test_values_from_file(self):
        self.write_settings(
            "nordvpn_binary: /usr/local/bin/nordvpn\n"
            "poll_min_delay: 2\n"
            "poll_max_delay: 60\n"
            "refresh_after_action: true\n"
        )
        settings = AppSettings(self.config_dir)

        self.assertEqual(settings.get_nordvpn_binary(), "/usr/local/bin/nordvpn")
        self.assertEqual(settings.get_poll_delays(), (2, 60))
        self.assertTrue(settings.get_refresh_after_action())

    def test_invalid_delays_fall_back(self):
        self.write_settings("poll_min_delay: zero\npoll_max_delay: -5\n")
        settings = AppSettings(self.config_dir)

        self.assertEqual(settings.get_poll_delays(), (1, 30))

    def test_max_below_min(self):
        self.write_settings("poll_min_delay: 10\npoll_max_delay: 5\n")
        settings = AppSettings(self.config_dir)

        self.assertEqual(settings.get_poll_delays(), (10, 10))

    def test_malformed_yaml(self):
        """Test that an unreadable file falls back to defaults"""
        self.write_settings("nordvpn_binary: [unclosed\n")
        settings = AppSettings(self.config_dir)

        self.assertEqual(settings.settings, {})
        self.assertEqual(settings.get_nordvpn_binary(), "nordvpn")

    def test_non_mapping_yaml(self):
        self.write_settings("- just\n- a list\n")
        settings = AppSettings(self.config_dir)

        self.assertEqual(settings.settings, {})


if __name__ == '__main__':
    unittest.main()
