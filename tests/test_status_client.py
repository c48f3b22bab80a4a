"""
Unit tests for the NordVPN status client.
"""

import unittest
import subprocess
from unittest.mock import Mock, patch

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from nordvpn.status_client import StatusClient


def completed(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


class TestStatusClient(unittest.TestCase):
    """Test cases for StatusClient"""

    def setUp(self):
        self.client = StatusClient("nordvpn")

    @patch("nordvpn.status_client.subprocess.run")
    def test_query_status_runs_status_command(self, mock_run):
        mock_run.return_value = completed("Status: Connected\nCountry: X\nCity: Y\nCurrent server: se123.nordvpn.com\n")

        status = self.client.query_status()

        self.assertEqual(mock_run.call_args[0][0], ["nordvpn", "status"])
        self.assertTrue(status.connected)
        self.assertEqual(status.country, "X")
        self.assertEqual(status.city, "Y")
        self.assertEqual(status.server_number, 123)

    @patch("nordvpn.status_client.subprocess.run")
    def test_query_status_missing_binary(self, mock_run):
        """Test that a missing binary looks like a disconnected VPN"""
        mock_run.side_effect = FileNotFoundError("nordvpn")

        status = self.client.query_status()

        self.assertFalse(status.connected)
        self.assertEqual(status.status_text, "Unknown")

    @patch("nordvpn.status_client.subprocess.run")
    def test_query_status_nonzero_exit_still_parsed(self, mock_run):
        mock_run.return_value = completed("Status: Disconnected\n", returncode=1)

        status = self.client.query_status()

        self.assertFalse(status.connected)
        self.assertEqual(status.status_text, "Disconnected")

    @patch("nordvpn.status_client.subprocess.run")
    def test_list_available_groups(self, mock_run):
        mock_run.return_value = completed("P2P,Double_VPN-Onion_Over_VPN")

        groups = self.client.list_available_groups()

        self.assertEqual(mock_run.call_args[0][0], ["nordvpn", "groups"])
        self.assertEqual([group.name for group in groups], ["P2P", "Double_VPN", "Onion_Over_VPN"])
        self.assertEqual(self.client.groups, groups)

    @patch("nordvpn.status_client.subprocess.run")
    def test_list_available_groups_failure(self, mock_run):
        mock_run.side_effect = PermissionError("denied")

        self.assertEqual(self.client.list_available_groups(), [])

    @patch("nordvpn.status_client.SubprocessLogger")
    @patch("nordvpn.status_client.subprocess.Popen")
    def test_connect_with_group(self, mock_popen, mock_logger):
        """Test that connect spawns the command and does not wait for it"""
        process = Mock()
        mock_popen.return_value = process

        self.client.connect("P2P")

        self.assertEqual(mock_popen.call_args[0][0], ["nordvpn", "connect", "P2P"])
        process.wait.assert_not_called()
        process.communicate.assert_not_called()
        mock_logger.return_value.start.assert_called_once()
        # The background logger reaps the process
        self.assertIs(mock_logger.call_args.kwargs["process"], process)

    @patch("nordvpn.status_client.SubprocessLogger")
    @patch("nordvpn.status_client.subprocess.Popen")
    def test_connect_without_group(self, mock_popen, mock_logger):
        self.client.connect()

        self.assertEqual(mock_popen.call_args[0][0], ["nordvpn", "connect"])

    @patch("nordvpn.status_client.SubprocessLogger")
    @patch("nordvpn.status_client.subprocess.Popen")
    def test_connect_does_not_validate_group(self, mock_popen, mock_logger):
        self.client.connect("Not_A_Group")

        self.assertEqual(mock_popen.call_args[0][0], ["nordvpn", "connect", "Not_A_Group"])

    @patch("nordvpn.status_client.SubprocessLogger")
    @patch("nordvpn.status_client.subprocess.Popen")
    def test_disconnect(self, mock_popen, mock_logger):
        self.client.disconnect()

        self.assertEqual(mock_popen.call_args[0][0], ["nordvpn", "disconnect"])

    @patch("nordvpn.status_client.subprocess.Popen")
    def test_connect_missing_binary(self, mock_popen):
        """Test that a spawn failure is logged, not raised"""
        mock_popen.side_effect = FileNotFoundError("nordvpn")

        with self.assertLogs("nordvpn.status_client", level="ERROR"):
            self.client.connect("P2P")

    @patch("nordvpn.status_client.subprocess.run")
    @patch("nordvpn.status_client.SubprocessLogger")
    @patch("nordvpn.status_client.subprocess.Popen")
    def test_connected_group_remembered(self, mock_popen, mock_logger, mock_run):
        """Test that the group of the last connect shows up in the status"""
        mock_run.return_value = completed("Status: Connected\n")

        self.client.connect("Double_VPN")
        self.assertEqual(self.client.query_status().group, "Double_VPN")

        self.client.disconnect()
        self.client.connect()
        self.assertEqual(self.client.query_status().group, "Standard")

    def test_custom_binary(self):
        client = StatusClient("/opt/nordvpn/bin/nordvpn")
        with patch("nordvpn.status_client.subprocess.run") as mock_run:
            mock_run.return_value = completed("")
            client.query_status()

        self.assertEqual(mock_run.call_args[0][0], ["/opt/nordvpn/bin/nordvpn", "status"])


if __name__ == '__main__':
    unittest.main()
