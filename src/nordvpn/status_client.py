"""
Client for the NordVPN command line tool.

Connect and disconnect are fire-and-forget: the command is spawned and its
output logged in the background. Status and group queries run synchronously
and block the caller until the command exits.
"""

import subprocess
import logging
from typing import List, Optional

from config.server_groups import ServerGroup
from nordvpn.status import ConnectionStatus
from nordvpn.status_parser import parse_status, parse_groups
from utils.subprocess_logger import SubprocessLogger

logger = logging.getLogger(__name__)


class StatusClient:
    """Issues commands to the NordVPN CLI and parses what it prints"""

    CONNECT = "connect"
    DISCONNECT = "disconnect"
    STATUS = "status"
    GROUPS = "groups"

    def __init__(self, binary: str = "nordvpn"):
        self.binary = binary
        self.groups: List[ServerGroup] = []
        self.group: Optional[str] = None

    def connect(self, group_name: Optional[str] = None) -> None:
        """Start connecting, optionally to a server group. Does not wait for the result."""
        self.group = group_name or None
        args = [self.CONNECT]
        if group_name:
            args.append(group_name)
        self._spawn(args)

    def disconnect(self) -> None:
        """Start disconnecting. Does not wait for the result."""
        self.group = None
        self._spawn([self.DISCONNECT])

    def list_available_groups(self) -> List[ServerGroup]:
        """Known server groups offered by the CLI, in the order of SERVER_GROUPS"""
        self.groups = parse_groups(self._run([self.GROUPS]))
        logger.info(f"Available server groups: {[group.name for group in self.groups]}")
        return self.groups

    def query_status(self) -> ConnectionStatus:
        """Run the status command and parse its output"""
        status = parse_status(self._run([self.STATUS]), self.group)
        logger.debug(f"Queried status: {status!r}")
        return status

    def _command(self, args: List[str]) -> List[str]:
        return [self.binary, *args]

    def _spawn(self, args: List[str]) -> None:
        command = self._command(args)
        logger.info(f"Running: {' '.join(command)}")
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.error(f"Could not run {command[0]}: {e}")
            return

        reader = SubprocessLogger(process.stdout, process.stderr,
                                  process_name=f"nordvpn {args[0]}", logger=logger, process=process)
        reader.start()

    def _run(self, args: List[str]) -> str:
        """Run a command to completion and return its stdout, empty on failure"""
        command = self._command(args)
        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.warning(f"Could not run {command[0]}: {e}")
            return ""

        if result.returncode != 0:
            logger.debug(f"{' '.join(command)} exited with code {result.returncode}: {result.stderr.strip()}")
        return result.stdout or ""
