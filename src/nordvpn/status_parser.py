"""
Parsing of the text printed by the NordVPN command line client.

The client has no machine readable output, so fields are picked out of the
human readable text by searching for fixed markers. Parsing is best effort:
anything that is missing or malformed becomes "Unknown", nothing raises.
"""

import re
from typing import List, Optional, Union

from config.constants import UNKNOWN, DEFAULT_GROUP
from config.server_groups import SERVER_GROUPS, ServerGroup, find_group
from nordvpn.status import ConnectionStatus

STATUS_MARKER = "Status:"
SERVER_MARKER = "server:"
COUNTRY_MARKER = "Country:"
CITY_MARKER = "City:"

CONNECTED_STATE = "CONNECTED"

GROUP_SEPARATORS = re.compile(r"[\s,\-]+")
DIGITS = re.compile(r"\d+")


def _find_line(lines: List[str], marker: str) -> Optional[str]:
    for line in lines:
        if marker in line:
            return line
    return None


def _field_value(lines: List[str], marker: str) -> str:
    """Text following the marker on the first line containing it"""
    line = _find_line(lines, marker)
    if line is None:
        return UNKNOWN
    value = line.split(marker, 1)[1].strip()
    return value or UNKNOWN


def _server_number(lines: List[str]) -> Union[int, str]:
    line = _find_line(lines, SERVER_MARKER)
    if line is None:
        return UNKNOWN
    match = DIGITS.search(line)
    if not match:
        return UNKNOWN
    return int(match.group(0))


def parse_status(output: str, requested_group: Optional[str] = None) -> ConnectionStatus:
    """Build a ConnectionStatus from the output of `nordvpn status`.

    Args:
        output: Raw text printed by the status command (may be empty)
        requested_group: Group name passed to the last connect command, reported
            as the active group when it is one of the known server groups

    Returns:
        The parsed status, with "Unknown" for every field that could not be found
    """
    full_detail_text = (output or "").strip()
    lines = full_detail_text.splitlines()
    status_text = _field_value(lines, STATUS_MARKER)

    if status_text.upper() != CONNECTED_STATE:
        return ConnectionStatus(
            connected=False,
            status_text=status_text,
            full_detail_text=full_detail_text,
        )

    group = find_group(requested_group)
    return ConnectionStatus(
        connected=True,
        status_text=status_text,
        full_detail_text=full_detail_text,
        group=group.name if group else DEFAULT_GROUP,
        server_number=_server_number(lines),
        country=_field_value(lines, COUNTRY_MARKER),
        city=_field_value(lines, CITY_MARKER),
    )


def parse_groups(output: str) -> List[ServerGroup]:
    """Known server groups that appear in the output of `nordvpn groups`.

    The result follows the order of SERVER_GROUPS, not the order of the output.
    """
    tokens = {token for token in GROUP_SEPARATORS.split(output or "") if token}
    return [group for group in SERVER_GROUPS if group.name in tokens]
