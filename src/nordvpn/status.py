"""
Connection status value returned by the status query.
"""

from typing import Union

from config.constants import UNKNOWN, DEFAULT_GROUP


class ConnectionStatus:
    """Snapshot of the VPN connection, rebuilt on every poll"""

    def __init__(self, connected: bool, status_text: str, full_detail_text: str,
                 group: str = DEFAULT_GROUP,
                 server_number: Union[int, str] = UNKNOWN,
                 country: str = UNKNOWN,
                 city: str = UNKNOWN):
        self.connected = connected
        self.group = group
        self.status_text = status_text
        self.full_detail_text = full_detail_text
        self.server_number = server_number
        self.country = country
        self.city = city

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectionStatus):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        if self.connected:
            return (f"ConnectionStatus(connected, group={self.group!r}, server={self.server_number!r}, "
                    f"country={self.country!r}, city={self.city!r})")
        return f"ConnectionStatus({self.status_text!r})"
