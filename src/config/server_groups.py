"""
Server groups the tray offers as connect targets.
"""

from typing import List, Optional


class ServerGroup:
    """A named category of NordVPN servers, e.g. P2P or Double VPN"""

    def __init__(self, name: str, label: str):
        self.name = name
        self.label = label

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServerGroup):
            return NotImplemented
        return self.name == other.name and self.label == other.label

    def __hash__(self) -> int:
        return hash((self.name, self.label))

    def __repr__(self) -> str:
        return f"ServerGroup({self.name!r}, {self.label!r})"


# Order here is the order of the connect actions in the menu
SERVER_GROUPS: List[ServerGroup] = [
    ServerGroup("P2P", "P2P"),
    ServerGroup("Double_VPN", "Double VPN"),
    ServerGroup("Dedicated_IP", "Dedicated IP"),
    ServerGroup("Onion_Over_VPN", "Onion"),
]


def find_group(name: Optional[str]) -> Optional[ServerGroup]:
    """Return the known group with the given CLI name, if any"""
    for group in SERVER_GROUPS:
        if group.name == name:
            return group
    return None
