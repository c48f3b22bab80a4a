"""
Tray controller: keeps the tray menu in sync with the NordVPN connection.

The controller polls the status on a self-adjusting timer. The delay doubles
after every poll up to a ceiling while nothing happens, and drops back to the
minimum whenever the user connects or disconnects.
"""

import logging
from enum import Enum
from functools import partial
from typing import List, Optional, Protocol

from config.constants import DEFAULT_POLL_MIN_DELAY, DEFAULT_POLL_MAX_DELAY
from config.server_groups import ServerGroup
from nordvpn.status import ConnectionStatus
from ui.tray_host import TrayHost, Scheduler, TimerHandle, ActionHandle

logger = logging.getLogger(__name__)

TITLE_PREFIX = "NordVPN"
CONNECT_LABEL = "Connect"
DISCONNECT_LABEL = "Disconnect"


class TrayMode(Enum):
    """What the actions section of the menu currently offers"""
    UNKNOWN = "unknown"
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class VpnClient(Protocol):
    """The part of nordvpn.status_client.StatusClient the controller uses"""

    def connect(self, group_name: Optional[str] = None) -> None:
        ...

    def disconnect(self) -> None:
        ...

    def list_available_groups(self) -> List[ServerGroup]:
        ...

    def query_status(self) -> ConnectionStatus:
        ...


class PollBackoff:
    """Delay between status polls, doubling up to a ceiling"""

    def __init__(self, minimum: int = DEFAULT_POLL_MIN_DELAY, maximum: int = DEFAULT_POLL_MAX_DELAY):
        if minimum < 1 or maximum < minimum:
            raise ValueError(f"Invalid poll delays: minimum={minimum}, maximum={maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self.delay = minimum

    def reset(self) -> None:
        self.delay = self.minimum

    def grow(self) -> None:
        self.delay = min(self.delay * 2, self.maximum)


class TrayController:
    """Renders the VPN status into the tray and routes menu clicks to the client"""

    def __init__(self, client: VpnClient, host: TrayHost, scheduler: Scheduler,
                 backoff: Optional[PollBackoff] = None, refresh_after_action: bool = False):
        self.client = client
        self.host = host
        self.scheduler = scheduler
        self.backoff = backoff or PollBackoff()
        self.refresh_after_action = refresh_after_action

        self.groups: List[ServerGroup] = []
        self.mode = TrayMode.UNKNOWN
        self.enabled = False

        self._timer: Optional[TimerHandle] = None
        # Each render branch owns its own handles
        self._connect_actions: Optional[List[ActionHandle]] = None
        self._disconnect_action: Optional[ActionHandle] = None

    def enable(self) -> None:
        """Fetch the groups once and start polling"""
        logger.info("Enabling tray controller")
        self.enabled = True
        self.groups = self.client.list_available_groups()
        self.backoff.reset()
        self.refresh()

    def disable(self) -> None:
        """Stop polling and release the tray. No callback fires afterwards."""
        if not self.enabled:
            return
        logger.info("Disabling tray controller")
        self.enabled = False
        self.stop_timer()
        self._remove_connect_actions()
        self._remove_disconnect_action()
        self.mode = TrayMode.UNKNOWN
        self.host.teardown()

    def refresh(self) -> None:
        """Query the status, re-render and schedule the next poll"""
        self.stop_timer()
        if not self.enabled:
            return
        self.render(self.client.query_status())
        self.start_timer()

    def connect(self, group_name: Optional[str] = None) -> None:
        """Menu handler: connect, optionally to a server group"""
        logger.info(f"Connect requested (group: {group_name or 'default'})")
        self.stop_timer()
        self.client.connect(group_name)
        self._after_action()

    def disconnect(self) -> None:
        """Menu handler: disconnect"""
        logger.info("Disconnect requested")
        self.stop_timer()
        self.client.disconnect()
        self._after_action()

    def _after_action(self) -> None:
        self.backoff.reset()
        if not self.enabled:
            return
        if self.refresh_after_action:
            self.refresh()
        else:
            # Status catches up on the next poll
            self.start_timer()

    def render(self, status: ConnectionStatus) -> None:
        """Update the tray from a status. Rendering the same status twice changes nothing."""
        self.host.set_indicator_visible(status.connected)
        self.host.set_title(f"{TITLE_PREFIX} {status.status_text}")

        if status.connected:
            self._render_connected()
        else:
            self._render_disconnected()

        self.host.set_group_text(status.group)
        self.host.set_details_text(status.full_detail_text)

    def _render_connected(self) -> None:
        if self._disconnect_action is None:
            self._disconnect_action = self.host.add_action(DISCONNECT_LABEL, self.disconnect)
        self._remove_connect_actions()
        if self.mode != TrayMode.CONNECTED:
            logger.debug("Tray switched to connected mode")
        self.mode = TrayMode.CONNECTED

    def _render_disconnected(self) -> None:
        if self._connect_actions is None:
            actions = [self.host.add_action(CONNECT_LABEL, self.connect)]
            for group in self.groups:
                actions.append(self.host.add_action(f"{CONNECT_LABEL} to {group.label}",
                                                    partial(self.connect, group.name)))
            self._connect_actions = actions
        self._remove_disconnect_action()
        if self.mode != TrayMode.DISCONNECTED:
            logger.debug("Tray switched to disconnected mode")
        self.mode = TrayMode.DISCONNECTED

    def _remove_connect_actions(self) -> None:
        if self._connect_actions is not None:
            for action in self._connect_actions:
                action.remove()
            self._connect_actions = None

    def _remove_disconnect_action(self) -> None:
        if self._disconnect_action is not None:
            self._disconnect_action.remove()
            self._disconnect_action = None

    def start_timer(self) -> None:
        """Arm the poll timer with the current delay, then grow the delay for the next one"""
        self.stop_timer()
        delay = self.backoff.delay
        self._timer = self.scheduler.schedule_once(delay, self.refresh)
        logger.debug(f"Next status poll in {delay}s")
        self.backoff.grow()

    def stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
