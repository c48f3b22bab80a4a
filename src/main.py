#!/usr/bin/env python3
"""
Main entry point for the tray application.
"""

import sys
import logging
import signal
import argparse
from types import FrameType

import ui.gui_main as gui_main
from common.app_setup import initialize_app_environment

logger = logging.getLogger(__name__)

APP_NAME = "NordVPN Tray"


def parse_arguments() -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description=APP_NAME)
    parser.add_argument(
        "--binary",
        default=None,
        help="NordVPN client to run (default: nordvpn_binary from settings.yaml, else nordvpn)"
    )
    parser.add_argument(
        "--refresh-after-action",
        action="store_true",
        default=None,
        help="Query the status right after connecting or disconnecting instead of on the next poll"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Log at DEBUG level"
    )
    return parser.parse_args()


def install_signal_handlers(tray_app: gui_main.TrayApplication) -> None:
    """Quit gracefully on the first SIGINT/SIGTERM, exit immediately on the second"""
    received: list[int] = []

    def on_signal(signum: int, frame: FrameType | None) -> None:
        name = signal.Signals(signum).name
        received.append(signum)
        if len(received) > 1:
            logger.warning(f"Received {name} again, exiting immediately")
            sys.exit(1)

        logger.info(f"Received {name}, shutting down")
        try:
            tray_app.quit_application()
        except Exception as e:
            logger.error(f"Error during graceful shutdown: {e}")
            sys.exit(1)

    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, on_signal)


def main() -> None:
    """Main application entry point"""
    args = parse_arguments()

    app_env = initialize_app_environment(APP_NAME, debug=args.debug)
    if app_env is None:
        sys.exit(1)
    config_dir, _log_dir = app_env

    gui = gui_main.init_gui(config_dir, args.binary, args.refresh_after_action)
    if gui is None:
        sys.exit(1)
    tray_app, app = gui

    install_signal_handlers(tray_app)

    try:
        gui_main.start_gui(tray_app, app)
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


if __name__ == "__main__":
    main()
