"""
Locates the NordVPN command line client
"""
import shutil
from pathlib import Path
from typing import Optional


def find_nordvpn(binary: str) -> Optional[Path]:
    """
    Find the NordVPN executable

    Args:
        binary: Configured executable, either a bare name looked up on PATH or a path

    Returns:
        Path to the executable if found, None otherwise
    """
    candidate = Path(binary).expanduser()
    if candidate.parent != Path("."):
        # Explicit path, do not search PATH
        if candidate.is_file():
            return candidate
        return None

    found = shutil.which(binary)
    if found:
        return Path(found)
    return None
