"""Launching Firefox with a set of URLs."""

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional

from linkrouter.models import FirefoxInfo

logger = logging.getLogger(__name__)

FIREFOX_APP_PATH_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\App Paths\firefox.exe"


def find_firefox() -> Path:
    """Locate the Firefox executable when no running instance is known."""
    if sys.platform == "win32":
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, FIREFOX_APP_PATH_KEY) as key:
                path, _ = winreg.QueryValueEx(key, "")
            return Path(path)
        except OSError as e:
            logger.debug(f"Firefox not found in the registry: {e}")
        return Path("firefox.exe")

    found = shutil.which("firefox")
    # Last resort: hope it's on PATH when spawned
    return Path(found) if found else Path("firefox")


def build_command(urls: list[str], firefox_info: Optional[FirefoxInfo] = None) -> list[str]:
    """Build the Firefox command line for the given URLs."""
    if firefox_info:
        executable = firefox_info.path
    else:
        executable = str(find_firefox())

    command = [executable]
    if firefox_info and firefox_info.profile_name:
        command.extend(["-P", firefox_info.profile_name])
    for url in urls:
        command.extend(["-url", url])
    return command


def open_with_firefox(
    urls: list[str],
    firefox_info: Optional[FirefoxInfo] = None,
    dry_run: bool = False,
) -> list[str]:
    """Spawn Firefox with the URLs and return the command line used."""
    command = build_command(urls, firefox_info)
    profile = firefox_info.profile_name if firefox_info else None
    logger.debug(f"Using Firefox at: {command[0]}, profile: {profile or '<none>'}")

    if dry_run:
        logger.debug("Link opening disabled, not spawning process")
        return command

    subprocess.Popen(command)
    return command
