"""Discovery of running Firefox processes."""

import logging
from pathlib import PurePath, PureWindowsPath
from typing import Optional, Sequence

import psutil

from linkrouter.models import FirefoxInfo

logger = logging.getLogger(__name__)

FIREFOX_EXECUTABLES = {"firefox.exe", "firefox", "firefox-bin"}
PROFILE_FLAGS = ("-P", "-profile")


def is_firefox_process(cmdline: Sequence[str]) -> bool:
    """Check if a command line belongs to Firefox."""
    if not cmdline:
        return False
    # Windows paths must be split on backslashes even on other platforms
    name = PureWindowsPath(cmdline[0]).name if "\\" in cmdline[0] else PurePath(cmdline[0]).name
    return name.lower() in FIREFOX_EXECUTABLES


def get_firefox_info(cmdline: Sequence[str]) -> Optional[FirefoxInfo]:
    """Extract executable path and profile name from a command line."""
    if not cmdline:
        logger.debug("Attempted to get Firefox info for a process with no command line arguments")
        return None

    profile_name = None
    for i, arg in enumerate(cmdline):
        if arg in PROFILE_FLAGS:
            if i + 1 < len(cmdline):
                profile_name = cmdline[i + 1]
            break

    return FirefoxInfo(path=cmdline[0], profile_name=profile_name)


def find_running_firefox() -> list[FirefoxInfo]:
    """List running Firefox instances, profile-bearing ones first."""
    instances = []
    for process in psutil.process_iter(["cmdline"]):
        cmdline = process.info.get("cmdline") or []
        if not is_firefox_process(cmdline):
            continue
        info = get_firefox_info(cmdline)
        if info:
            instances.append(info)

    instances.sort(key=FirefoxInfo.sort_key)
    logger.debug(f"Found {len(instances)} Firefox processes")
    return instances
