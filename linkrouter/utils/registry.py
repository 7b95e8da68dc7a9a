"""Registration of linkrouter as a Windows browser."""

import logging
import sys

logger = logging.getLogger(__name__)

APP_NAME = "LinkRouter"
URL_PROG_ID = "LinkRouterURL"
HTML_PROG_ID = "LinkRouterHTML"

CLASSES_KEY = r"SOFTWARE\Classes"
CLIENT_KEY = rf"SOFTWARE\Clients\StartMenuInternet\{APP_NAME}"
CAPABILITIES_KEY = rf"{CLIENT_KEY}\Capabilities"
REGISTERED_APPS_KEY = r"SOFTWARE\RegisteredApplications"


class RegistrationError(RuntimeError):
    """Raised when browser registration is not possible."""


def _winreg():
    if sys.platform != "win32":
        raise RegistrationError("Browser registration is only supported on Windows")
    import winreg

    return winreg


def registry_entries(command: str, icon: str) -> list[tuple[str, str, str]]:
    """Return the (key, value name, data) triples written under HKEY_CURRENT_USER.

    ``command`` is the quoted command line that opens URLs, ``%1`` is
    appended for protocol and file handlers.
    """
    open_command = f'{command} "%1"'
    url_class = rf"{CLASSES_KEY}\{URL_PROG_ID}"
    html_class = rf"{CLASSES_KEY}\{HTML_PROG_ID}"

    return [
        # ProgID for URL handling
        (url_class, "", "LinkRouter URL"),
        (url_class, "URL Protocol", ""),
        (rf"{url_class}\DefaultIcon", "", f"{icon},0"),
        (rf"{url_class}\shell\open\command", "", open_command),
        # ProgID for HTML file handling
        (html_class, "", "LinkRouter HTML Document"),
        (rf"{html_class}\DefaultIcon", "", f"{icon},0"),
        (rf"{html_class}\shell\open\command", "", open_command),
        # StartMenuInternet client
        (CLIENT_KEY, "", "Link Router"),
        (CAPABILITIES_KEY, "ApplicationName", "Link Router"),
        (
            CAPABILITIES_KEY,
            "ApplicationDescription",
            "Routes URLs to Firefox using the active profile",
        ),
        (rf"{CAPABILITIES_KEY}\FileAssociations", ".htm", HTML_PROG_ID),
        (rf"{CAPABILITIES_KEY}\FileAssociations", ".html", HTML_PROG_ID),
        (rf"{CAPABILITIES_KEY}\StartMenu", "StartMenuInternet", APP_NAME),
        (rf"{CAPABILITIES_KEY}\URLAssociations", "http", URL_PROG_ID),
        (rf"{CAPABILITIES_KEY}\URLAssociations", "https", URL_PROG_ID),
        (rf"{CLIENT_KEY}\DefaultIcon", "", f"{icon},0"),
        (rf"{CLIENT_KEY}\shell\open\command", "", command),
        (REGISTERED_APPS_KEY, APP_NAME, CAPABILITIES_KEY),
    ]


def register(command: str, icon: str) -> None:
    """Register linkrouter as a browser for the current user."""
    winreg = _winreg()
    unregister()

    for subkey, name, data in registry_entries(command, icon):
        with winreg.CreateKey(winreg.HKEY_CURRENT_USER, subkey) as key:
            winreg.SetValueEx(key, name, 0, winreg.REG_SZ, data)

    logger.info(f"Registered {APP_NAME} with command: {command}")


def _delete_tree(winreg, root, subkey: str) -> None:
    """Delete a key with all its subkeys, ignoring missing keys."""
    try:
        with winreg.OpenKey(root, subkey, 0, winreg.KEY_ALL_ACCESS) as key:
            children = []
            index = 0
            while True:
                try:
                    children.append(winreg.EnumKey(key, index))
                except OSError:
                    break
                index += 1
        for child in children:
            _delete_tree(winreg, root, rf"{subkey}\{child}")
        winreg.DeleteKey(root, subkey)
    except FileNotFoundError:
        pass


def unregister() -> None:
    """Remove every registry entry written by register()."""
    winreg = _winreg()
    root = winreg.HKEY_CURRENT_USER

    _delete_tree(winreg, root, rf"{CLASSES_KEY}\{URL_PROG_ID}")
    _delete_tree(winreg, root, rf"{CLASSES_KEY}\{HTML_PROG_ID}")
    _delete_tree(winreg, root, CLIENT_KEY)

    try:
        with winreg.OpenKey(root, REGISTERED_APPS_KEY, 0, winreg.KEY_ALL_ACCESS) as key:
            winreg.DeleteValue(key, APP_NAME)
    except FileNotFoundError:
        pass

    logger.info(f"Unregistered {APP_NAME}")
