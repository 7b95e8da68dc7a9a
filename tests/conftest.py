"""Shared fixtures."""

import sys

import pytest


class FakeKey:
    def __init__(self, root, path):
        self.root = root
        self.path = path

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeWinreg:
    """In-memory stand-in for the winreg module."""

    HKEY_CURRENT_USER = "HKCU"
    HKEY_LOCAL_MACHINE = "HKLM"
    KEY_ALL_ACCESS = 0xF003F
    REG_SZ = 1

    def __init__(self):
        self.keys = {}

    def values(self, root, path):
        return self.keys[(root, path)]

    def CreateKey(self, root, subkey):
        parts = subkey.split("\\")
        for i in range(1, len(parts) + 1):
            self.keys.setdefault((root, "\\".join(parts[:i])), {})
        return FakeKey(root, subkey)

    def OpenKey(self, root, subkey, reserved=0, access=0):
        if (root, subkey) not in self.keys:
            raise FileNotFoundError(subkey)
        return FakeKey(root, subkey)

    def SetValueEx(self, key, name, reserved, value_type, value):
        self.keys[(key.root, key.path)][name] = value

    def QueryValueEx(self, key, name):
        values = self.keys[(key.root, key.path)]
        if name not in values:
            raise FileNotFoundError(name)
        return values[name], self.REG_SZ

    def EnumKey(self, key, index):
        prefix = key.path + "\\"
        children = sorted({
            path[len(prefix):].split("\\")[0]
            for root, path in self.keys
            if root == key.root and path.startswith(prefix)
        })
        if index >= len(children):
            raise OSError("No more data is available")
        return children[index]

    def DeleteKey(self, root, subkey):
        prefix = subkey + "\\"
        if any(r == root and p.startswith(prefix) for r, p in self.keys):
            raise PermissionError(f"{subkey} has subkeys")
        if (root, subkey) not in self.keys:
            raise FileNotFoundError(subkey)
        del self.keys[(root, subkey)]

    def DeleteValue(self, key, name):
        values = self.keys[(key.root, key.path)]
        if name not in values:
            raise FileNotFoundError(name)
        del values[name]


@pytest.fixture
def fake_winreg(monkeypatch):
    """Pretend to run on Windows with an empty registry."""
    fake = FakeWinreg()
    monkeypatch.setitem(sys.modules, "winreg", fake)
    monkeypatch.setattr(sys, "platform", "win32")
    return fake
