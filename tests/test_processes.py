"""Tests for Firefox process discovery."""

from unittest.mock import MagicMock, patch

from linkrouter.models import FirefoxInfo
from linkrouter.utils.processes import (
    find_running_firefox,
    get_firefox_info,
    is_firefox_process,
)


def fake_process(cmdline):
    process = MagicMock()
    process.info = {"cmdline": cmdline}
    return process


class TestIsFirefoxProcess:
    def test_windows_path(self):
        assert is_firefox_process([r"C:\Program Files\Mozilla Firefox\firefox.exe"])

    def test_windows_path_case_insensitive(self):
        assert is_firefox_process([r"C:\Program Files\Mozilla Firefox\FIREFOX.EXE", "-P", "x"])

    def test_unix_path(self):
        assert is_firefox_process(["/usr/lib/firefox/firefox", "-contentproc"])

    def test_other_process(self):
        assert not is_firefox_process([r"C:\Program Files\Google\Chrome\chrome.exe"])

    def test_empty_cmdline(self):
        assert not is_firefox_process([])


class TestGetFirefoxInfo:
    def test_profile_flag(self):
        info = get_firefox_info(["firefox.exe", "-P", "work", "-url", "x"])
        assert info == FirefoxInfo(path="firefox.exe", profile_name="work")

    def test_long_profile_flag(self):
        info = get_firefox_info(["firefox.exe", "-profile", "personal"])
        assert info.profile_name == "personal"

    def test_no_profile(self):
        info = get_firefox_info(["firefox.exe", "-url", "https://example.com"])
        assert info.path == "firefox.exe"
        assert info.profile_name is None

    def test_flag_without_value(self):
        assert get_firefox_info(["firefox.exe", "-P"]).profile_name is None

    def test_empty_cmdline(self):
        assert get_firefox_info([]) is None


class TestFindRunningFirefox:
    def test_sorts_profiles_first(self):
        processes = [
            fake_process(["/opt/firefox/firefox"]),
            fake_process(["/opt/firefox/firefox", "-P", "work"]),
            fake_process(["/usr/bin/python3", "app.py"]),
            fake_process(["/opt/firefox/firefox", "-P", "personal"]),
        ]
        with patch("linkrouter.utils.processes.psutil.process_iter", return_value=processes):
            instances = find_running_firefox()

        assert [i.profile_name for i in instances] == ["personal", "work", None]

    def test_ties_broken_by_path(self):
        processes = [
            fake_process(["/b/firefox"]),
            fake_process(["/a/firefox"]),
        ]
        with patch("linkrouter.utils.processes.psutil.process_iter", return_value=processes):
            instances = find_running_firefox()

        assert [i.path for i in instances] == ["/a/firefox", "/b/firefox"]

    def test_skips_inaccessible_processes(self):
        processes = [fake_process(None), fake_process(["/usr/bin/firefox"])]
        with patch("linkrouter.utils.processes.psutil.process_iter", return_value=processes):
            instances = find_running_firefox()

        assert len(instances) == 1

    def test_no_processes(self):
        with patch("linkrouter.utils.processes.psutil.process_iter", return_value=[]):
            assert find_running_firefox() == []
