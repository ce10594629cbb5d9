"""Tests for candidate config locations."""

import logging

import pytest

from alacritty_themes.errors import ConfigLocationError
from alacritty_themes.locations import default_config_path, join_path, possible_locations


def test_linux_home_only(make_detector):
    detector = make_detector({"HOME": "/home/u"})
    assert possible_locations(detector) == [
        "/home/u/.config/alacritty/alacritty.toml",
        "/home/u/.alacritty.toml",
    ]


def test_native_windows_includes_appdata(make_detector):
    detector = make_detector({"OS": "Windows_NT", "APPDATA": "C:\\Users\\u\\AppData"})
    assert "C:\\Users\\u\\AppData\\alacritty\\alacritty.toml" in possible_locations(detector)


def test_wsl_includes_appdata(make_detector):
    detector = make_detector({"WSLENV": "", "HOME": "/home/u", "APPDATA": "/mnt/c/Users/u/AppData/Roaming"})
    assert possible_locations(detector) == [
        "/home/u/.config/alacritty/alacritty.toml",
        "/home/u/.alacritty.toml",
        "/mnt/c/Users/u/AppData/Roaming/alacritty/alacritty.toml",
    ]


def test_appdata_ignored_off_windows(make_detector):
    detector = make_detector({"APPDATA": "C:\\Users\\u\\AppData"})
    assert possible_locations(detector) == []


def test_xdg_after_home(make_detector):
    detector = make_detector({"HOME": "/home/u", "XDG_CONFIG_HOME": "/etc/xdg"})
    assert possible_locations(detector) == [
        "/home/u/.config/alacritty/alacritty.toml",
        "/home/u/.alacritty.toml",
        "/etc/xdg/alacritty/alacritty.toml",
        "/etc/xdg/alacritty.toml",
    ]


def test_full_priority_order(make_detector):
    detector = make_detector({
        "OS": "Windows_NT",
        "HOME": "C:\\Users\\u",
        "APPDATA": "C:\\Users\\u\\AppData\\Roaming",
        "XDG_CONFIG_HOME": "C:\\Users\\u\\.config",
    })
    assert possible_locations(detector) == [
        "C:\\Users\\u\\.config\\alacritty\\alacritty.toml",
        "C:\\Users\\u\\.alacritty.toml",
        "C:\\Users\\u\\AppData\\Roaming\\alacritty\\alacritty.toml",
        "C:\\Users\\u\\.config\\alacritty\\alacritty.toml",
        "C:\\Users\\u\\.config\\alacritty.toml",
    ]


def test_windows_without_appdata_skips_candidate(make_detector, caplog):
    detector = make_detector({"OS": "Windows_NT", "HOME": "/home/u"})

    with caplog.at_level(logging.WARNING, logger="alacritty_themes.locations"):
        locations = possible_locations(detector)

    assert locations == [
        "/home/u/.config/alacritty/alacritty.toml",
        "/home/u/.alacritty.toml",
    ]
    assert "APPDATA is not set" in caplog.text


def test_no_variables_no_candidates(make_detector):
    assert possible_locations(make_detector({})) == []


def test_deterministic(make_detector):
    detector = make_detector({"HOME": "/home/u", "WSLENV": "", "APPDATA": "/mnt/c/AppData", "XDG_CONFIG_HOME": "/x"})
    assert possible_locations(detector) == possible_locations(detector)


def test_join_path_follows_base_style():
    assert join_path("/home/u", "a", "b") == "/home/u/a/b"
    assert join_path("C:\\Users", "a") == "C:\\Users\\a"
    assert join_path("D:", "a") == "D:a"
    assert join_path("\\\\server\\share", "a") == "\\\\server\\share\\a"


def test_default_config_path_prefers_appdata_on_windows(make_detector):
    detector = make_detector({"OS": "Windows_NT", "APPDATA": "C:\\AppData", "HOME": "/home/u"})
    assert default_config_path(detector) == "C:\\AppData\\alacritty\\alacritty.toml"


def test_default_config_path_prefers_xdg_over_home(make_detector):
    detector = make_detector({"HOME": "/home/u", "XDG_CONFIG_HOME": "/cfg"})
    assert default_config_path(detector) == "/cfg/alacritty/alacritty.toml"


def test_default_config_path_home(make_detector):
    detector = make_detector({"HOME": "/home/u"})
    assert default_config_path(detector) == "/home/u/.config/alacritty/alacritty.toml"


def test_default_config_path_without_roots(make_detector):
    with pytest.raises(ConfigLocationError):
        default_config_path(make_detector({}))

    with pytest.raises(ConfigLocationError):
        default_config_path(make_detector({"OS": "Windows_NT", "HOME": "/home/u"}))
