"""Tests for configuration access, descriptions and markup."""

import pytest

from server_config_checker.config import ConfigFile, Settings, as_bool, as_int, as_number, as_path, flatten
from server_config_checker.descriptions import get_description
from server_config_checker.markup import br, em, kbd, link, render_plain, text
from server_config_checker.models import Message, Severity


class TestFlatten:
    def test_nested_servers_mapping(self):
        flat = flatten({
            "Servers": {"1": {"host": "db1"}, "2": {"host": "db2", "ssl": True}},
            "LoginCookieValidity": 1800,
        })
        assert flat == {
            "Servers/1/host": "db1",
            "Servers/2/host": "db2",
            "Servers/2/ssl": True,
            "LoginCookieValidity": 1800,
        }

    def test_servers_list_numbered_from_one(self):
        flat = flatten({"Servers": [{"host": "a"}, {"host": "b"}]})
        assert flat == {"Servers/1/host": "a", "Servers/2/host": "b"}

    def test_flat_keys_pass_through(self):
        flat = flatten({"Servers/3/auth_type": "cookie", "SaveDir": "/srv"})
        assert flat == {"Servers/3/auth_type": "cookie", "SaveDir": "/srv"}


class TestConfigFile:
    """Defaults, server discovery and change tracking."""

    def test_global_defaults(self):
        config = ConfigFile()
        assert config.get("LoginCookieValidity") == 1440
        assert config.get("LoginCookieStore") == 0
        assert config.get("AllowArbitraryServer") is False
        assert config.get("blowfish_secret") is None
        assert config.get("Unknown") is None

    def test_server_defaults_only_for_configured_servers(self):
        config = ConfigFile({"Servers/1/host": "db"})
        assert config.get("Servers/1/auth_type") == "cookie"
        assert config.get("Servers/1/AllowRoot") is True
        assert config.get("Servers/2/auth_type") is None

    def test_server_count_includes_empty_entry(self):
        config = ConfigFile.from_mapping({"Servers": [{"host": "a"}, {}, {"host": "c"}]})

        assert config.server_count() == 3
        assert config.server_name(2) == "localhost"
        assert config.get("Servers/2/auth_type") == "cookie"
        assert config.server_name(3) == "c"

    def test_server_gaps_are_renumbered(self):
        config = ConfigFile.from_mapping({"Servers": {"1": {"host": "a"}, "3": {"host": "c"}}})

        assert config.server_count() == 2
        assert config.server_name(2) == "c"
        assert config.get("Servers/3/host") is None

    def test_flat_server_gaps_are_renumbered(self):
        config = ConfigFile({"Servers/2/host": "b", "Servers/7/host": "g", "SaveDir": "/srv"})

        assert config.as_dict() == {"Servers/1/host": "b", "Servers/2/host": "g", "SaveDir": "/srv"}

    def test_server_name_prefers_verbose(self):
        config = ConfigFile({
            "Servers/1/host": "db.internal",
            "Servers/1/verbose": "Production",
            "Servers/2/host": "db2.internal",
            "Servers/3/auth_type": "cookie",
        })
        assert config.server_name(1) == "Production"
        assert config.server_name(2) == "db2.internal"
        assert config.server_name(3) == "localhost"
        assert config.server_name(4) == ""

    def test_changes_track_set(self):
        config = ConfigFile({"SaveDir": "/srv"})
        assert config.changes() == {}

        config.set("blowfish_secret", "x" * 32)

        assert config.changes() == {"blowfish_secret": "x" * 32}
        assert config.get("blowfish_secret") == "x" * 32


class TestAsNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1800, 1800), ("1800", 1800), ("1800.5", 1800.5), (12.5, 12.5), ("abc", 0), (None, 0)],
    )
    def test_as_number(self, value, expected):
        assert as_number(value) == expected


class TestAsBool:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, True),
            (False, False),
            (None, False),
            (1, True),
            (0, False),
            ("true", True),
            ("1", True),
            ("yes", True),
            ("false", False),
            ("FALSE", False),
            ("0", False),
            ("off", False),
            ("", False),
        ],
    )
    def test_as_bool(self, value, expected):
        assert as_bool(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("/srv/save", "/srv/save"), ("", ""), (None, ""), (False, ""), (True, "")],
    )
    def test_as_path(self, value, expected):
        assert as_path(value) == expected


class TestAsInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1800, 1800), ("1800", 1800), ("12.5", 12), ("abc", 0), (None, 0), (True, 1), ("", 0)],
    )
    def test_as_int(self, value, expected):
        assert as_int(value) == expected


class TestSettings:
    def test_explicit_value_wins(self, monkeypatch):
        monkeypatch.setenv("SESSION_GC_MAXLIFETIME", "99")
        assert Settings(3600).session_gc_maxlifetime == 3600

    def test_environment_value(self, monkeypatch):
        monkeypatch.setenv("SESSION_GC_MAXLIFETIME", "7200")
        assert Settings().session_gc_maxlifetime == 7200

    def test_default(self, monkeypatch):
        monkeypatch.delenv("SESSION_GC_MAXLIFETIME", raising=False)
        assert Settings().session_gc_maxlifetime == 1440


class TestDescriptions:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("Servers/1/ssl", "Use SSL"),
            ("Servers/12/ssl", "Use SSL"),
            ("Servers/3/AllowNoPassword", "Allow logins without a password"),
            ("LoginCookieValidity", "Login cookie validity"),
            ("NotASetting", "NotASetting"),
        ],
    )
    def test_get_description(self, key, expected):
        assert get_description(key) == expected


class TestMarkup:
    def test_render_plain(self):
        spans = [text("Use "), kbd("cookie"), text(" or "), link("docs", "doc:x"), br(), em("now")]
        assert render_plain(spans) == "Use cookie or docs\nnow"

    def test_message_text_and_immutability(self):
        message = Message(severity=Severity.NOTICE, key="SaveDir", title="Save directory", body=[text("hi")])
        assert message.text == "hi"
        with pytest.raises(Exception):
            message.key = "TempDir"
