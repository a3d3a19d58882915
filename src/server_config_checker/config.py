"""Configuration access for the server configuration checker.

Keys are path-like strings. Global settings use their bare name
(e.g., 'LoginCookieValidity'); server settings use 'Servers/<index>/<field>'
with servers numbered from 1.
"""

import logging
import os
import re
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Default value of session.gc_maxlifetime in seconds
DEFAULT_SESSION_GC_MAXLIFETIME = 1440

GLOBAL_DEFAULTS: dict[str, Any] = {
    "AllowArbitraryServer": False,
    "blowfish_secret": None,
    "LoginCookieValidity": 1440,
    "LoginCookieStore": 0,
    "SaveDir": "",
    "TempDir": "",
    "ZipDump": True,
    "GZipDump": True,
    "BZipDump": True,
}

SERVER_DEFAULTS: dict[str, Any] = {
    "host": "localhost",
    "verbose": "",
    "auth_type": "cookie",
    "user": "root",
    "password": "",
    "ssl": False,
    "AllowRoot": True,
    "AllowNoPassword": False,
}

_SERVER_KEY_RE = re.compile(r"^Servers/(\d+)/(.+)$")


class ConfigAccessor(ABC):
    """Read/write access to a configuration snapshot."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value for a path-like key, or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value for a path-like key."""
        pass

    @abstractmethod
    def server_count(self) -> int:
        """Return the number of configured servers."""
        pass

    @abstractmethod
    def server_name(self, index: int) -> str:
        """Return the display name of server `index` (1-based)."""
        pass


class ConfigFile(ConfigAccessor):
    """Dict-backed configuration with setup defaults.

    Values that were never set fall back to GLOBAL_DEFAULTS, or to
    SERVER_DEFAULTS for keys of a configured server.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: dict[str, Any] = renumber_servers(values or {})
        self._changes: dict[str, Any] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConfigFile":
        """Build a ConfigFile from flat path keys or a nested structure.

        Nested form: {"Servers": {"1": {"host": ...}}} or
        {"Servers": [{"host": ...}, ...]}. Servers are renumbered contiguously
        from 1 and empty entries get the server defaults.
        """
        return cls(flatten(data))

    def get(self, key: str) -> Any:
        if key in self._values:
            return self._values[key]
        match = _SERVER_KEY_RE.match(key)
        if match:
            index, field = int(match.group(1)), match.group(2)
            if index in self._server_indexes():
                return SERVER_DEFAULTS.get(field)
            return None
        return GLOBAL_DEFAULTS.get(key)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._changes[key] = value

    def server_count(self) -> int:
        return len(self._server_indexes())

    def server_name(self, index: int) -> str:
        if index not in self._server_indexes():
            return ""
        verbose = self._values.get(f"Servers/{index}/verbose")
        if verbose:
            return str(verbose)
        host = self.get(f"Servers/{index}/host")
        return str(host) if host else ""

    def changes(self) -> dict[str, Any]:
        """Keys written with set() since construction."""
        return dict(self._changes)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def _server_indexes(self) -> "set[int]":
        indexes = set()
        for key in self._values:
            match = _SERVER_KEY_RE.match(key)
            if match:
                indexes.add(int(match.group(1)))
        return indexes


def flatten(data: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a nested configuration into path-like keys."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if key == "Servers" and isinstance(value, list):
            for i, server in enumerate(value, 1):
                flat.update(_flatten_server(i, server))
        elif key == "Servers" and isinstance(value, Mapping):
            for index, server in value.items():
                flat.update(_flatten_server(int(index), server))
        elif isinstance(value, Mapping):
            for sub_key, sub_value in flatten(value).items():
                flat[f"{key}/{sub_key}"] = sub_value
        else:
            flat[key] = value
    return flat


def _flatten_server(index: int, server: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    if not server:
        # An empty entry is still a server, running on the defaults
        return {f"Servers/{index}/host": SERVER_DEFAULTS["host"]}
    return {f"Servers/{index}/{field}": value for field, value in server.items()}


def renumber_servers(values: Mapping[str, Any]) -> dict[str, Any]:
    """Renumber server keys contiguously from 1, keeping their order."""
    indexes = sorted({
        int(match.group(1))
        for match in (_SERVER_KEY_RE.match(key) for key in values)
        if match
    })
    mapping = {old: new for new, old in enumerate(indexes, 1)}
    renumbered: dict[str, Any] = {}
    for key, value in values.items():
        match = _SERVER_KEY_RE.match(key)
        if match:
            key = f"Servers/{mapping[int(match.group(1))]}/{match.group(2)}"
        renumbered[key] = value
    return renumbered


def as_number(value: Any) -> float:
    """Coerce a numeric setting; unparsable values count as 0.

    Fractions are kept so that 1800.5 still compares above 1800.
    """
    if value is None or isinstance(value, bool):
        return int(bool(value))
    if isinstance(value, (int, float)):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.debug(f"Non-numeric setting value {value!r} treated as 0")
            return 0


def as_int(value: Any) -> int:
    """Coerce a numeric setting to int; unparsable values count as 0."""
    return int(as_number(value))


FALSE_STRINGS = frozenset({"", "0", "false", "no", "off", "none", "null"})


def as_bool(value: Any) -> bool:
    """Coerce a flag setting; strings such as 'false', '0' or 'off' are False."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def as_path(value: Any) -> str:
    """Coerce a directory setting; None and booleans mean no directory."""
    if value is None or isinstance(value, bool):
        return ""
    return str(value)


class Settings:
    """Runtime environment settings.

    session_gc_maxlifetime defaults to the SESSION_GC_MAXLIFETIME environment
    variable, or 1440 seconds.
    """

    def __init__(self, session_gc_maxlifetime: Optional[int] = None):
        if session_gc_maxlifetime is None:
            session_gc_maxlifetime = as_int(
                os.environ.get("SESSION_GC_MAXLIFETIME", DEFAULT_SESSION_GC_MAXLIFETIME)
            )
        self.session_gc_maxlifetime = session_gc_maxlifetime
