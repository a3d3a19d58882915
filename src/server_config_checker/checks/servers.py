"""Per-server checks: transport encryption, stored credentials, root login.

Servers are visited in ascending index order. The pass also records which
servers use cookie authentication and generates the shared cookie secret the
first time a cookie-auth server is found without one.
"""

import html
import logging
from dataclasses import dataclass, field
from typing import Callable

from ..config import ConfigAccessor, as_bool
from ..descriptions import get_description
from ..markup import features_tab, kbd, link, server_tab, text
from ..models import Severity, Span
from ..sink import MessageSink

logger = logging.getLogger(__name__)

SECRET_KEY = "blowfish_secret"


@dataclass
class ServerPassState:
    """What the server loop learned for the checks that run after it."""

    cookie_auth_used: bool = False
    secret_generated: bool = False
    cookie_auth_servers: list[int] = field(default_factory=list)


def display_name(name: str, index: int) -> str:
    """Disambiguate 'localhost' entries by index and escape for display."""
    if name == "localhost":
        name = f"{name} [{index}]"
    return html.escape(name)


def _security_info(index: int) -> list[Span]:
    return [
        text("If you feel this is necessary, use additional protection settings - "),
        link("host authentication", server_tab(index, "Server_config")),
        text(" settings and "),
        link("trusted proxies list", features_tab("Security")),
        text(
            ". However, IP-based protection may not be reliable if your IP belongs "
            "to an ISP where thousands of users, including you, are connected to."
        ),
    ]


def _maybe_generate_secret(
    config: ConfigAccessor,
    state: ServerPassState,
    cookie_auth: bool,
    secret_factory: Callable[[int], str],
) -> None:
    if not cookie_auth or state.secret_generated:
        return
    if config.get(SECRET_KEY) is not None:
        return
    config.set(SECRET_KEY, secret_factory(32))
    state.secret_generated = True
    logger.info("Cookie authentication enabled without a secret, generated one")


def _check_ssl(config: ConfigAccessor, sink: MessageSink, index: int, name: str) -> None:
    if as_bool(config.get(f"Servers/{index}/ssl")):
        return
    sink.emit(
        Severity.NOTICE,
        f"Servers/{index}/ssl",
        f"{get_description('Servers/1/ssl')} ({name})",
        [text("You should use SSL connections if your database server supports it.")],
    )


def _check_stored_credentials(
    config: ConfigAccessor, sink: MessageSink, index: int, name: str
) -> None:
    prefix = f"Servers/{index}"
    if config.get(f"{prefix}/auth_type") != "config":
        return
    user = config.get(f"{prefix}/user")
    password = config.get(f"{prefix}/password")
    if user is None or str(user) == "" or password is None or str(password) == "":
        return

    body = [
        text("You set the "),
        kbd("config"),
        text(
            " authentication type and included username and password for "
            "auto-login, which is not a desirable option for live hosts. Anyone "
            "who knows or guesses your phpMyAdmin URL can directly access your "
            "phpMyAdmin panel. Set "
        ),
        link("authentication type", server_tab(index, "Server")),
        text(" to "),
        kbd("cookie"),
        text(" or "),
        kbd("http"),
        text(". "),
    ]
    sink.emit(
        Severity.NOTICE,
        f"{prefix}/auth_type",
        f"{get_description('Servers/1/auth_type')} ({name})",
        body + _security_info(index),
    )


def _check_root_without_password(
    config: ConfigAccessor, sink: MessageSink, index: int, name: str
) -> None:
    prefix = f"Servers/{index}"
    allow_root = as_bool(config.get(f"{prefix}/AllowRoot"))
    allow_no_password = as_bool(config.get(f"{prefix}/AllowNoPassword"))
    if not (allow_root and allow_no_password):
        return
    sink.emit(
        Severity.NOTICE,
        f"{prefix}/AllowNoPassword",
        f"{get_description('Servers/1/AllowNoPassword')} ({name})",
        [text("You allow for connecting to the server without a password. ")]
        + _security_info(index),
    )


def run_checks(
    config: ConfigAccessor,
    sink: MessageSink,
    secret_factory: Callable[[int], str],
) -> ServerPassState:
    """Run the per-server checks over servers 1..N."""
    state = ServerPassState()
    server_count = config.server_count()

    for index in range(1, server_count + 1):
        cookie_auth = config.get(f"Servers/{index}/auth_type") == "cookie"
        if cookie_auth:
            state.cookie_auth_used = True
            state.cookie_auth_servers.append(index)
        name = display_name(config.server_name(index), index)

        _maybe_generate_secret(config, state, cookie_auth, secret_factory)
        _check_ssl(config, sink, index, name)
        _check_stored_credentials(config, sink, index, name)
        _check_root_without_password(config, sink, index, name)

    logger.info(f"Checked {server_count} server(s), cookie auth on {state.cookie_auth_servers}")
    return state
