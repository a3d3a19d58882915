"""Cookie secret strength check.

Runs after the server loop, and only when some server uses cookie
authentication.
"""

import re
from typing import Optional

from ..descriptions import get_description
from ..markup import br, em, kbd, text
from ..models import Severity, Span
from ..sink import MessageSink
from .servers import SECRET_KEY, ServerPassState

MIN_SECRET_LENGTH = 32

_DIGIT_RE = re.compile(r"\d")
_NON_SPACE_RE = re.compile(r"\S")
_NON_WORD_RE = re.compile(r"\W")


def secret_warnings(secret: Optional[str]) -> list[list[Span]]:
    """Return the weaknesses found in a secret, one span list per warning."""
    secret = secret or ""
    warnings: list[list[Span]] = []

    if len(secret) < MIN_SECRET_LENGTH:
        warnings.append([
            text(f"Key is too short, it should have at least {MIN_SECRET_LENGTH} characters.")
        ])

    has_digits = bool(_DIGIT_RE.search(secret))
    has_chars = bool(_NON_SPACE_RE.search(secret))
    has_nonword = bool(_NON_WORD_RE.search(secret))
    if not has_digits or not has_chars or not has_nonword:
        warnings.append([
            text("Key should contain letters, numbers "),
            em("and"),
            text(" special characters."),
        ])

    return warnings


def run_checks(state: ServerPassState, secret: Optional[str], sink: MessageSink) -> None:
    """Report a generated secret, or weaknesses of the configured one."""
    if not state.cookie_auth_used:
        return

    title = get_description(SECRET_KEY)

    if state.secret_generated:
        sink.emit(
            Severity.NOTICE,
            "blowfish_secret_created",
            title,
            [
                text("You didn't have blowfish secret set and have enabled "),
                kbd("cookie"),
                text(
                    " authentication, so a key was automatically generated for you. "
                    "It is used to encrypt cookies; you don't need to remember it."
                ),
            ],
        )
        return

    warnings = secret_warnings(secret)
    if not warnings:
        return

    body: list[Span] = []
    for i, warning in enumerate(warnings):
        if i:
            body.append(br())
        body.extend(warning)
    sink.emit(Severity.ERROR, f"blowfish_warnings{len(warnings)}", title, body)
