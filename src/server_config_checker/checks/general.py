"""Global setting checks: arbitrary server login and writable directories."""

from ..config import ConfigAccessor, as_bool, as_path
from ..descriptions import get_description
from ..markup import features_tab, link, text
from ..models import Severity
from ..sink import MessageSink

DIRECTORY_NOTICE = (
    "This value should be double checked to ensure that this directory is "
    "neither world accessible nor readable or writable by other users on "
    "your server."
)


def check_arbitrary_server(config: ConfigAccessor, sink: MessageSink) -> None:
    """AllowArbitraryServer lets attackers brute-force login to any host."""
    if not as_bool(config.get("AllowArbitraryServer")):
        return

    security = features_tab("Security")
    sink.emit(
        Severity.NOTICE,
        "AllowArbitraryServer",
        get_description("AllowArbitraryServer"),
        [
            text("This "),
            link("option", security),
            text(
                " should be disabled as it allows attackers to bruteforce login "
                "to any MySQL server. If you feel this is necessary, use "
            ),
            link("restrict login to MySQL server", security),
            text(" or "),
            link("trusted proxies list", security),
            text(
                ". However, IP-based protection with trusted proxies list may not "
                "be reliable if your IP belongs to an ISP where thousands of users, "
                "including you, are connected to."
            ),
        ],
    )


def check_directories(config: ConfigAccessor, sink: MessageSink) -> None:
    """SaveDir and TempDir should not be accessible to other users."""
    for key in ("SaveDir", "TempDir"):
        if as_path(config.get(key)) != "":
            sink.emit(
                Severity.NOTICE,
                key,
                get_description(key),
                [text(DIRECTORY_NOTICE)],
            )
