"""Login cookie validity checks.

LoginCookieValidity is compared against the session garbage collection
lifetime, the recommended maximum and LoginCookieStore.
"""

from ..config import ConfigAccessor, as_number
from ..descriptions import get_description
from ..markup import features_tab, kbd, link, runtime_doc, text
from ..models import Severity
from ..sink import MessageSink

# 30 minutes
RECOMMENDED_MAX_VALIDITY = 1800


def run_checks(config: ConfigAccessor, sink: MessageSink, session_gc_maxlifetime: int) -> None:
    validity = as_number(config.get("LoginCookieValidity"))
    store = as_number(config.get("LoginCookieStore"))
    title = get_description("LoginCookieValidity")
    security = features_tab("Security")

    # A session collected before the cookie expires logs the user out at random
    if validity > session_gc_maxlifetime:
        sink.emit(
            Severity.ERROR,
            "LoginCookieValidity",
            title,
            [
                link("Login cookie validity", security),
                text(" greater than "),
                link(
                    "session.gc_maxlifetime",
                    runtime_doc("session.configuration#ini.session.gc-maxlifetime"),
                ),
                text(
                    " may cause random session invalidation (currently "
                    f"session.gc_maxlifetime is {session_gc_maxlifetime})."
                ),
            ],
        )

    if validity > RECOMMENDED_MAX_VALIDITY:
        sink.emit(
            Severity.NOTICE,
            "LoginCookieValidity",
            title,
            [
                link("Login cookie validity", security),
                text(
                    f" should be set to {RECOMMENDED_MAX_VALIDITY} seconds (30 minutes) "
                    f"at most. Values larger than {RECOMMENDED_MAX_VALIDITY} may pose a "
                    "security risk such as impersonation."
                ),
            ],
        )

    if store != 0 and validity > store:
        sink.emit(
            Severity.ERROR,
            "LoginCookieValidity",
            title,
            [
                text("If using "),
                kbd("cookie"),
                text(" authentication and "),
                link("Login cookie store", security),
                text(" is not 0, "),
                link("Login cookie validity", security),
                text(" must be set to a value less or equal to it."),
            ],
        )
