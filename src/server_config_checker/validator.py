"""Security and consistency checks over a setup configuration.

Checks run in a fixed order:

1. arbitrary server login
2. per-server checks, ascending server index
3. cookie secret strength (needs the results of step 2)
4. login cookie validity
5. save/temp directories
6. compressed dump capabilities

Problems found become messages on the sink; nothing is raised for them.
"""

import logging
from typing import Callable, Optional

from .capabilities import CapabilityProbe, RuntimeCapabilities
from .checks import (
    check_arbitrary_server,
    check_directories,
    run_compression_checks,
    run_cookie_secret_checks,
    run_login_cookie_checks,
    run_server_checks,
)
from .checks.servers import SECRET_KEY
from .config import ConfigAccessor, Settings
from .secret import generate_secret
from .sink import MessageSink

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Runs every configuration check once per call.

    Args:
        session_gc_maxlifetime: Session garbage collection lifetime in seconds.
            Defaults to the SESSION_GC_MAXLIFETIME environment variable.
        secret_factory: Callable returning a random secret of the given length.
    """

    def __init__(
        self,
        session_gc_maxlifetime: Optional[int] = None,
        secret_factory: Callable[[int], str] = generate_secret,
    ):
        self.settings = Settings(session_gc_maxlifetime)
        self.secret_factory = secret_factory

    def run_checks(
        self,
        config: ConfigAccessor,
        capability_probe: Optional[CapabilityProbe],
        message_sink: MessageSink,
    ) -> None:
        """Evaluate all rules against `config`, emitting to `message_sink`.

        Raises:
            ValueError: If config or message_sink is missing or does not
                implement the expected interface.
        """
        if not isinstance(config, ConfigAccessor):
            raise ValueError(f"A ConfigAccessor is required, got {type(config).__name__}")
        if not isinstance(message_sink, MessageSink):
            raise ValueError(f"A MessageSink is required, got {type(message_sink).__name__}")
        if capability_probe is None:
            capability_probe = RuntimeCapabilities()

        secret = config.get(SECRET_KEY)

        check_arbitrary_server(config, message_sink)
        state = run_server_checks(config, message_sink, self.secret_factory)
        run_cookie_secret_checks(state, secret, message_sink)
        run_login_cookie_checks(config, message_sink, self.settings.session_gc_maxlifetime)
        check_directories(config, message_sink)
        run_compression_checks(config, capability_probe, message_sink)


def run_checks(
    config: ConfigAccessor,
    capability_probe: Optional[CapabilityProbe],
    message_sink: MessageSink,
    session_gc_maxlifetime: Optional[int] = None,
) -> None:
    """Run a single check pass with a default ConfigValidator."""
    ConfigValidator(session_gc_maxlifetime).run_checks(config, capability_probe, message_sink)
