"""Configuration check modules, one per group of related settings."""

from .general import check_arbitrary_server, check_directories
from .servers import run_checks as run_server_checks, ServerPassState
from .cookie_secret import run_checks as run_cookie_secret_checks
from .login_cookie import run_checks as run_login_cookie_checks
from .compression import run_checks as run_compression_checks

__all__ = [
    "check_arbitrary_server",
    "check_directories",
    "run_server_checks",
    "ServerPassState",
    "run_cookie_secret_checks",
    "run_login_cookie_checks",
    "run_compression_checks",
]
