"""Security and consistency checks for setup configuration."""

from .capabilities import CapabilityProbe, RuntimeCapabilities, StaticCapabilities
from .config import ConfigAccessor, ConfigFile
from .models import Message, Severity, Span
from .sink import MessageList, MessageSink
from .validator import ConfigValidator, run_checks

__all__ = [
    "CapabilityProbe",
    "RuntimeCapabilities",
    "StaticCapabilities",
    "ConfigAccessor",
    "ConfigFile",
    "Message",
    "Severity",
    "Span",
    "MessageList",
    "MessageSink",
    "ConfigValidator",
    "run_checks",
]
