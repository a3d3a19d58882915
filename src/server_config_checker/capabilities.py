"""Optional capability probing.

Compressed dump support depends on optional runtime features. Checks ask a
CapabilityProbe by name instead of inspecting the environment directly.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Iterable

logger = logging.getLogger(__name__)

# Capability name -> (module, attribute) providing it in the Python runtime
RUNTIME_CAPABILITIES: dict[str, tuple[str, str]] = {
    "zip_open": ("zipfile", "ZipFile"),
    "gzcompress": ("zlib", "compress"),
    "gzopen": ("gzip", "open"),
    "gzencode": ("gzip", "compress"),
    "bzopen": ("bz2", "open"),
    "bzcompress": ("bz2", "compress"),
}


class CapabilityProbe(ABC):
    """Answers whether a named optional capability is available."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        pass


class StaticCapabilities(CapabilityProbe):
    """Probe backed by a fixed set of capability names."""

    def __init__(self, names: Iterable[str] = ()):
        self.names = frozenset(names)

    def exists(self, name: str) -> bool:
        return name in self.names


class RuntimeCapabilities(CapabilityProbe):
    """Probe that looks capabilities up in the running interpreter.

    Results are not cached; every call imports and inspects the module again.
    """

    def __init__(self, mapping: dict[str, tuple[str, str]] | None = None):
        self.mapping = RUNTIME_CAPABILITIES if mapping is None else mapping

    def exists(self, name: str) -> bool:
        target = self.mapping.get(name)
        if target is None:
            return False
        module_name, attribute = target
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            return False
        return callable(getattr(module, attribute, None))


def capability_exists(probe: CapabilityProbe, name: str) -> bool:
    """Ask a probe about a capability; a failing probe reports it absent."""
    try:
        return bool(probe.exists(name))
    except Exception as e:
        logger.debug(f"Capability probe for {name} failed, treating as absent: {e}")
        return False


def missing_capabilities(probe: CapabilityProbe, names: Iterable[str]) -> list[str]:
    """Return the names the probe reports as absent, in the given order."""
    return [name for name in names if not capability_exists(probe, name)]
