"""Compressed dump checks.

Each enabled dump format needs its compression functions to be available.
"""

from ..capabilities import CapabilityProbe, missing_capabilities
from ..config import ConfigAccessor, as_bool
from ..descriptions import get_description
from ..markup import features_tab, link, text
from ..models import Severity, Span
from ..sink import MessageSink


def _unavailable(label: str, functions: list[str]) -> list[Span]:
    return [
        link(label, features_tab("Import_export")),
        text(f" requires functions ({', '.join(functions)}) which are unavailable on this system."),
    ]


def check_zip(config: ConfigAccessor, probe: CapabilityProbe, sink: MessageSink) -> None:
    if not as_bool(config.get("ZipDump")):
        return
    title = get_description("ZipDump")

    # Import needs zip_open, export needs gzcompress
    if missing_capabilities(probe, ["zip_open"]):
        sink.emit(Severity.ERROR, "ZipDump_import", title, _unavailable("Zip decompression", ["zip_open"]))
    if missing_capabilities(probe, ["gzcompress"]):
        sink.emit(Severity.ERROR, "ZipDump_export", title, _unavailable("Zip compression", ["gzcompress"]))


def check_bzip2(config: ConfigAccessor, probe: CapabilityProbe, sink: MessageSink) -> None:
    if not as_bool(config.get("BZipDump")):
        return
    missing = missing_capabilities(probe, ["bzopen", "bzcompress"])
    if missing:
        sink.emit(
            Severity.ERROR,
            "BZipDump",
            get_description("BZipDump"),
            _unavailable("Bzip2 compression and decompression", missing),
        )


def check_gzip(config: ConfigAccessor, probe: CapabilityProbe, sink: MessageSink) -> None:
    if not as_bool(config.get("GZipDump")):
        return
    missing = missing_capabilities(probe, ["gzopen", "gzencode"])
    if missing:
        sink.emit(
            Severity.ERROR,
            "GZipDump",
            get_description("GZipDump"),
            _unavailable("GZip compression and decompression", missing),
        )


def run_checks(config: ConfigAccessor, probe: CapabilityProbe, sink: MessageSink) -> None:
    check_zip(config, probe, sink)
    check_bzip2(config, probe, sink)
    check_gzip(config, probe, sink)
