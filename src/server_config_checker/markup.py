"""Span constructors and link targets for message bodies."""

from .models import Span


def text(value: str) -> Span:
    return Span(kind="text", text=value)


def link(label: str, target: str) -> Span:
    return Span(kind="link", text=label, target=target)


def kbd(value: str) -> Span:
    return Span(kind="kbd", text=value)


def em(value: str) -> Span:
    return Span(kind="em", text=value)


def br() -> Span:
    return Span(kind="br")


def features_tab(tab: str) -> str:
    """Link target for a tab of the Features form (e.g., 'Security')."""
    return f"form:Features#{tab}"


def server_tab(index: int, tab: str) -> str:
    """Link target for a tab of the server edit form."""
    return f"servers:{index}#{tab}"


def runtime_doc(anchor: str) -> str:
    """Link target for the runtime documentation."""
    return f"doc:{anchor}"


def render_plain(spans: list[Span]) -> str:
    """Render spans as plain text.

    Links render as their label and line breaks as newlines.
    """
    parts = []
    for span in spans:
        if span.kind == "br":
            parts.append("\n")
        else:
            parts.append(span.text)
    return "".join(parts)
