"""Pydantic models for the server configuration checker."""

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity of a configuration message."""

    NOTICE = "notice"
    ERROR = "error"


class Span(BaseModel):
    """A tagged piece of a message body.

    Bodies are kept as spans so the presentation layer decides how links,
    keyboard literals and emphasis are rendered.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["text", "link", "kbd", "em", "br"] = Field(description="Span type")
    text: str = Field(default="", description="Visible text of the span")
    target: Optional[str] = Field(default=None, description="Link target key (link spans only)")


class Message(BaseModel):
    """A single advisory or error produced by a configuration check."""

    model_config = ConfigDict(frozen=True)

    severity: Severity = Field(description="notice or error")
    key: str = Field(description="Message key in the configuration namespace (e.g., 'Servers/1/ssl')")
    title: str = Field(description="Title resolved from the setting description")
    body: list[Span] = Field(default_factory=list, description="Message body as tagged spans")

    @property
    def text(self) -> str:
        """Plain-text rendering of the body."""
        from .markup import render_plain

        return render_plain(self.body)


class CheckInput(BaseModel):
    """Input parameters for a configuration check pass."""

    config: dict[str, Any] = Field(default_factory=dict, description="Configuration, flat path keys or nested")
    capabilities: Optional[list[str]] = Field(
        default=None,
        description="Available capability names; probes the runtime when omitted",
    )
    session_gc_maxlifetime: Optional[int] = Field(
        default=None,
        description="Session garbage collection max lifetime in seconds",
    )


class CheckSummary(BaseModel):
    """Summary counts by severity."""

    notice: int = Field(default=0, description="Number of notices")
    error: int = Field(default=0, description="Number of errors")


class CheckReport(BaseModel):
    """Result of a configuration check pass."""

    messages: list[Message] = Field(default_factory=list, description="Messages in emission order")
    summary: CheckSummary = Field(default_factory=CheckSummary, description="Counts by severity")
    generated_secret: bool = Field(default=False, description="Whether a cookie secret was generated")
    config_updates: dict[str, str] = Field(
        default_factory=dict,
        description="Configuration keys written during the pass (values redacted)",
    )
