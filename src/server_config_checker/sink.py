"""Message sinks receiving check results."""

from abc import ABC, abstractmethod

from .models import CheckSummary, Message, Severity, Span


class MessageSink(ABC):
    """Collector of advisory and error messages."""

    @abstractmethod
    def emit(self, severity: Severity, key: str, title: str, body: list[Span]) -> None:
        pass


class MessageList(MessageSink):
    """Sink that keeps every message in emission order."""

    def __init__(self):
        self.messages: list[Message] = []

    def emit(self, severity: Severity, key: str, title: str, body: list[Span]) -> None:
        self.messages.append(
            Message(severity=Severity(severity), key=key, title=title, body=list(body))
        )

    def by_severity(self, severity: Severity) -> list[Message]:
        return [m for m in self.messages if m.severity == severity]

    def keys(self, severity: Severity | None = None) -> list[str]:
        return [m.key for m in self.messages if severity is None or m.severity == severity]

    def summary(self) -> CheckSummary:
        return CheckSummary(
            notice=len(self.by_severity(Severity.NOTICE)),
            error=len(self.by_severity(Severity.ERROR)),
        )

    def __len__(self) -> int:
        return len(self.messages)
