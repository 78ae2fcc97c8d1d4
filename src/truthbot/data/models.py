"""Core data models for TruthBot."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

AUTHENTIC_SOURCES: tuple[str, ...] = ("Reuters", "AP News", "BBC")
PENDING_SOURCES: tuple[str, ...] = ("Fact-check pending",)


class MessageRole(StrEnum):
    """Speaker of a conversation turn."""

    USER = "user"
    BOT = "bot"


class NotificationVariant(StrEnum):
    """Visual weight of a transient notification."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class ConfidenceBand(StrEnum):
    """Coarse bucket used when displaying a confidence percentage."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ClassificationRequest:
    """Raw user-submitted text or URL to classify."""

    text: str


@dataclass(frozen=True)
class BaseVerdict:
    """Keyword decision before the confidence jitter is applied."""

    is_authentic: bool
    base_confidence: int
    reasoning: str


@dataclass(frozen=True)
class ClassificationResult:
    """Authenticity verdict for a single submission.

    ``confidence`` is an integer percentage in ``[60, 95]`` and ``sources`` is
    never empty.
    """

    is_authentic: bool
    confidence: int
    reasoning: str
    sources: tuple[str, ...]

    @property
    def label(self) -> str:
        return "Likely Authentic" if self.is_authentic else "Potentially Misleading"


@dataclass(frozen=True)
class Message:
    """A single conversation turn, optionally carrying an analysis."""

    id: str
    role: MessageRole
    content: str
    analysis: ClassificationResult | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))


@dataclass
class Conversation:
    """Caller-owned ordered log of conversation turns."""

    messages: list[Message] = field(default_factory=list)

    def append(self, message: Message) -> None:
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)

    @property
    def last(self) -> Message | None:
        return self.messages[-1] if self.messages else None


@dataclass(frozen=True)
class Notification:
    """Transient success/failure notice shown after a submission."""

    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT
