"""Data models for TruthBot."""

from truthbot.data.models import (
    AUTHENTIC_SOURCES,
    PENDING_SOURCES,
    BaseVerdict,
    ClassificationRequest,
    ClassificationResult,
    ConfidenceBand,
    Conversation,
    Message,
    MessageRole,
    Notification,
    NotificationVariant,
)

__all__ = [
    "AUTHENTIC_SOURCES",
    "PENDING_SOURCES",
    "BaseVerdict",
    "ClassificationRequest",
    "ClassificationResult",
    "ConfidenceBand",
    "Conversation",
    "Message",
    "MessageRole",
    "Notification",
    "NotificationVariant",
]
