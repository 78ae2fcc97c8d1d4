"""Plain-text rendering of conversation turns for the terminal."""

from truthbot.data import ConfidenceBand, Message, MessageRole, Notification, NotificationVariant


def confidence_band(confidence: int) -> ConfidenceBand:
    if confidence >= 80:
        return ConfidenceBand.HIGH
    if confidence >= 60:
        return ConfidenceBand.MEDIUM
    return ConfidenceBand.LOW


def render_message(message: Message) -> str:
    """Format a conversation turn, including its analysis card if present."""
    speaker = "You" if message.role == MessageRole.USER else "TruthBot"
    lines = [f"{speaker}: {message.content}"]

    analysis = message.analysis
    if analysis is not None:
        marker = "[OK]" if analysis.is_authentic else "[!!]"
        band = confidence_band(analysis.confidence)
        lines.append(f"  {marker} {analysis.label}  {analysis.confidence}% Confidence ({band})")
        lines.append("  Analysis:")
        lines.append(f"    {analysis.reasoning}")
        lines.append("  Referenced Sources: " + ", ".join(analysis.sources))
    return "\n".join(lines)


def render_notification(notification: Notification) -> str:
    prefix = "!" if notification.variant == NotificationVariant.DESTRUCTIVE else "*"
    return f"{prefix} {notification.title}: {notification.description}"
