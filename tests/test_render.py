"""Tests for terminal rendering."""

import pytest

from truthbot.chat.render import confidence_band, render_message, render_notification
from truthbot.data import (
    AUTHENTIC_SOURCES,
    PENDING_SOURCES,
    ClassificationResult,
    ConfidenceBand,
    Message,
    MessageRole,
    Notification,
    NotificationVariant,
)


@pytest.mark.parametrize(
    ("confidence", "band"),
    [
        (95, ConfidenceBand.HIGH),
        (80, ConfidenceBand.HIGH),
        (79, ConfidenceBand.MEDIUM),
        (60, ConfidenceBand.MEDIUM),
        (59, ConfidenceBand.LOW),
    ],
)
def test_confidence_band(confidence: int, band: ConfidenceBand) -> None:
    assert confidence_band(confidence) == band


def test_render_user_message() -> None:
    msg = Message(id="1", role=MessageRole.USER, content="Is this true?")
    assert render_message(msg) == "You: Is this true?"


def test_render_bot_message_with_analysis() -> None:
    analysis = ClassificationResult(True, 87, "Looks credible.", AUTHENTIC_SOURCES)
    msg = Message(id="2", role=MessageRole.BOT, content="Assessment:", analysis=analysis)

    text = render_message(msg)

    assert text.startswith("TruthBot: Assessment:")
    assert "Likely Authentic" in text
    assert "87% Confidence (high)" in text
    assert "Looks credible." in text
    assert "Referenced Sources: Reuters, AP News, BBC" in text


def test_render_misleading_analysis() -> None:
    analysis = ClassificationResult(False, 70, "Sensational.", PENDING_SOURCES)
    msg = Message(id="3", role=MessageRole.BOT, content="Assessment:", analysis=analysis)

    text = render_message(msg)

    assert "[!!] Potentially Misleading" in text
    assert "70% Confidence (medium)" in text
    assert "Referenced Sources: Fact-check pending" in text


def test_render_notification() -> None:
    ok = Notification("Analysis Complete", "Content appears to be authentic")
    bad = Notification(
        "Analysis Failed", "Unable to analyze", variant=NotificationVariant.DESTRUCTIVE
    )
    assert render_notification(ok) == "* Analysis Complete: Content appears to be authentic"
    assert render_notification(bad) == "! Analysis Failed: Unable to analyze"


def test_sources_line_always_closes_the_card() -> None:
    analysis = ClassificationResult(True, 75, "Neutral.", AUTHENTIC_SOURCES)
    msg = Message(id="4", role=MessageRole.BOT, content="Assessment:", analysis=analysis)

    lines = render_message(msg).splitlines()

    assert lines[-1] == "  Referenced Sources: Reuters, AP News, BBC"
