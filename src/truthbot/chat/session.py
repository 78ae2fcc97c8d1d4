"""Chat session that turns submissions into conversation turns."""

import asyncio
import logging
import time
import uuid
from pathlib import Path

from truthbot.analyzer.base import Analyzer
from truthbot.data import (
    ClassificationResult,
    Conversation,
    Message,
    MessageRole,
    Notification,
    NotificationVariant,
)
from truthbot.errors import ClassificationFailure
from truthbot.transcript import TranscriptLogger

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm TruthBot, your AI-powered fact-checker. Send me a news article, "
    "URL, or claim and I'll analyze its authenticity for you."
)
ASSESSMENT_INTRO = "I've analyzed your submission. Here's my assessment:"


def _new_id() -> str:
    return uuid.uuid4().hex


class ChatSession:
    """Conversation driver between a user and an analyzer.

    Flow for each submission:
    1. Blank text, or text sent while an analysis is running, is ignored
    2. The user turn is appended verbatim
    3. The analyzer runs (optionally under a timeout)
    4. On success a bot turn carrying the analysis is appended

    A failed analysis appends nothing beyond the user turn and yields a
    destructive notification instead.

    Args:
        analyzer: Analyzer producing verdicts.
        conversation: Caller-owned log to append to. A new one is created if None.
        timeout_seconds: Optional upper bound on a single analysis.
        transcript: Optional TranscriptLogger for recording exchanges.
        session_type: Label recorded in the transcript.
    """

    def __init__(
        self,
        analyzer: Analyzer,
        conversation: Conversation | None = None,
        *,
        timeout_seconds: float | None = None,
        transcript: TranscriptLogger | None = None,
        session_type: str = "interactive",
    ) -> None:
        self._analyzer = analyzer
        self._conversation = conversation if conversation is not None else Conversation()
        self._timeout = timeout_seconds
        self._transcript = transcript
        self._analyzing = False

        if not self._conversation.messages:
            self._conversation.append(
                Message(id=_new_id(), role=MessageRole.BOT, content=GREETING)
            )
        if self._transcript:
            self._transcript.start_session(session_type)

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    @property
    def is_analyzing(self) -> bool:
        return self._analyzing

    async def submit(self, text: str) -> Notification | None:
        """Submit user text for analysis.

        Args:
            text: Raw user input. Stored verbatim in the conversation.

        Returns:
            A notification describing the outcome, or None if the submission
            was ignored (blank, or another analysis is in flight).
        """
        if not text.strip() or self._analyzing:
            return None

        self._conversation.append(Message(id=_new_id(), role=MessageRole.USER, content=text))
        self._analyzing = True
        t0 = time.monotonic()
        try:
            analysis = await self._run_analysis(text)
        except (ClassificationFailure, TimeoutError) as e:
            logger.warning(f"Analysis failed: {e!r}")
            self._record(text, None, e, time.monotonic() - t0)
            return Notification(
                title="Analysis Failed",
                description="Unable to analyze the content. Please try again.",
                variant=NotificationVariant.DESTRUCTIVE,
            )
        finally:
            self._analyzing = False

        self._record(text, analysis, None, time.monotonic() - t0)
        self._conversation.append(
            Message(
                id=_new_id(),
                role=MessageRole.BOT,
                content=ASSESSMENT_INTRO,
                analysis=analysis,
            )
        )
        verdict = "authentic" if analysis.is_authentic else "potentially misleading"
        return Notification(
            title="Analysis Complete",
            description=f"Content appears to be {verdict}",
            variant=(
                NotificationVariant.DEFAULT
                if analysis.is_authentic
                else NotificationVariant.DESTRUCTIVE
            ),
        )

    def close(self) -> Path | None:
        """Finish the transcript, if any.

        Returns:
            Path to the written transcript, or None.
        """
        if self._transcript is None:
            return None
        return self._transcript.finish_session(self._conversation.messages)

    async def _run_analysis(self, text: str) -> ClassificationResult:
        if self._timeout is None:
            return await self._analyzer.analyze(text)
        return await asyncio.wait_for(self._analyzer.analyze(text), timeout=self._timeout)

    def _record(
        self,
        text: str,
        analysis: ClassificationResult | None,
        error: BaseException | None,
        duration: float,
    ) -> None:
        if self._transcript:
            self._transcript.log_exchange(text, analysis, error, duration)
