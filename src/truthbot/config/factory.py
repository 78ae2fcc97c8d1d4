"""Factory functions to create components from configuration."""

from pathlib import Path

from truthbot.analyzer.simulated import SimulatedAnalyzer
from truthbot.chat.session import ChatSession
from truthbot.classifier.base import TextClassifier
from truthbot.classifier.heuristic import HeuristicClassifier
from truthbot.config.models import (
    AnalyzerConfig,
    ClassifierConfig,
    HeuristicClassifierConfig,
    SimulatedAnalyzerConfig,
    TruthBotConfig,
)
from truthbot.data import Conversation
from truthbot.transcript import TranscriptLogger


def create_classifier(
    config: ClassifierConfig,
    *,
    seed_override: int | None = None,
) -> TextClassifier:
    """Create a text classifier from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, HeuristicClassifierConfig):
        seed = seed_override if seed_override is not None else config.seed
        return HeuristicClassifier(seed=seed)
    msg = f"Unknown classifier config type: {type(config)}"
    raise ValueError(msg)


def create_analyzer(
    config: AnalyzerConfig,
    classifier: TextClassifier,
    *,
    latency_override: float | None = None,
) -> SimulatedAnalyzer:
    """Create an analyzer wrapping ``classifier`` from config."""
    if isinstance(config, SimulatedAnalyzerConfig):
        latency = latency_override if latency_override is not None else config.latency_seconds
        return SimulatedAnalyzer(classifier, latency_seconds=latency)
    msg = f"Unknown analyzer config type: {type(config)}"
    raise ValueError(msg)


def create_session(
    config: TruthBotConfig,
    *,
    conversation: Conversation | None = None,
    transcript: TranscriptLogger | None = None,
    seed_override: int | None = None,
    latency_override: float | None = None,
    session_type: str = "interactive",
) -> ChatSession:
    """Create a chat session from config."""
    classifier = create_classifier(config.classifier, seed_override=seed_override)
    analyzer = create_analyzer(config.analyzer, classifier, latency_override=latency_override)
    return ChatSession(
        analyzer,
        conversation,
        timeout_seconds=config.analyzer.timeout_seconds,
        transcript=transcript,
        session_type=session_type,
    )


def create_from_config(
    config: TruthBotConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
    seed_override: int | None = None,
    latency_override: float | None = None,
    session_type: str = "interactive",
) -> tuple[ChatSession, TranscriptLogger | None]:
    """Create a complete chat session from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
        seed_override: Override the classifier seed.
        latency_override: Override the analyzer latency.
        session_type: Label recorded in the transcript.

    Returns:
        Tuple of (session, transcript_logger).
        transcript_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    transcript: TranscriptLogger | None = None
    if log_enabled:
        transcript = TranscriptLogger(log_dir=log_dir, enabled=True)

    session = create_session(
        config,
        transcript=transcript,
        seed_override=seed_override,
        latency_override=latency_override,
        session_type=session_type,
    )
    return (session, transcript)
