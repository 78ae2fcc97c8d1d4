"""TruthBot: a keyword-heuristic fact-checking chat demo."""

from truthbot.analyzer.base import Analyzer
from truthbot.analyzer.simulated import SimulatedAnalyzer
from truthbot.chat import (
    ChatSession,
    confidence_band,
    render_message,
    render_notification,
)
from truthbot.classifier import (
    RELIABLE_PHRASES,
    SUSPICIOUS_PHRASES,
    HeuristicClassifier,
    TextClassifier,
    base_verdict,
    classify,
)
from truthbot.config import TruthBotConfig, create_from_config, load_config
from truthbot.data import (
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
from truthbot.errors import ClassificationFailure, InvalidInput, TruthBotError
from truthbot.randomness import RandomSource, create_random_source
from truthbot.transcript import TranscriptLogger

__all__ = [
    # Models
    "BaseVerdict",
    "ClassificationRequest",
    "ClassificationResult",
    "ConfidenceBand",
    "Conversation",
    "Message",
    "MessageRole",
    "Notification",
    "NotificationVariant",
    # Errors
    "ClassificationFailure",
    "InvalidInput",
    "TruthBotError",
    # Classification
    "HeuristicClassifier",
    "RELIABLE_PHRASES",
    "SUSPICIOUS_PHRASES",
    "base_verdict",
    "classify",
    # Randomness
    "create_random_source",
    # Protocols
    "Analyzer",
    "RandomSource",
    "TextClassifier",
    # Analyzers
    "SimulatedAnalyzer",
    # Chat
    "ChatSession",
    "confidence_band",
    "render_message",
    "render_notification",
    # Logging
    "TranscriptLogger",
    # Config
    "TruthBotConfig",
    "create_from_config",
    "load_config",
]
