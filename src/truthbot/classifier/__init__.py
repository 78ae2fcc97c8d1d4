from truthbot.classifier.base import TextClassifier
from truthbot.classifier.heuristic import (
    RELIABLE_PHRASES,
    SUSPICIOUS_PHRASES,
    HeuristicClassifier,
    base_verdict,
    classify,
)

__all__ = [
    "HeuristicClassifier",
    "RELIABLE_PHRASES",
    "SUSPICIOUS_PHRASES",
    "TextClassifier",
    "base_verdict",
    "classify",
]
