"""Keyword-based authenticity classifier.

Scans the submission for two fixed phrase lists and perturbs a base
confidence with one random draw. There is no real analysis behind it.
"""

import logging

from truthbot.data import (
    AUTHENTIC_SOURCES,
    PENDING_SOURCES,
    BaseVerdict,
    ClassificationResult,
)
from truthbot.errors import ClassificationFailure, InvalidInput
from truthbot.randomness import RandomSource, create_random_source

logger = logging.getLogger(__name__)

SUSPICIOUS_PHRASES: tuple[str, ...] = (
    "shocking",
    "unbelievable",
    "miracle cure",
    "secret government",
    "they don't want you to know",
)
RELIABLE_PHRASES: tuple[str, ...] = (
    "according to",
    "study shows",
    "research indicates",
    "expert says",
    "official statement",
)

MISINFORMATION_REASONING = (
    "Contains sensationalized language patterns commonly found in misinformation. "
    "Lacks credible source citations."
)
CREDIBLE_REASONING = (
    "Contains credible language patterns and appears to reference authoritative sources."
)
NEUTRAL_REASONING = "Analysis based on content patterns and language indicators."

MIN_CONFIDENCE = 60
MAX_CONFIDENCE = 95
JITTER_LOW = -10
JITTER_HIGH = 9


def _contains_any(normalized: str, phrases: tuple[str, ...]) -> bool:
    return any(phrase in normalized for phrase in phrases)


def base_verdict(text: str) -> BaseVerdict:
    """Pick the keyword branch for ``text`` (case-insensitive).

    A reliable phrase wins over a suspicious one when both are present.
    """
    normalized = text.lower()
    has_suspicious = _contains_any(normalized, SUSPICIOUS_PHRASES)
    has_reliable = _contains_any(normalized, RELIABLE_PHRASES)

    if has_suspicious and not has_reliable:
        return BaseVerdict(False, 85, MISINFORMATION_REASONING)
    if has_reliable:
        return BaseVerdict(True, 90, CREDIBLE_REASONING)
    return BaseVerdict(True, 75, NEUTRAL_REASONING)


def clamp_confidence(value: int) -> int:
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))


def classify(text: str, random_source: RandomSource) -> ClassificationResult:
    """Classify ``text`` using the keyword heuristic.

    Args:
        text: Raw submission. Its casing is never altered.
        random_source: Source of the confidence jitter.

    Returns:
        Frozen classification result.

    Raises:
        InvalidInput: If ``text`` is blank.
        ClassificationFailure: If the random source fails.
    """
    if not text.strip():
        raise InvalidInput("Cannot classify blank text")

    verdict = base_verdict(text)
    try:
        offset = random_source.randint(JITTER_LOW, JITTER_HIGH)
    except Exception as e:
        raise ClassificationFailure(f"Random source failed: {e}") from e

    return ClassificationResult(
        is_authentic=verdict.is_authentic,
        confidence=clamp_confidence(verdict.base_confidence + offset),
        reasoning=verdict.reasoning,
        sources=AUTHENTIC_SOURCES if verdict.is_authentic else PENDING_SOURCES,
    )


class HeuristicClassifier:
    """Stateless keyword classifier bound to one random source.

    Args:
        random_source: Injected source of jitter. Takes precedence over ``seed``.
        seed: Seed for a dedicated ``random.Random`` when no source is given.
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        self._random = random_source if random_source is not None else create_random_source(seed)

    def classify(self, text: str) -> ClassificationResult:
        result = classify(text, self._random)
        logger.debug(
            "Classified %d chars: authentic=%s confidence=%d",
            len(text),
            result.is_authentic,
            result.confidence,
        )
        return result
