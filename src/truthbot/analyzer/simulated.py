"""Analyzer that simulates backend latency in front of a local classifier."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from truthbot.classifier.base import TextClassifier
from truthbot.data import ClassificationResult

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class SimulatedAnalyzer:
    """Wait an artificial delay, then classify synchronously.

    No network calls are made. The delay only stands in for the variable
    latency of a real inference backend.

    Args:
        classifier: Classifier that produces the verdict.
        latency_seconds: Artificial delay before classifying. ``0`` disables it.
        sleep: Coroutine used to wait (defaults to ``asyncio.sleep``).
    """

    def __init__(
        self,
        classifier: TextClassifier,
        latency_seconds: float = 2.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if latency_seconds < 0:
            msg = f"latency_seconds must be >= 0, got {latency_seconds}"
            raise ValueError(msg)
        self._classifier = classifier
        self._latency = latency_seconds
        self._sleep = sleep

    @property
    def latency_seconds(self) -> float:
        return self._latency

    async def analyze(self, text: str) -> ClassificationResult:
        if self._latency > 0:
            logger.debug(f"Simulating {self._latency:.2f}s analysis latency")
            await self._sleep(self._latency)
        return self._classifier.classify(text)
