"""Protocol for asynchronous analysis of submissions."""

from typing import Protocol

from truthbot.data import ClassificationResult


class Analyzer(Protocol):
    """Interface for long-running authenticity analysis."""

    async def analyze(self, text: str) -> ClassificationResult:
        """Analyze a submission.

        Args:
            text: Raw user-submitted text or URL.

        Returns:
            The authenticity verdict.

        Raises:
            ClassificationFailure: If the analysis cannot complete.
        """
        ...
