"""Protocol for text classification."""

from typing import Protocol

from truthbot.data import ClassificationResult


class TextClassifier(Protocol):
    """Interface for labelling submitted text as authentic or not."""

    def classify(self, text: str) -> ClassificationResult:
        """Classify a single submission.

        Args:
            text: Raw user-submitted text or URL.

        Returns:
            The authenticity verdict.
        """
        ...
