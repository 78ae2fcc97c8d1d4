"""Exception hierarchy for TruthBot."""


class TruthBotError(Exception):
    """Base class for all TruthBot errors."""


class InvalidInput(TruthBotError, ValueError):
    """Submitted text is blank."""


class ClassificationFailure(TruthBotError):
    """The classification step could not complete."""
