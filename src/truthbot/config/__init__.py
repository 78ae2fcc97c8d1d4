"""Configuration module for TruthBot."""

from truthbot.config.factory import (
    create_analyzer,
    create_classifier,
    create_from_config,
    create_session,
)
from truthbot.config.loader import get_default_config_path, load_config
from truthbot.config.models import (
    AnalyzerConfig,
    ClassifierConfig,
    HeuristicClassifierConfig,
    LoggingConfig,
    SimulatedAnalyzerConfig,
    TruthBotConfig,
)

__all__ = [
    "AnalyzerConfig",
    "ClassifierConfig",
    "HeuristicClassifierConfig",
    "LoggingConfig",
    "SimulatedAnalyzerConfig",
    "TruthBotConfig",
    "create_analyzer",
    "create_classifier",
    "create_from_config",
    "create_session",
    "get_default_config_path",
    "load_config",
]
