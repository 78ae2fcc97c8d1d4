"""Pydantic configuration models for TruthBot components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Classifier Configs
# ============================================================


class HeuristicClassifierConfig(BaseModel):
    """Configuration for HeuristicClassifier."""

    type: Literal["heuristic"] = "heuristic"
    seed: int | None = None

    model_config = {"frozen": True}


ClassifierConfig = Annotated[
    HeuristicClassifierConfig,
    Field(discriminator="type"),
]


# ============================================================
# Analyzer Configs
# ============================================================


class SimulatedAnalyzerConfig(BaseModel):
    """Configuration for SimulatedAnalyzer."""

    type: Literal["simulated"] = "simulated"
    latency_seconds: float = Field(default=2.0, ge=0.0)
    timeout_seconds: float | None = Field(default=None, gt=0.0)

    model_config = {"frozen": True}


AnalyzerConfig = Annotated[
    SimulatedAnalyzerConfig,
    Field(discriminator="type"),
]


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for session transcript logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TruthBotConfig(BaseModel):
    """Root configuration for TruthBot."""

    classifier: HeuristicClassifierConfig = Field(default_factory=HeuristicClassifierConfig)
    analyzer: SimulatedAnalyzerConfig = Field(default_factory=SimulatedAnalyzerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
