"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from truthbot.analyzer.simulated import SimulatedAnalyzer
from truthbot.chat.session import ChatSession
from truthbot.classifier.heuristic import HeuristicClassifier
from truthbot.config import (
    HeuristicClassifierConfig,
    LoggingConfig,
    SimulatedAnalyzerConfig,
    TruthBotConfig,
    create_analyzer,
    create_classifier,
    create_from_config,
    create_session,
    get_default_config_path,
    load_config,
)
from truthbot.transcript import TranscriptLogger


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_classifier_config_defaults(self) -> None:
        config = HeuristicClassifierConfig()
        assert config.type == "heuristic"
        assert config.seed is None

    def test_analyzer_config_defaults(self) -> None:
        config = SimulatedAnalyzerConfig()
        assert config.type == "simulated"
        assert config.latency_seconds == 2.0
        assert config.timeout_seconds is None

    def test_logging_config_defaults(self) -> None:
        config = LoggingConfig()
        assert config.enabled is False
        assert config.log_dir == "logs"

    def test_root_config_defaults(self) -> None:
        config = TruthBotConfig()
        assert isinstance(config.classifier, HeuristicClassifierConfig)
        assert isinstance(config.analyzer, SimulatedAnalyzerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_configs_are_frozen(self) -> None:
        config = SimulatedAnalyzerConfig()
        with pytest.raises(ValidationError):
            config.latency_seconds = 1.0  # type: ignore[misc]

    def test_negative_latency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SimulatedAnalyzerConfig(latency_seconds=-0.5)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SimulatedAnalyzerConfig(timeout_seconds=0)

    def test_unknown_classifier_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TruthBotConfig.model_validate({"classifier": {"type": "llm"}})


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            """
classifier:
  type: heuristic
  seed: 42
analyzer:
  type: simulated
  latency_seconds: 0.5
  timeout_seconds: 5
logging:
  enabled: true
  log_dir: transcripts
"""
        )
        config = load_config(path)

        assert config.classifier.seed == 42
        assert config.analyzer.latency_seconds == 0.5
        assert config.analyzer.timeout_seconds == 5.0
        assert config.logging.enabled is True
        assert config.logging.log_dir == "transcripts"

    def test_load_empty_config_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == TruthBotConfig()

    def test_load_missing_config(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert isinstance(config, TruthBotConfig)
            assert config.analyzer.latency_seconds == 2.0


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_classifier(self) -> None:
        classifier = create_classifier(HeuristicClassifierConfig(seed=1))
        assert isinstance(classifier, HeuristicClassifier)

    def test_create_classifier_seed_override(self) -> None:
        overridden = create_classifier(HeuristicClassifierConfig(seed=1), seed_override=99)
        reference = HeuristicClassifier(seed=99)
        texts = ["plain"] * 10
        assert [overridden.classify(t) for t in texts] == [reference.classify(t) for t in texts]

    def test_create_classifier_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            create_classifier(object())  # type: ignore[arg-type]

    def test_create_analyzer(self) -> None:
        analyzer = create_analyzer(
            SimulatedAnalyzerConfig(latency_seconds=0.25), HeuristicClassifier(seed=0)
        )
        assert isinstance(analyzer, SimulatedAnalyzer)
        assert analyzer.latency_seconds == 0.25

    def test_create_analyzer_latency_override(self) -> None:
        analyzer = create_analyzer(
            SimulatedAnalyzerConfig(), HeuristicClassifier(seed=0), latency_override=0.0
        )
        assert analyzer.latency_seconds == 0.0

    def test_create_analyzer_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            create_analyzer(object(), HeuristicClassifier(seed=0))  # type: ignore[arg-type]

    def test_create_session(self) -> None:
        session = create_session(TruthBotConfig())
        assert isinstance(session, ChatSession)
        assert len(session.conversation) == 1

    def test_create_from_config_logging_disabled(self) -> None:
        session, transcript = create_from_config(TruthBotConfig())
        assert isinstance(session, ChatSession)
        assert transcript is None

    def test_create_from_config_log_override(self, tmp_path: Path) -> None:
        session, transcript = create_from_config(
            TruthBotConfig(),
            log_override=True,
            log_dir_override=str(tmp_path),
        )
        assert isinstance(transcript, TranscriptLogger)
        assert transcript.enabled is True

    async def test_created_session_runs(self, tmp_path: Path) -> None:
        config = TruthBotConfig(
            classifier=HeuristicClassifierConfig(seed=3),
            logging=LoggingConfig(enabled=True, log_dir=str(tmp_path)),
        )
        session, transcript = create_from_config(config, latency_override=0.0)

        notification = await session.submit("Official statement released today.")
        path = session.close()

        assert notification is not None
        assert notification.title == "Analysis Complete"
        assert transcript is not None
        assert path == transcript.last_log_path
        assert path is not None and path.parent == tmp_path
