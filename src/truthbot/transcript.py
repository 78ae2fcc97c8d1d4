"""Transcript logger for recording chat exchanges to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from truthbot.data import ClassificationResult, Message


class ExchangeRecord(BaseModel):
    """Record of a single submission and its outcome."""

    submission: str
    result: dict[str, Any] | None = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a complete chat session."""

    session_id: str
    session_type: str
    started_at: str
    completed_at: str | None = None
    exchanges: list[ExchangeRecord] = []
    messages: list[dict[str, Any]] = []
    authentic_count: int = 0
    misleading_count: int = 0
    failure_count: int = 0


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, datetimes, lists, dicts and
    primitives.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class TranscriptLogger:
    """Accumulates exchange records and writes one JSON file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON transcript files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written transcript, or None."""
        return self._last_log_path

    def start_session(self, session_type: str) -> None:
        """Initialize a new session record.

        Args:
            session_type: Kind of session (e.g. "interactive", "one_shot").
        """
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            session_type=session_type,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_exchange(
        self,
        submission: str,
        result: ClassificationResult | None,
        error: BaseException | None,
        duration_seconds: float,
    ) -> None:
        """Append an exchange record to the current session.

        Args:
            submission: Text the user submitted.
            result: Verdict, or None if the analysis failed.
            error: Failure raised by the analysis, if any.
            duration_seconds: Wall-clock time for the analysis.
        """
        if not self._enabled or self._record is None:
            return

        self._record.exchanges.append(
            ExchangeRecord(
                submission=submission,
                result=_serialize(result),
                error=f"{type(error).__name__}: {error}" if error is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )
        if result is None:
            self._record.failure_count += 1
        elif result.is_authentic:
            self._record.authentic_count += 1
        else:
            self._record.misleading_count += 1

    def finish_session(self, messages: list[Message]) -> Path | None:
        """Write the session record to a JSON file.

        Args:
            messages: Final conversation log.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.messages = [_serialize(m) for m in messages]

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00_ab12cd34.json
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"session_{ts}_{self._record.session_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
