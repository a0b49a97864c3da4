"""
CipherLab Result Envelope
==========================

Pydantic v2 model shared by every CipherLab operation. Engine methods
wrap their domain result (crack attempts, key-length estimates, ...) in
a :class:`LabResult` so the CLI and report writer can handle every
operation the same way.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class LabResult(BaseModel):
    """Aggregated result of a single CipherLab operation.

    Attributes:
        tool_name:  Name of the operation (e.g. ``"crack-keyword"``).
        target:     Input that was analysed (usually the ciphertext).
        start_time: UTC timestamp when the operation started.
        end_time:   UTC timestamp when the operation ended.
        summary:    Human-readable summary text.
        metadata:   Serialised domain result.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    tool_name: str = Field(..., min_length=1, description="Operation name")
    target: str = Field(default="", description="Analysed input")
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="End timestamp (UTC)",
    )
    summary: str = Field(default="", description="Human-readable summary")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Serialised domain result",
    )

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def finalize(self, summary: str | None = None) -> LabResult:
        """Mark the operation as complete by setting *end_time* and *summary*.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        return self
