"""
CipherLab Report Generator
===========================

Generates JSON reports from CipherLab results. The JSON report provides
machine-readable structured output for ``--output json``, written either
to stdout or to a file.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from labcore.models import LabResult

from cipherlab import __version__


class CipherLabReportGenerator:
    """Builds JSON reports from :class:`LabResult` envelopes.

    Usage::

        generator = CipherLabReportGenerator()
        text = generator.to_json(lab_result)
        generator.generate_json(lab_result, Path("report.json"))
    """

    def build(self, result: LabResult) -> dict[str, Any]:
        """Return the report as a plain dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "description": result.summary,
                "duration_seconds": result.duration_seconds,
            },
            "result": result.metadata,
        }

    def to_json(self, result: LabResult, indent: Optional[int] = 2) -> str:
        """Serialise the report to a JSON string."""
        return json.dumps(
            self.build(result), indent=indent, ensure_ascii=False, default=str
        )

    def generate_json(self, result: LabResult, output_path: Path) -> Path:
        """Write the JSON report to *output_path*.

        Args:
            result: Result envelope to serialise.
            output_path: Path to write the JSON file.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path
