"""
Module: extractor.diagnostics

Collects parse diagnostics (stage messages, the marked body XML, the
converter HTML and the colors seen in the document) alongside a parse
result so a reviewer can see why answers were or were not detected.

Diagnostics never abort a parse; they are recorded and mirrored to the
module logger.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosticEntry:
    """
    A single diagnostic line.

    Fields:
    - stage: Pipeline stage that recorded it ("marker", "converter", ...)
    - level: logging level name ("INFO", "WARNING", ...)
    - message: Human readable text
    """
    stage: str
    level: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"stage": self.stage, "level": self.level, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.stage}] {self.message}"


@dataclass
class DiagnosticsLog:
    """
    Diagnostics gathered during one parse.

    Attributes:
        entries: Recorded lines in order
        document_xml: Body XML after answer marking ("" if marking failed)
        html: Markup produced by the converter
        detected_colors: Distinct RRGGBB run colors in the source body
    """
    entries: List[DiagnosticEntry] = field(default_factory=list)
    document_xml: str = ""
    html: str = ""
    detected_colors: List[str] = field(default_factory=list)

    def record(self, stage: str, message: str, level: int = logging.INFO) -> None:
        """Record a diagnostic and mirror it to the logger."""
        entry = DiagnosticEntry(stage=stage, level=logging.getLevelName(level), message=message)
        self.entries.append(entry)
        logger.log(level, str(entry))

    def warning(self, stage: str, message: str) -> None:
        self.record(stage, message, level=logging.WARNING)

    @property
    def messages(self) -> List[str]:
        return [str(entry) for entry in self.entries]

    @property
    def warning_count(self) -> int:
        return sum(1 for entry in self.entries if entry.level in ("WARNING", "ERROR"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "detected_colors": list(self.detected_colors),
            "entries": [entry.to_dict() for entry in self.entries],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, directory: Path) -> Path:
        """
        Write diagnostics.json plus the marked XML and converted HTML.

        Args:
            directory: Output directory (created if needed)

        Returns:
            Path to diagnostics.json
        """
        directory.mkdir(parents=True, exist_ok=True)
        report_path = directory / "diagnostics.json"
        report_path.write_text(self.to_json(), encoding="utf-8")
        if self.document_xml:
            (directory / "document.marked.xml").write_text(self.document_xml, encoding="utf-8")
        if self.html:
            (directory / "converted.html").write_text(self.html, encoding="utf-8")
        logger.info(f"Parse diagnostics saved: {directory}")
        return report_path
