"""
Unit tests for DiagnosticsLog.
"""

import json
import logging

from mcq_toolkit.extractor.diagnostics import DiagnosticsLog


class TestDiagnosticsLog:
    """Tests for DiagnosticsLog."""

    def test_record_mirrors_to_logger(self, caplog):
        log = DiagnosticsLog()
        with caplog.at_level(logging.INFO, logger="mcq_toolkit.extractor.diagnostics"):
            log.record("marker", "Injected marker into 3 text runs.")
        assert log.messages == ["[marker] Injected marker into 3 text runs."]
        assert "[marker] Injected marker into 3 text runs." in caplog.text

    def test_warning_count(self):
        log = DiagnosticsLog()
        log.record("a", "info")
        log.warning("b", "warn")
        log.record("c", "err", level=logging.ERROR)
        assert log.warning_count == 2

    def test_save_writes_artifacts(self, tmp_path):
        log = DiagnosticsLog(document_xml="<w:document/>", html="<p>x</p>", detected_colors=["FF0000"])
        log.record("converter", "HTML Generated Length: 8")

        report = log.save(tmp_path / "debug")

        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["detected_colors"] == ["FF0000"]
        assert data["entries"][0]["message"] == "HTML Generated Length: 8"
        assert (tmp_path / "debug" / "document.marked.xml").read_text(encoding="utf-8") == "<w:document/>"
        assert (tmp_path / "debug" / "converted.html").exists()

    def test_save_skips_empty_artifacts(self, tmp_path):
        DiagnosticsLog().save(tmp_path)
        assert not (tmp_path / "document.marked.xml").exists()
        assert not (tmp_path / "converted.html").exists()
