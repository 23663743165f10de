"""Tests for event exporters."""

import json
import logging
import os

import pytest
from unittest.mock import MagicMock

from evt_tracer.exporters.base import BaseExporter
from evt_tracer.exporters.console import ConsoleExporter
from evt_tracer.exporters.file import FileExporter
from evt_tracer.exporters.logger import LoggingExporter
from evt_tracer.exporters.multi import MultiExporter


def make_event(**overrides):
    event = {
        "kind": "client.request",
        "operation": "billing.get_invoice",
        "parent_span_id": "0",
        "span_id": "6f1c2b1e-4f0a-4c55-9d0e-0c9c3f1b7a11",
        "trace_id": "b2a9d9de-6a0e-4c0b-8d55-2a6f6f7c9e42",
        "tags": {"http.method": "GET"},
    }
    event.update(overrides)
    return event


class TestBaseExporter:
    """Tests for base exporter interface."""

    def test_base_exporter_is_abstract(self):
        """Test that BaseExporter cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseExporter()

    def test_base_exporter_defaults(self):
        """Test default lifecycle hooks on a minimal exporter."""
        class TestExporter(BaseExporter):
            def export(self, event):
                return True

        exporter = TestExporter()
        exporter.start()
        exporter.flush()
        exporter.stop()

        assert exporter.export(make_event()) is True
        assert exporter.health_check() is True


class TestLoggingExporter:
    """Tests for logging exporter."""

    def test_export_logs_one_record(self, caplog):
        """Test each event becomes one record carrying the event."""
        exporter = LoggingExporter(logger="test.evt")
        event = make_event()

        with caplog.at_level(logging.INFO, logger="test.evt"):
            result = exporter.export(event)

        assert result is True
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "test.evt"
        assert record.levelno == logging.INFO
        assert record.evt is event
        assert json.loads(record.getMessage()[len("evt "):]) == event

    def test_default_logger_name(self):
        """Test the default logger name."""
        exporter = LoggingExporter()

        assert exporter.logger.name == "evt_tracer.events"

    def test_accepts_logger_instance(self, caplog):
        """Test a logger instance and level can be supplied."""
        target = logging.getLogger("test.evt.debug")
        exporter = LoggingExporter(logger=target, level=logging.DEBUG)

        with caplog.at_level(logging.DEBUG, logger="test.evt.debug"):
            exporter.export(make_event())

        assert caplog.records[0].levelno == logging.DEBUG

    def test_health_check_follows_level(self):
        """Test health reflects whether events would be logged."""
        target = logging.getLogger("test.evt.health")
        target.setLevel(logging.WARNING)
        exporter = LoggingExporter(logger=target)

        assert exporter.health_check() is False

        target.setLevel(logging.INFO)

        assert exporter.health_check() is True


class TestConsoleExporter:
    """Tests for console exporter."""

    def test_export_basic_event(self, capsys):
        """Test basic event export to console."""
        exporter = ConsoleExporter(colored=False)

        result = exporter.export(make_event())

        assert result is True
        captured = capsys.readouterr()
        assert "client.request" in captured.out
        assert "billing.get_invoice" in captured.out
        assert "6f1c2b1e-4f0a-4c55-9d0e-0c9c3f1b7a11" in captured.out
        assert "http.method=GET" in captured.out
        assert "END" not in captured.out

    def test_export_end_event(self, capsys):
        """Test terminal events are marked."""
        exporter = ConsoleExporter(colored=False)

        exporter.export(make_event(kind="client.response", end=True, tags={}))

        captured = capsys.readouterr()
        assert "END" in captured.out

    def test_export_colored_output(self, capsys):
        """Test colored console output."""
        exporter = ConsoleExporter(colored=True)

        exporter.export(make_event())

        captured = capsys.readouterr()
        # Check for ANSI escape codes
        assert "\033[" in captured.out

    def test_export_verbose_mode(self, capsys):
        """Test verbose console output."""
        exporter = ConsoleExporter(colored=False, verbose=True)

        exporter.export(make_event())

        captured = capsys.readouterr()
        # Verbose mode should include JSON
        assert '"trace_id"' in captured.out


class TestFileExporter:
    """Tests for file exporter."""

    def test_export_writes_jsonl(self, tmp_path):
        """Test that export writes JSONL format."""
        file_path = tmp_path / "evt.jsonl"
        exporter = FileExporter(file_path=str(file_path))

        result = exporter.export(make_event())

        assert result is True

        with open(file_path) as f:
            parsed = json.loads(f.readline())
            assert parsed["kind"] == "client.request"
            assert parsed["tags"] == {"http.method": "GET"}

    def test_export_multiple_events(self, tmp_path):
        """Test multiple event exports."""
        file_path = tmp_path / "evt.jsonl"
        exporter = FileExporter(file_path=str(file_path))

        for i in range(3):
            exporter.export(make_event(tags={"i": i}))

        with open(file_path) as f:
            lines = f.readlines()
            assert len(lines) == 3

    def test_rotation(self, tmp_path):
        """Test the file is rotated once it reaches the size limit."""
        file_path = tmp_path / "evt.jsonl"
        file_path.write_text("x" * 2048)
        exporter = FileExporter(file_path=str(file_path), rotate_size_mb=0)

        exporter.export(make_event())

        assert len(os.listdir(tmp_path)) == 2
        assert len(file_path.read_text().splitlines()) == 1

    def test_write_error_returns_false(self, tmp_path):
        """Test write failures are reported, not raised."""
        exporter = FileExporter(file_path=str(tmp_path / "missing" / "evt.jsonl"))

        assert exporter.export(make_event()) is False
        assert exporter.health_check() is False


class TestMultiExporter:
    """Tests for multi-exporter."""

    def test_export_to_multiple_sinks(self):
        """Test exporting to multiple sinks."""
        mock_exporter1 = MagicMock()
        mock_exporter1.export.return_value = True

        mock_exporter2 = MagicMock()
        mock_exporter2.export.return_value = True

        multi = MultiExporter([mock_exporter1, mock_exporter2])

        event = make_event()
        result = multi.export(event)

        assert result is True
        mock_exporter1.export.assert_called_once_with(event)
        mock_exporter2.export.assert_called_once_with(event)

    def test_export_succeeds_if_one_succeeds(self):
        """Test that export succeeds if at least one exporter succeeds."""
        mock_exporter1 = MagicMock()
        mock_exporter1.export.side_effect = RuntimeError("sink down")

        mock_exporter2 = MagicMock()
        mock_exporter2.export.return_value = True

        multi = MultiExporter([mock_exporter1, mock_exporter2])

        result = multi.export(make_event())

        assert result is True

    def test_export_fails_if_all_fail(self):
        """Test that export fails when no exporter succeeds."""
        mock_exporter = MagicMock()
        mock_exporter.export.return_value = False

        multi = MultiExporter([mock_exporter])

        assert multi.export(make_event()) is False

    def test_lifecycle_calls_all_exporters(self):
        """Test start(), flush() and stop() reach all exporters."""
        mock_exporter1 = MagicMock()
        mock_exporter2 = MagicMock()

        multi = MultiExporter([mock_exporter1, mock_exporter2])
        multi.start()
        multi.flush()
        multi.stop()

        for exp in (mock_exporter1, mock_exporter2):
            exp.start.assert_called_once()
            exp.flush.assert_called_once()
            exp.stop.assert_called_once()

    def test_health_check_any(self):
        """Test health is reported if any exporter is healthy."""
        healthy = MagicMock()
        healthy.health_check.return_value = True
        unhealthy = MagicMock()
        unhealthy.health_check.return_value = False

        assert MultiExporter([unhealthy, healthy]).health_check() is True
        assert MultiExporter([unhealthy]).health_check() is False

    def test_empty_exporter_list_raises(self):
        """Test at least one exporter is required."""
        with pytest.raises(ValueError):
            MultiExporter([])

    def test_failing_sink_is_named_and_others_still_receive(self, caplog):
        """Test a raising sink is logged by name and does not block later sinks."""
        class BrokenExporter(BaseExporter):
            def export(self, event):
                raise OSError("disk full")

        class RejectingExporter(BaseExporter):
            def export(self, event):
                return False

        receiver = MagicMock()
        receiver.export.return_value = True
        multi = MultiExporter([BrokenExporter(), RejectingExporter(), receiver])
        event = make_event()

        with caplog.at_level(logging.WARNING, logger="evt_tracer.exporters.multi"):
            result = multi.export(event)

        assert result is True
        receiver.export.assert_called_once_with(event)
        messages = [r.getMessage() for r in caplog.records]
        assert any(
            "BrokenExporter" in m and "disk full" in m and event["span_id"] in m
            for m in messages
        )
        assert any("RejectingExporter" in m and "client.request" in m for m in messages)

    def test_stop_reaches_all_after_failure(self):
        """Test one exporter failing to stop does not keep the rest running."""
        failing = MagicMock()
        failing.stop.side_effect = RuntimeError("stuck")
        other = MagicMock()

        MultiExporter([failing, other]).stop()

        other.stop.assert_called_once()
