"""Unit tests for logging setup and conversion statistics."""

from unittest.mock import Mock

import pytest
import structlog

from pathgeom.utils import ConversionLogger, configure_logging


class TestConsoleLogging:
    """Tests for console-only logging."""

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that events below the console level are dropped."""
        configure_logging(console_level="WARNING")
        logger = structlog.get_logger("pathgeom.test")

        logger.debug("Hidden debug event")
        logger.warning("Visible warning event")

        err = capsys.readouterr().err
        assert "Hidden debug event" not in err
        assert "Visible warning event" in err

    def test_quiet_keeps_errors_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that quiet mode overrides the console level."""
        configure_logging(console_level="DEBUG", quiet=True)
        logger = structlog.get_logger("pathgeom.test")

        logger.warning("Quiet warning event")
        logger.error("Quiet error event")

        err = capsys.readouterr().err
        assert "Quiet warning event" not in err
        assert "Quiet error event" in err


class TestConversionLogger:
    """Tests for ConversionLogger statistics."""

    def test_counts(self) -> None:
        """Test converted, skipped and failed counters."""
        conversion_logger = ConversionLogger(Mock())

        conversion_logger.log_converted("path:0", 5)
        conversion_logger.log_skipped("primitive:1", "empty result")
        conversion_logger.log_error("path:2", ValueError("bad stream"))

        stats = conversion_logger.stats
        assert stats.converted_count == 1
        assert stats.vertices_written == 5
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("path:2", "bad stream")]
