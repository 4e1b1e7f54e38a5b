"""
Unit tests for LoggingManager.
"""

import logging

import pytest

from chronotext.core.logging_manager import ColoredFormatter, LoggingManager


class TestLoggingManager:
    """Test suite for LoggingManager"""

    @pytest.fixture
    def manager(self):
        manager = LoggingManager()
        yield manager
        # Back to library defaults for the following tests
        manager.configure(log_to_console=False)

    @pytest.mark.unit
    def test_singleton(self):
        """Test that every instantiation returns the same manager"""
        assert LoggingManager() is LoggingManager()

    @pytest.mark.unit
    def test_get_logger_caches(self):
        """Test named logger reuse"""
        logger = LoggingManager.get_logger("chronotext.processors.date")

        assert logger is LoggingManager.get_logger("chronotext.processors.date")
        assert logger.name == "chronotext.processors.date"

    @pytest.mark.unit
    def test_package_logger_has_null_handler(self):
        """Test that the library is silent until configured"""
        LoggingManager()
        handlers = logging.getLogger(LoggingManager.ROOT_LOGGER_NAME).handlers

        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    @pytest.mark.unit
    def test_configure_console(self, manager):
        """Test console handler level"""
        manager.configure(level="WARNING", log_to_console=True)
        handlers = logging.getLogger(LoggingManager.ROOT_LOGGER_NAME).handlers
        console = [h for h in handlers if isinstance(h.formatter, ColoredFormatter)]

        assert len(console) == 1
        assert console[0].level == logging.WARNING

        manager.set_log_level("DEBUG")
        assert console[0].level == logging.DEBUG

    @pytest.mark.unit
    def test_reconfigure_replaces_handlers(self, manager):
        """Test that configure does not stack handlers"""
        manager.configure(log_to_console=True)
        manager.configure(log_to_console=True)
        handlers = logging.getLogger(LoggingManager.ROOT_LOGGER_NAME).handlers

        assert len([h for h in handlers if isinstance(h.formatter, ColoredFormatter)]) == 1

    @pytest.mark.unit
    def test_configure_file_logging(self, manager, tmp_path):
        """Test rotating log files in the log directory"""
        manager.configure(log_to_console=False, log_to_file=True, log_dir=tmp_path / "logs")
        LoggingManager.get_logger("chronotext.test").error("disk check")

        log_files = sorted(p.name for p in (tmp_path / "logs").iterdir())
        assert len(log_files) == 2
        assert any(name.startswith("chronotext_errors_") for name in log_files)

    @pytest.mark.unit
    def test_add_custom_handler(self, manager):
        """Test that extra handlers receive package records"""
        records = []

        class ListHandler(logging.Handler):
            def emit(self, record):
                records.append(record)

        manager.configure(level="DEBUG", log_to_console=False)
        manager.add_custom_handler(ListHandler(), level="WARNING")
        logger = LoggingManager.get_logger("chronotext.test")
        logger.info("skipped")
        logger.warning("kept")

        assert [r.getMessage() for r in records] == ["kept"]

    @pytest.mark.unit
    def test_invalid_level(self, manager):
        """Test that unknown level names are rejected"""
        with pytest.raises(ValueError):
            manager.configure(level="LOUD")
