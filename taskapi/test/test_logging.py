import pytest
import logging
import json


class TestLogging:
    """Test logging functions without external dependencies"""

    def test_logger_configuration(self):
        """Test basic logger setup and configuration"""
        from taskapi.infra.logging_config import setup_logging

        logger = setup_logging("test_logger")

        assert logger.name == "test_logger"
        assert logger.level == logging.INFO
        assert len(logger.handlers) > 0

    def test_logger_writes_json_format(self, tmp_path):
        """Test JSON log format writing"""
        log_file = tmp_path / "test.log"

        from taskapi.infra.logging_config import setup_logging
        logger = setup_logging("test_json", log_file=str(log_file))
        logger.info("Test message", extra={"user_id": "u-123"})

        assert log_file.exists()
        with open(log_file) as f:
            log_line = json.loads(f.readline())
            assert log_line["message"] == "Test message"
            assert log_line["user_id"] == "u-123"
            assert "timestamp" in log_line
            assert log_line["level"] == "INFO"

    def test_logger_different_levels(self, capsys):
        """Test different logging levels"""
        from taskapi.infra.logging_config import setup_logging
        logger = setup_logging("test_levels", console=True)

        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")

        captured = capsys.readouterr()
        # DEBUG should not appear at INFO level
        assert "Debug message" not in captured.out
        assert "Info message" in captured.out
        assert "Warning message" in captured.out

    def test_logger_with_exception(self, tmp_path):
        """Test exception logging with traceback"""
        log_file = tmp_path / "error.log"

        from taskapi.infra.logging_config import setup_logging
        logger = setup_logging("test_error", log_file=str(log_file))

        try:
            raise ValueError("Test exception")
        except ValueError:
            logger.exception("An error occurred")

        with open(log_file) as f:
            log_content = f.read()
            assert "An error occurred" in log_content
            assert "ValueError: Test exception" in log_content
            assert "Traceback" in log_content

    def test_get_logger_is_cached_child(self):
        from taskapi.infra.logging_config import get_logger, ROOT_LOGGER_NAME

        logger1 = get_logger("test_singleton")
        logger2 = get_logger("test_singleton")

        assert logger1 is logger2
        assert logger1.name == f"{ROOT_LOGGER_NAME}.test_singleton"

    def test_child_loggers_use_application_handlers(self, tmp_path):
        log_file = tmp_path / "app.log"

        from taskapi.infra.logging_config import configure_logging, get_logger
        configure_logging("DEBUG", str(log_file))
        get_logger("api.tasks").debug("Task created", extra={"task_id": "t-1"})

        log_line = json.loads(log_file.read_text().splitlines()[-1])
        assert log_line["logger"] == "taskapi.api.tasks"
        assert log_line["task_id"] == "t-1"
        assert log_line["level"] == "DEBUG"
