"""Unit tests for logging setup."""

import logging

from rainwise.common.log_utils import DEV_FORMAT, JSON_FORMAT, EndpointFilter, configure_logging
from rainwise.config import LoggingConfig


def make_record(message: str) -> logging.LogRecord:
    return logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, message, None, None)


def test_endpoint_filter():
    """Test health check access lines are dropped and others kept."""
    endpoint_filter = EndpointFilter("/health")

    assert endpoint_filter.filter(make_record('"GET /health HTTP/1.1" 200')) is False
    assert endpoint_filter.filter(make_record('"POST /assessments HTTP/1.1" 200')) is True


def test_configure_logging_dev_format(mocker):
    """Test plain text format by default."""
    basic_config = mocker.patch("rainwise.common.log_utils.logging.basicConfig")

    configure_logging(LoggingConfig(level="debug"))

    basic_config.assert_called_once_with(level="DEBUG", format=DEV_FORMAT, force=True)


def test_configure_logging_json_format(mocker):
    """Test JSON lines format when enabled."""
    basic_config = mocker.patch("rainwise.common.log_utils.logging.basicConfig")

    configure_logging(LoggingConfig(json_format=True))

    kwargs = basic_config.call_args.kwargs
    assert kwargs["format"] == JSON_FORMAT
    assert kwargs["level"] == "INFO"
