"""Logging setup for the API server and CLI.

Provides:
- configure_logging(): root logger with either JSON lines or a plain text format
- EndpointFilter: drop access log lines for noisy endpoints such as /health
"""

import logging

from rainwise.config import LoggingConfig

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)
JSON_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
DEV_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure the root logger.

    JSON lines suit log shippers in deployed environments; the plain format is
    easier to read in a terminal.

    Args:
        config: Logging configuration (defaults to LOG_ environment variables)
    """
    config = config or LoggingConfig()

    if config.json_format:
        logging.basicConfig(
            level=config.level, format=JSON_FORMAT, datefmt=JSON_DATE_FORMAT, force=True
        )
    else:
        logging.basicConfig(level=config.level, format=DEV_FORMAT, force=True)

    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, EndpointFilter) for f in access_logger.filters):
        access_logger.addFilter(EndpointFilter("/health"))


class EndpointFilter(logging.Filter):
    """Drops uvicorn access log lines that mention a given path.

    Load balancer health checks hit /health every few seconds; configure_logging()
    attaches this filter so those lines do not bury assessment requests.

    Args:
        path: Request path whose access lines are dropped
    """

    def __init__(self, path: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._path = path

    def filter(self, record: logging.LogRecord) -> bool:
        return self._path not in record.getMessage()
