"""API server entry point."""

import logging

import uvicorn

from rainwise.common.log_utils import configure_logging
from rainwise.config import ApiServerConfig, LoggingConfig

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the API with uvicorn."""
    configure_logging(LoggingConfig())
    config = ApiServerConfig()

    logger.info(f"Starting RainWise API on {config.host}:{config.port}")
    uvicorn.run("rainwise.api:app", host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
