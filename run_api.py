#!/usr/bin/env python
"""
Reputation API Server Runner.

Usage:
    python run_api.py
"""

import sys
import logging

import uvicorn

from api.config import ApiConfig
from api.logging_setup import setup_logging
from api.main import create_app

logger = logging.getLogger(__name__)


def main():
    """Run the reputation API server."""
    config = ApiConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Invalid configuration: {error}")
        sys.exit(1)

    logger.info(f"Starting Reputation API on {config.host}:{config.port}")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Frontend URL: {config.frontend_url}")

    try:
        uvicorn.run(
            create_app(config),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            access_log=True,
        )
    except Exception as e:
        logger.error(f"Failed to start reputation API: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
